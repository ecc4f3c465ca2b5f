"""Unit tests for the ShortURLModel and RegistryStatsModel dataclasses.

Test coverage includes:

1. Model creation and field validation
   - Ensures instances can be created with valid field types and values.

2. Default hit count
   - Verifies that hits can be omitted and defaults to 0.

3. Equality semantics
   - Confirms that models with identical data compare equal and differing ones don't.

4. Immutability
   - Verifies that all fields are frozen and cannot be reassigned after
     object creation.
"""

from dataclasses import FrozenInstanceError, replace
from datetime import datetime, UTC

import pytest

from memshortener.models import ShortURLModel, RegistryStatsModel


@pytest.fixture
def short_url() -> ShortURLModel:
    return ShortURLModel(
        id=62,
        target='https://example.com/article/123',
        shortcode='10',
        created_at=datetime(2026, 1, 1, 0, 0, 0, tzinfo=UTC),
        hits=7,
    )


# -------------------------------------------------
# 1. Model creation and field type validation
# -------------------------------------------------


def test_valid_short_url_model_creation(short_url):
    """Ensure ShortURLModel can be created with valid data and types."""
    assert short_url.id == 62
    assert short_url.target == 'https://example.com/article/123'
    assert short_url.shortcode == '10'
    assert short_url.created_at == datetime(2026, 1, 1, 0, 0, 0, tzinfo=UTC)
    assert short_url.hits == 7


# -------------------------------------------------
# 2. Default hit count
# -------------------------------------------------


def test_hits_default_to_zero():
    """Verify that hits can be omitted and defaults to 0."""
    short_url = ShortURLModel(id=1, target='https://example.com', shortcode='1', created_at=datetime.now(UTC))
    assert short_url.hits == 0


# -------------------------------------------------
# 3. Equality semantics
# -------------------------------------------------


def test_short_url_model_equality(short_url):
    """Models with identical data should compare equal."""
    assert short_url == replace(short_url)


@pytest.mark.parametrize(
    'changes',
    [
        {'id': 63},
        {'target': 'https://example.com/article/456'},
        {'shortcode': '11'},
        {'created_at': datetime(2027, 1, 1, 0, 0, 0, tzinfo=UTC)},
        {'hits': 8},
    ],
)
def test_short_url_model_inequality(short_url, changes):
    """Models with differing data should not compare equal."""
    assert short_url != replace(short_url, **changes)


# -------------------------------------------------
# 4. Immutability
# -------------------------------------------------


@pytest.mark.parametrize(
    'field, new_value',
    [
        ('id', 63),
        ('target', 'https://example.com/article/456'),
        ('shortcode', '11'),
        ('created_at', datetime(2027, 1, 1, 0, 0, 0, tzinfo=UTC)),
        ('hits', 3000),
    ],
)
def test_short_url_model_immutability(short_url, field, new_value):
    """Attempting to modify fields should raise FrozenInstanceError."""
    with pytest.raises(FrozenInstanceError):
        setattr(short_url, field, new_value)


def test_registry_stats_model_immutability():
    stats = RegistryStatsModel(total_records=2, next_id=3, total_accesses=5)
    with pytest.raises(FrozenInstanceError):
        stats.total_accesses = 6
