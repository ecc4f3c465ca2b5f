"""Unit tests for helper functions in helpers.py.

Test coverage includes:

1. base_url() correct extraction
   - 1.1. Ensures URLs include the stage (e.g., `/Prod`) for execute-api domains.
   - 1.2. Ensures URLs do NOT include stage information for custom domains.
   - 1.3. Confirms the configured default is returned when no domain is present.
   - 1.4. Ensures graceful fallback behavior when API Gateway data is partially missing.

2. get_short_url() builds the short URL string representation

3. isoformat() renders UTC timestamps with millisecond precision

4. require_environment() decorator behavior
   - 4.1. Ensures decorated functions execute when all env vars are present.
   - 4.2. Ensures missing or empty env vars raise MissingEnvironmentVariableError.

5. guarantee_500_response() decorator behavior
"""

import json
from datetime import datetime, timedelta, timezone, UTC

import pytest

from memshortener.exceptions import MissingEnvironmentVariableError
from memshortener.utils.helpers import (
    base_url,
    get_short_url,
    isoformat,
    require_environment,
    guarantee_500_response,
)


# -------------------------------
# 1.1. AWS default domain handling
# -------------------------------


@pytest.mark.parametrize(
    'domain, stage, expected',
    [
        ('abc123.execute-api.us-east-1.amazonaws.com', 'Dev', 'https://abc123.execute-api.us-east-1.amazonaws.com/Dev'),
        ('abc123.execute-api.us-east-1.amazonaws.com', 'Prod', 'https://abc123.execute-api.us-east-1.amazonaws.com/Prod'),
        ('abc123.execute-api.us-east-1.amazonaws.com', '', 'https://abc123.execute-api.us-east-1.amazonaws.com'),
    ],
)
def test_base_url_with_aws_domain(domain, stage, expected):
    """Ensure base_url() appends stage for default AWS execute-api domains."""
    event = {
        'requestContext': {
            'domainName': domain,
            'stage': stage,
        }
    }
    assert base_url(event) == expected


# -------------------------------
# 1.2. Custom domain handling
# -------------------------------


@pytest.mark.parametrize(
    'domain, stage, expected',
    [
        ('sho.rt', 'Prod', 'https://sho.rt'),
        ('links.example.com', 'Dev', 'https://links.example.com'),
    ],
)
def test_base_url_with_custom_domain(domain, stage, expected):
    """Ensure base_url() excludes stage for custom user-defined domains."""
    event = {
        'requestContext': {
            'domainName': domain,
            'stage': stage,
        }
    }
    assert base_url(event) == expected


# -------------------------------
# 1.3. Default fallback behavior
# -------------------------------


def test_base_url_default_fallback():
    """Ensure base_url() returns the localhost default when no domain is provided."""
    assert base_url({}) == 'http://localhost:8080'


def test_base_url_configured_fallback():
    assert base_url({}, default='https://sho.rt') == 'https://sho.rt'


# -------------------------------
# 1.4. Missing or partial requestContext
# -------------------------------


@pytest.mark.parametrize(
    'event',
    [
        {'requestContext': {}},
        {'requestContext': None},
        {'requestContext': {'domainName': ''}},
        {'requestContext': {'stage': 'Dev'}},
    ],
)
def test_base_url_handles_incomplete_context(event):
    """Ensure base_url() gracefully falls back when requestContext is incomplete."""
    assert base_url(event, default='http://testhost:8080') == 'http://testhost:8080'


# -------------------------------
# 2. Get short url string representation
# -------------------------------


@pytest.mark.parametrize(
    'shortcode, base, expected',
    [
        ('1', 'http://localhost:8080', 'http://localhost:8080/1'),
        ('abc123', 'https://sho.rt/', 'https://sho.rt/abc123'),
        ('10', 'https://abc123.execute-api.us-east-1.amazonaws.com/Prod', 'https://abc123.execute-api.us-east-1.amazonaws.com/Prod/10'),
    ],
)
def test_get_short_url(shortcode, base, expected):
    """Ensure get_short_url() joins base and shortcode with exactly one slash."""
    assert get_short_url(shortcode, base) == expected


# -------------------------------
# 3. isoformat() rendering
# -------------------------------


@pytest.mark.parametrize(
    'moment, expected',
    [
        (datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC), '2025-10-15T12:00:00.000Z'),
        (datetime(2025, 10, 15, 12, 0, 0, 123456, tzinfo=UTC), '2025-10-15T12:00:00.123Z'),
        (datetime(2025, 10, 15, 14, 0, 0, tzinfo=timezone(timedelta(hours=2))), '2025-10-15T12:00:00.000Z'),
        (datetime(2025, 10, 15, 12, 0, 0), '2025-10-15T12:00:00.000Z'),
    ],
)
def test_isoformat(moment, expected):
    assert isoformat(moment) == expected


# -------------------------------
# 4.1. require_environment() happy path
# -------------------------------


def test_require_environment_happy_path(monkeypatch):
    """4.1. Decorated function executes when all env vars are present."""
    monkeypatch.setenv('ENV1', 'value1')
    monkeypatch.setenv('ENV2', 'value2')

    @require_environment('ENV1', 'ENV2')
    def sample_function(x: int) -> int:
        return x + 1

    assert sample_function(1) == 2


# -------------------------------
# 4.2. require_environment() missing or empty env vars
# -------------------------------


@pytest.mark.parametrize(
    'env_setup, missing_names',
    [
        ({'ENV1': None, 'ENV2': 'value2'}, ["'ENV1'"]),
        ({'ENV1': '', 'ENV2': 'value2'}, ["'ENV1'"]),
        ({'ENV1': None, 'ENV2': None}, ["'ENV1'", "'ENV2'"]),
        ({'ENV1': '', 'ENV2': ''}, ["'ENV1'", "'ENV2'"]),
    ],
)
def test_require_environment_missing_or_empty(monkeypatch, env_setup, missing_names):
    """4.2. Missing or empty env vars raise a descriptive MissingEnvironmentVariableError."""
    for name, value in env_setup.items():
        if value is None:
            monkeypatch.delenv(name, raising=False)
        else:
            monkeypatch.setenv(name, value)

    @require_environment('ENV1', 'ENV2')
    def sample_function() -> None:
        pass

    expected_message = f'Missing required environment variables: {", ".join(missing_names)}'
    with pytest.raises(MissingEnvironmentVariableError, match=expected_message):
        sample_function()


def test_missing_environment_variable_error_is_key_error():
    assert issubclass(MissingEnvironmentVariableError, KeyError)


# -------------------------------
# 5. guarantee_500_response() behavior
# -------------------------------


def test_guarantee_500_response(monkeypatch):
    """5.1. Faulty handler returns 500 response when not running locally."""
    monkeypatch.setattr('memshortener.utils.helpers.running_locally', lambda: False)

    @guarantee_500_response
    def faulty_lambda_handler(event, context, **kwargs):
        raise RuntimeError('boom')

    response = faulty_lambda_handler({}, None, dao=None, config={})
    body = json.loads(response['body'])

    assert response['statusCode'] == 500
    assert body['message'] == 'Internal Server Error'
    assert body['error_code'] == 'UNKNOWN_INTERNAL_SERVER_ERROR'


def test_guarantee_500_response_reraises_when_running_locally(monkeypatch):
    """5.2. Faulty handler reraises the original exception when running locally."""
    monkeypatch.setattr('memshortener.utils.helpers.running_locally', lambda: True)

    @guarantee_500_response
    def faulty_lambda_handler(event, context):
        raise RuntimeError('boom')

    with pytest.raises(RuntimeError, match='boom'):
        faulty_lambda_handler({}, None)


def test_guarantee_500_response_passes_through_results(monkeypatch):
    monkeypatch.setattr('memshortener.utils.helpers.running_locally', lambda: False)

    @guarantee_500_response
    def lambda_handler(event, context, **kwargs):
        return {'statusCode': 200, 'kwargs': kwargs}

    assert lambda_handler({}, None, dao='dao') == {'statusCode': 200, 'kwargs': {'dao': 'dao'}}
    assert lambda_handler.__name__ == 'lambda_handler'
