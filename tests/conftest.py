from datetime import datetime, UTC

import pytest
from pytest import MonkeyPatch

from memshortener.types import LambdaConfiguration
from memshortener.dao.memory import ShortURLMemoryDAO
from memshortener.utils.constants import APP_ENV_ENV, APP_NAME_ENV, CONFIG_DIR_ENV, BASE_URL_ENV, LOG_LEVEL_ENV, AWS_SAM_LOCAL_ENV


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: MonkeyPatch) -> None:
    """Keep the developer's environment from leaking into tests."""
    for name in (APP_ENV_ENV, APP_NAME_ENV, CONFIG_DIR_ENV, BASE_URL_ENV, LOG_LEVEL_ENV, AWS_SAM_LOCAL_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config() -> LambdaConfiguration:
    return {
        'service_name': 'memshortener-test',
        'base_url': 'http://testhost:8080',
        'log_level': 'DEBUG',
    }


@pytest.fixture
def creation_time() -> datetime:
    return datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def dao(creation_time: datetime) -> ShortURLMemoryDAO:
    """Provide a fresh registry with a fixed clock."""
    return ShortURLMemoryDAO(clock=lambda: creation_time)
