"""Unit tests for runtime utilities in runtime.py.

Test coverage includes:

1. running_locally() behavior
"""

import pytest

from memshortener.utils.runtime import running_locally
from memshortener.utils.constants import APP_ENV_ENV, AWS_SAM_LOCAL_ENV


@pytest.mark.parametrize(
    'app_env, sam_flag, expected',
    [
        ('local', None, True),
        ('LOCAL', None, True),
        (None, None, True),
        ('dev', None, False),
        ('prod', None, False),
        ('dev', 'true', True),
        ('prod', 'false', False),
    ],
)
def test_running_locally(monkeypatch, app_env, sam_flag, expected):
    """running_locally() evaluates local execution correctly."""
    if app_env is None:
        monkeypatch.delenv(APP_ENV_ENV, raising=False)
    else:
        monkeypatch.setenv(APP_ENV_ENV, app_env)

    if sam_flag is None:
        monkeypatch.delenv(AWS_SAM_LOCAL_ENV, raising=False)
    else:
        monkeypatch.setenv(AWS_SAM_LOCAL_ENV, sam_flag)

    assert running_locally() is expected
