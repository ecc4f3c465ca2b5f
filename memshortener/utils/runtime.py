"""Runtime utilities

Functions:
    running_locally() -> bool:
        True if the application runs on a developer machine, False otherwise.

Example:
    >>> from memshortener.utils.runtime import running_locally
    >>> os.environ['APP_ENV'] = 'local'
    >>> running_locally()
    True
    >>> os.environ['APP_ENV'] = 'dev'
    >>> running_locally()
    False
"""

import os

from memshortener.utils.constants import APP_ENV_ENV, AWS_SAM_LOCAL_ENV


def running_locally() -> bool:
    """Check if the application runs locally (local env or `sam local invoke`)

    An unset APP_ENV counts as local, matching app_env()'s default.
    """
    env = os.getenv(APP_ENV_ENV, 'local').lower()
    return env == 'local' or os.getenv(AWS_SAM_LOCAL_ENV) == 'true'
