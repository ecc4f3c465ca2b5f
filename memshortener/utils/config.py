"""Utility functions for application configuration management.

Configuration lives in one YAML document per application environment
(`APP_ENV`), shipped inside the package:

    memshortener/config/
    ├── local.yml
    ├── dev.yml
    └── prod.yml

A document looks like this:

    service_name: memshortener
    base_url: http://localhost:8080
    log_level: DEBUG

Selected keys can be overridden through environment variables, which take
precedence over the YAML document:

    BASE_URL   -> base_url
    LOG_LEVEL  -> log_level

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str
        Return the application name (`APP_NAME`), defaulting to `'memshortener'`.

    config_dir() -> Path
        Return the directory holding the YAML documents, using `CONFIG_DIR`
        when available.

    load_config(env: str | None = None) -> dict
        Load, override and validate the configuration for an environment.

Example:
    >>> from memshortener.utils.config import load_config
    >>> config = load_config()
    >>> config['base_url']
    'http://localhost:8080'
"""

import os
import logging
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

import yaml

from memshortener.exceptions import BadConfigurationError
from memshortener.utils.constants import (
    APP_ENV_ENV,
    APP_NAME_ENV,
    CONFIG_DIR_ENV,
    BASE_URL_ENV,
    LOG_LEVEL_ENV,
    DEFAULT_APP_NAME,
    DEFAULT_BASE_URL,
    DEFAULT_LOG_LEVEL,
)


logger = logging.getLogger(__name__)

LOG_LEVELS = frozenset({'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'})

# config key -> environment variable overriding it
ENVIRONMENT_OVERRIDES = {
    'base_url': BASE_URL_ENV,
    'log_level': LOG_LEVEL_ENV,
}


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(APP_ENV_ENV, 'local').lower()


def app_name() -> str:
    """Return the current application name by reading 'APP_NAME'

    Example:
        >>> os.environ['APP_NAME'] = 'memshortener'
        >>> app_name()
        'memshortener'
    """
    return os.environ.get(APP_NAME_ENV) or DEFAULT_APP_NAME


def config_dir() -> Path:
    """Return the directory holding per-environment YAML documents

    Uses CONFIG_DIR when set. Falls back to the `config/` directory
    packaged next to this module's parent package.
    """
    return Path(os.environ.get(CONFIG_DIR_ENV) or Path(__file__).resolve().parent.parent / 'config')


def _validate(config: dict[str, Any]) -> dict[str, Any]:
    components = urlsplit(config['base_url'])
    if components.scheme not in {'http', 'https'} or not components.netloc:
        raise BadConfigurationError(f"base_url must be an absolute http(s) URL (given value: {config['base_url']!r}).")

    config['log_level'] = str(config['log_level']).upper()
    if config['log_level'] not in LOG_LEVELS:
        raise BadConfigurationError(f"log_level must be one of {sorted(LOG_LEVELS)} (given value: {config['log_level']!r}).")

    return config


def load_config(env: str | None = None) -> dict[str, Any]:
    """Load configuration for an application environment

    Args:
        env (str | None):
            Environment name. Defaults to app_env().

    Returns:
        dict: Configuration with at least 'service_name', 'base_url' and 'log_level'.

    Raises:
        FileNotFoundError:
            If no YAML document exists for the environment.
        BadConfigurationError:
            If the document isn't a mapping or holds invalid values.

    Example:
        >>> os.environ['BASE_URL'] = 'https://sho.rt'
        >>> load_config('dev')['base_url']
        'https://sho.rt'
    """
    env = env or app_env()
    path = config_dir() / f'{env}.yml'

    logger.debug('Loading configuration.', extra={'appEnv': env, 'path': str(path)})
    with path.open(encoding='utf-8') as f:
        try:
            document = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise BadConfigurationError(f'Configuration file {path} is not valid YAML.') from e

    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise BadConfigurationError(f'Configuration file {path} must contain a mapping (given type: {type(document).__name__}).')

    config = {
        'service_name': app_name(),
        'base_url': DEFAULT_BASE_URL,
        'log_level': DEFAULT_LOG_LEVEL,
        **document,
    }
    for key, variable in ENVIRONMENT_OVERRIDES.items():
        if os.environ.get(variable):
            config[key] = os.environ[variable]

    config = _validate(config)
    logger.debug('Loaded configuration.', extra={'appEnv': env, 'baseUrl': config['base_url']})
    return config
