"""Helper utilities for HTTP request handlers.

Functions:
    base_url(event, default) -> str
        Extract correct public base URL from an API Gateway event
    get_short_url(shortcode, base) -> str
        Get string representation of short URL for a given shortcode
    isoformat(moment) -> str
        Render a datetime as ISO-8601 UTC with a trailing 'Z'
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
    guarantee_500_response(handler) -> Callable
        Decorator: Turn unexpected handler failures into a 500 response

Example:
    Typical usage inside a handler:

        >>> from memshortener.utils.helpers import base_url
        >>> event = {
        ...     "requestContext": {
        ...         "domainName": "abc123.execute-api.us-east-1.amazonaws.com",
        ...         "stage": "Prod"
        ...     }
        ... }
        >>> base_url(event)
        'https://abc123.execute-api.us-east-1.amazonaws.com/Prod'

        >>> base_url({}, default='http://localhost:8080')
        'http://localhost:8080'
"""

import os
import functools
import logging
from datetime import datetime, UTC
from typing import Any
from collections.abc import Callable

from memshortener.exceptions import MissingEnvironmentVariableError
from memshortener.utils.constants import DEFAULT_BASE_URL, UNKNOWN_INTERNAL_SERVER_ERROR
from memshortener.utils.runtime import running_locally
from memshortener.utils.responses import response_500


logger = logging.getLogger(__name__)


def base_url(event: dict[str, Any], default: str = DEFAULT_BASE_URL) -> str:
    """Extract public base URL from API Gateway event

    If a custom domain is configured, the stage name is omitted.
    If using the default AWS execute-api domain, the stage name is included.
    Without any request context (local invocation, tests), `default` is used.

    Args:
        event (dict): API Gateway event object passed to the handler
        default (str): configured base URL, used when the event carries no domain

    Returns:
        str: Base URL, e.g.:
             - "https://sho.rt"
             - "https://abc123.execute-api.us-east-1.amazonaws.com/Prod"
    """
    request_context = event.get('requestContext') or {}
    domain = request_context.get('domainName', '')
    stage = request_context.get('stage', '')

    if domain and 'execute-api' not in domain:
        return f'https://{domain}'
    elif domain and stage:
        return f'https://{domain}/{stage}'
    elif domain:
        return f'https://{domain}'
    else:
        return default


def get_short_url(shortcode: str, base: str) -> str:
    """Get string representation of shortened URL

    Example:
        >>> get_short_url('abc123', 'http://localhost:8080/')
        'http://localhost:8080/abc123'
    """
    return f'{base.rstrip("/")}/{shortcode}'


def isoformat(moment: datetime) -> str:
    """Render a datetime as ISO-8601 in UTC, e.g. '2025-10-15T12:00:00.000Z'

    Naive datetimes are assumed to already be in UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('BASE_URL')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'BASE_URL'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator


def guarantee_500_response(handler: Callable[..., dict]) -> Callable[..., dict]:
    """Decorator: respond with 500 instead of crashing on unexpected errors

    When running locally the original exception is re-raised, so it surfaces
    in the developer's traceback instead of an opaque 500.

    Example:
        >>> @guarantee_500_response
        ... def lambda_handler(event, context, **kwargs):
        ...     raise RuntimeError('boom')
        >>> lambda_handler({}, None)['statusCode']
        500
    """
    @functools.wraps(handler)
    def wrapper(event: dict[str, Any], context: Any, *args, **kwargs) -> dict:
        try:
            return handler(event, context, *args, **kwargs)
        except Exception:
            if running_locally():
                raise
            logger.exception('Unhandled error in request handler. Responding with 500.')
            return response_500(error_code=UNKNOWN_INTERNAL_SERVER_ERROR)

    return wrapper
