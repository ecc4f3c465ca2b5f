"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` once, when the application starts,
before any other logging is done. ShortenerApplication does this for you.

Logging format (one JSON document per line on stdout):
{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "INFO",
    "logger": "memshortener.lambdas.redirect_url.app",
    "message": "Redirecting client to target URL. Responding with 301.",
    "service": "memshortener",
    "shortcode": "1"
}

Fields passed via `extra={...}` are attached to the document as-is.
Values JSON can't encode natively (datetimes, paths, ...) are rendered with str().
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from memshortener.utils.constants import LOG_LEVEL_ENV, DEFAULT_APP_NAME, DEFAULT_LOG_LEVEL


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras and the service name"""

    STANDARD_ATTRS = frozenset(logging.LogRecord('', 0, '', 0, '', (), None).__dict__) | {'asctime', 'message', 'taskName'}

    def __init__(self, service: str = DEFAULT_APP_NAME):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        # fmt: off
        timestamp = datetime.fromtimestamp(record.created, tz=UTC) \
                            .isoformat(timespec='milliseconds') \
                            .replace('+00:00', 'Z')
        # fmt: on

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'service': self.service,
        }

        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS:
                log[key] = value

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        return json.dumps(log, default=str)


def initialize_logging(level: str | None = None, service: str = DEFAULT_APP_NAME) -> None:
    """Configure the root logger to emit JSON lines on stdout

    Args:
        level (str | None):
            Log level name. Defaults to LOG_LEVEL, then INFO.
        service (str):
            Service name attached to every log document.
    """
    log_level = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                    'service': service,
                }
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {
                'level': log_level,
                'handlers': ['stdout'],
            },
        }
    )
