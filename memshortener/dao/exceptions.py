"""Exceptions related to Data Access Objects (DAO) operations.

Every exception carries a class-level `error_code` tag so callers can tell
failure kinds apart without comparing messages.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortURLNotFoundError:
        Raised when no ShortURLModel matches the requested shortcode or id.

    DataStoreError:
        Raised when the data store can't fulfil an otherwise valid request.

    IdSpaceExhaustedError:
        Raised when the registry has issued every 64-bit identifier.

Example:
    >>> from memshortener.dao.exceptions import ShortURLNotFoundError
    >>> raise ShortURLNotFoundError("Short URL with code 'abc123' not found.")
    Traceback (most recent call last):
        ...
    memshortener.dao.exceptions.ShortURLNotFoundError: Short URL with code 'abc123' not found.
"""

from memshortener.exceptions import MemShortenerError


class DAOError(MemShortenerError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class ShortURLNotFoundError(DAOError, LookupError):
    """Exception raised when a ShortURLModel is not found in the data store."""

    error_code = 'dao:short_url_not_found_error'


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store."""

    error_code = 'dao:data_store_error'


class IdSpaceExhaustedError(DataStoreError):
    """Exception raised when no identifier is left to assign to a new record."""

    error_code = 'dao:id_space_exhausted_error'
