"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage mechanism.

Responsibilities:
    - Provide an interface for creating and retrieving ShortURLModel objects.
    - Guarantee idempotent creation: one record per distinct target URL.
    - Standardize error handling across data store implementations.
    - Enforce a consistent API for use by request handlers.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from memshortener.dao.memory import ShortURLMemoryDAO

        >>> dao = ShortURLMemoryDAO()
        >>> short_url = dao.create('https://example.com/blog/article-123')
        >>> short_url.shortcode
        '1'

        >>> dao.hit('1')
        1
        >>> dao.get('1').hits
        1
"""

from abc import ABC, abstractmethod

from memshortener.models import ShortURLModel, RegistryStatsModel


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        create(target: str, **kwargs) -> ShortURLModel:
            Return the record for target, creating it on first submission.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve a record by shortcode.
            Raises InvalidShortcodeError on malformed shortcodes.
            Raises ShortURLNotFoundError if the entry does not exist.

        get_by_id(id: int, **kwargs) -> ShortURLModel:
            Retrieve a record by numeric identifier.
            Raises ShortURLNotFoundError if the entry does not exist.

        hit(shortcode: str, **kwargs) -> int:
            Record one access and return the updated hit count.
            Raises InvalidShortcodeError on malformed shortcodes.
            Raises ShortURLNotFoundError if the entry does not exist.

        count(**kwargs) -> int:
            Return the identifier counter (last issued id).

        stats(**kwargs) -> RegistryStatsModel:
            Return a consistent point-in-time snapshot of store totals.

    Subclassing:
        Datastore-specific implementations must extend this class and
        implement all abstract methods.

    NOTE:
        - Records live as long as the data store. The DAO does not provide
          an interface to delete or update entries.
    """

    @abstractmethod
    def create(self, target: str, **kwargs) -> ShortURLModel:
        """Return the record for target, creating it if it doesn't exist yet.

        Args:
            target (str):
                Normalized long URL. Validation is the caller's job.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLModel: The new record, or the existing one for target.

        Raises:
            DataStoreError:
                If the data store can't allocate a new record.
        """
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a ShortURLModel from the data store by its shortcode.

        Args:
            shortcode (str):
                The shortcode of the ShortURLModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLModel: The ShortURLModel snapshot.

        Raises:
            InvalidShortcodeError:
                If shortcode is not a well-formed Base62 string.

            ShortURLNotFoundError:
                If no ShortURLModel with the given shortcode exists.
        """
        pass

    @abstractmethod
    def get_by_id(self, id: int, **kwargs) -> ShortURLModel:
        """Retrieve a ShortURLModel from the data store by its identifier.

        Raises:
            ShortURLNotFoundError:
                If no ShortURLModel with the given id exists.
        """
        pass

    @abstractmethod
    def hit(self, shortcode: str, **kwargs) -> int:
        """Increment the access counter of a short URL by exactly one.

        Args:
            shortcode (str):
                The shortcode of the accessed short URL.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            int: The hit count after the increment.

        Raises:
            InvalidShortcodeError:
                If shortcode is not a well-formed Base62 string.

            ShortURLNotFoundError:
                If no ShortURLModel with the given shortcode exists.
        """
        pass

    @abstractmethod
    def count(self, **kwargs) -> int:
        """Retrieve the current identifier counter value (last issued id)."""
        pass

    @abstractmethod
    def stats(self, **kwargs) -> RegistryStatsModel:
        """Retrieve store totals as a single consistent snapshot."""
        pass
