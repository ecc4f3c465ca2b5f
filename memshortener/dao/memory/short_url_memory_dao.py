"""Data Access Object (DAO) implementation for managing shortened URLs in process memory

This module provides a thread-safe, in-memory implementation of ShortURLBaseDAO.
It is the registry of all short URL records for one running process.

Responsibilities:
    - Assign sequential identifiers and derive Base62 shortcodes from them;
    - Guarantee one record per distinct target URL (idempotent creation);
    - Count accesses per record without losing concurrent increments;
    - Serve consistent lookups and totals to many concurrent threads.

Storage layout:
    - `_records`: authoritative arena, `_records[id - 1]` holds the record with that id;
    - `_ids_by_shortcode`: shortcode -> id;
    - `_ids_by_target`: target URL -> id.
    The secondary indices store ids only, so a record exists in exactly one place.

Classes:
    ShortURLMemoryDAO:
        DAO for storing and retrieving ShortURLModel in process memory.

Example:
    >>> from memshortener.dao.memory import ShortURLMemoryDAO

    >>> dao = ShortURLMemoryDAO()
    >>> dao.create('http://example.com')
    ShortURLModel(id=1, target='http://example.com', shortcode='1', created_at=..., hits=0)
    >>> dao.create('http://example.com').id
    1
    >>> dao.hit('1')
    1
    >>> dao.stats()
    RegistryStatsModel(total_records=1, next_id=2, total_accesses=1)
"""

import logging
from dataclasses import replace
from datetime import datetime, UTC
from collections.abc import Callable

from beartype import beartype

from memshortener.models import ShortURLModel, RegistryStatsModel
from memshortener.dao.base import ShortURLBaseDAO
from memshortener.dao.memory.locks import ReadWriteLock
from memshortener.dao.memory.helpers import read_locked, write_locked
from memshortener.dao.exceptions import ShortURLNotFoundError, IdSpaceExhaustedError
from memshortener.exceptions import InvalidShortcodeError
from memshortener.utils.shortener import encode, is_valid_shortcode
from memshortener.utils.constants import MAX_ID


logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ShortURLMemoryDAO(ShortURLBaseDAO):
    """In-memory Data Access Object (DAO) for managing short URL records

    All shared state (arena, indices, counters) is guarded by a single
    ReadWriteLock owned by the instance. Lookups and totals take the lock in
    read mode; create() and hit() take it in write mode.

    Instances are fully independent. Create one per application and pass it
    to whoever needs it.

    Attributes:
        lock (ReadWriteLock):
            Guard for every piece of mutable state in this DAO.
        clock (Callable[[], datetime]):
            Source of creation timestamps.

    Methods:
        create(target: str, **kwargs) -> ShortURLModel:
            Return the record for target, creating it on first submission.
            Raises IdSpaceExhaustedError when all 64-bit identifiers are used.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve a record by shortcode.
            Raises InvalidShortcodeError on malformed shortcodes.
            Raises ShortURLNotFoundError when the shortcode doesn't exist.

        get_by_id(id: int, **kwargs) -> ShortURLModel:
            Retrieve a record by identifier.
            Raises ShortURLNotFoundError when the id doesn't exist.

        hit(shortcode: str, **kwargs) -> int:
            Increment a record's hit count and return the new value.

        count(**kwargs) -> int:
            Return the last issued identifier (0 when empty).

        stats(**kwargs) -> RegistryStatsModel:
            Return total records, next id and total accesses from one instant.

        all(**kwargs) -> list[ShortURLModel]:
            Return snapshots of every record in identifier order.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None):
        """Initialize an empty in-memory registry

        Args:
            clock (Optional[Callable[[], datetime]]):
                Zero-argument callable returning the current time.
                Defaults to timezone-aware UTC wall-clock time.
        """
        self.lock = ReadWriteLock()
        self.clock = clock or _utcnow

        self._records: list[ShortURLModel] = []
        self._ids_by_shortcode: dict[str, int] = {}
        self._ids_by_target: dict[str, int] = {}
        self._next_id = 1
        self._total_accesses = 0
        self._last_created_at: datetime | None = None

    @write_locked
    @beartype
    def create(self, target: str, **kwargs) -> ShortURLModel:
        """Return the record for target, creating it on first submission

        Dedup check, id reservation, shortcode derivation and index insertion
        happen under one write lock, so no other thread ever observes a
        half-inserted record and every call either creates exactly one record
        or returns the existing one.

        Args:
            target (str):
                Normalized long URL. This DAO does no URL parsing.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLModel:
                Snapshot of the new or already existing record.

        Raises:
            IdSpaceExhaustedError:
                If the identifier counter has passed 2**64 - 1.

        Example:
            >>> dao.create('https://example.com').shortcode
            '1'
            >>> dao.create('https://other.com').shortcode
            '2'
            >>> dao.create('https://example.com').shortcode
            '1'
        """
        existing_id = self._ids_by_target.get(target)
        if existing_id is not None:
            short_url = self._records[existing_id - 1]
            logger.debug('Target URL already shortened.', extra={'shortcode': short_url.shortcode, 'id': short_url.id})
            return short_url

        id = self._next_id
        if id > MAX_ID:
            raise IdSpaceExhaustedError(f'Identifier space exhausted (last issued id: {id - 1}).')

        # Creation timestamps never go backwards, even if the wall clock does
        created_at = self.clock()
        if self._last_created_at is not None and created_at < self._last_created_at:
            created_at = self._last_created_at

        short_url = ShortURLModel(id=id, target=target, shortcode=encode(id), created_at=created_at, hits=0)

        self._records.append(short_url)
        self._ids_by_shortcode[short_url.shortcode] = id
        self._ids_by_target[target] = id
        self._next_id = id + 1
        self._last_created_at = created_at

        logger.debug('Created short URL record.', extra={'shortcode': short_url.shortcode, 'id': id})
        return short_url

    @read_locked
    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a stored short URL record by shortcode

        Args:
            shortcode (str):
                The Base62 shortcode of the record.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLModel:
                Snapshot of the record, including its current hit count.

        Raises:
            InvalidShortcodeError:
                If shortcode is empty or contains non-Base62 characters.
            ShortURLNotFoundError:
                If no record has this shortcode.

        Example:
            >>> dao.get('1')
            ShortURLModel(id=1, target='https://example.com', shortcode='1', ...)
        """
        return self._records[self._lookup_shortcode(shortcode) - 1]

    @read_locked
    @beartype
    def get_by_id(self, id: int, **kwargs) -> ShortURLModel:
        """Retrieve a stored short URL record by identifier

        Raises:
            ShortURLNotFoundError:
                If no record has this identifier.
        """
        if not 1 <= id <= len(self._records):
            raise ShortURLNotFoundError(f'Short URL with id {id} not found.')
        return self._records[id - 1]

    @write_locked
    @beartype
    def hit(self, shortcode: str, **kwargs) -> int:
        """Increment the hit counter of a short URL by exactly one

        The arena slot is swapped for a fresh snapshot with the incremented
        count. Previously returned snapshots keep their old value.

        Args:
            shortcode (str):
                The Base62 shortcode of the accessed record.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            int:
                The record's hit count after this access.

        Raises:
            InvalidShortcodeError:
                If shortcode is empty or contains non-Base62 characters.
            ShortURLNotFoundError:
                If no record has this shortcode.

        Example:
            >>> dao.hit('1')
            1
            >>> dao.hit('1')
            2
        """
        index = self._lookup_shortcode(shortcode) - 1
        short_url = replace(self._records[index], hits=self._records[index].hits + 1)
        self._records[index] = short_url
        self._total_accesses += 1
        return short_url.hits

    @read_locked
    def count(self, **kwargs) -> int:
        """Retrieve the identifier counter (last issued id)

        Example:
            >>> dao.count()
            2
        """
        return self._next_id - 1

    @read_locked
    def stats(self, **kwargs) -> RegistryStatsModel:
        """Retrieve registry totals as one consistent snapshot

        All fields are read under the same read lock, so the result never
        mixes values from before and after a concurrent create() or hit().

        Example:
            >>> dao.stats()
            RegistryStatsModel(total_records=2, next_id=3, total_accesses=5)
        """
        return RegistryStatsModel(
            total_records=len(self._records),
            next_id=self._next_id,
            total_accesses=self._total_accesses,
        )

    @read_locked
    def all(self, **kwargs) -> list[ShortURLModel]:
        """Return snapshots of every record, ordered by identifier."""
        return list(self._records)

    @read_locked
    def __len__(self) -> int:
        return len(self._records)

    def _lookup_shortcode(self, shortcode: str) -> int:
        # Caller must hold the lock
        if not is_valid_shortcode(shortcode):
            raise InvalidShortcodeError(f"Invalid shortcode format: '{shortcode}'.")
        id = self._ids_by_shortcode.get(shortcode)
        if id is None:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
        return id
