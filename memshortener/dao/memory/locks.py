"""Readers-writer lock for in-process data stores

Classes:
    ReadWriteLock:
        Writer-preferring readers-writer lock built on threading.Condition.

Example:
    >>> lock = ReadWriteLock()
    >>> with lock.read_locked():
    ...     pass  # any number of readers may be here at once
    >>> with lock.write_locked():
    ...     pass  # exclusive against readers and other writers
"""

import threading
from contextlib import contextmanager
from collections.abc import Iterator


__all__ = ['ReadWriteLock']


class ReadWriteLock:
    """Writer-preferring readers-writer lock.

    Any number of readers may hold the lock together. A writer holds it alone.
    Once a writer is waiting, newly arriving readers queue behind it, so a
    steady stream of readers cannot starve writers.

    The lock is not reentrant: a thread holding it in either mode must not
    acquire it again.
    """

    def __init__(self):
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0
        self._writers_waiting = 0
        self._writing = False

    def acquire_read(self) -> None:
        with self._condition:
            while self._writing or self._writers_waiting:
                self._condition.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._condition:
            if self._readers <= 0:
                raise RuntimeError('Cannot release a read lock that is not held.')
            self._readers -= 1
            if self._readers == 0:
                self._condition.notify_all()

    def acquire_write(self) -> None:
        with self._condition:
            self._writers_waiting += 1
            try:
                while self._writing or self._readers:
                    self._condition.wait()
            finally:
                self._writers_waiting -= 1
            self._writing = True

    def release_write(self) -> None:
        with self._condition:
            if not self._writing:
                raise RuntimeError('Cannot release a write lock that is not held.')
            self._writing = False
            self._condition.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()

    @property
    def readers(self) -> int:
        """Number of threads currently holding the lock in read mode."""
        return self._readers

    @property
    def writing(self) -> bool:
        """True while a thread holds the lock in write mode."""
        return self._writing
