import functools
from typing import TypeVar, Any
from collections.abc import Callable


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def read_locked(method: F) -> F:
    """Run a DAO method while holding the instance lock in read mode

    The decorated method's instance must expose a ReadWriteLock as `self.lock`.

    Args:
        method (Callable[..., Any]):
            DAO method which only reads shared state.

    Returns:
        Callable[..., Any]:
            Wrapped method which may run concurrently with other readers.

    Example:
        >>> @read_locked
        ... def count(self):
        ...     return self._counter
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self.lock.read_locked():
            return method(self, *args, **kwargs)

    return wrapper


def write_locked(method: F) -> F:
    """Run a DAO method while holding the instance lock in write mode

    The decorated method runs exclusively: no reader or other writer on the
    same instance observes its intermediate state.

    Example:
        >>> @write_locked
        ... def hit(self, shortcode):
        ...     ...
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self.lock.write_locked():
            return method(self, *args, **kwargs)

    return wrapper
