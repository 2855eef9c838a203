import time
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class TTLValueCache(Generic[T]):
    """Holds a single value for ttl_seconds after it was set."""

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._value: Optional[T] = None
        self._stored_at: Optional[float] = None

    def get(self) -> Optional[T]:
        """Cached value, or None when empty or expired."""
        if self._stored_at is None:
            return None
        if self._clock() - self._stored_at >= self.ttl_seconds:
            return None
        return self._value

    def peek(self) -> Optional[T]:
        """Last value set, ignoring expiry."""
        return self._value

    def set(self, value: T) -> None:
        self._value = value
        self._stored_at = self._clock()

    def invalidate(self) -> None:
        self._value = None
        self._stored_at = None
