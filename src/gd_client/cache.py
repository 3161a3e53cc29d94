"""In-memory result cache with per-entry time-to-live."""

import time
from collections.abc import Callable, Hashable
from dataclasses import dataclass


@dataclass(frozen=True)
class CacheEntry:
    """A stored result. Servable while ``now - created_at < ttl``."""

    value: object
    created_at: float
    ttl: float

    def is_fresh(self, now: float) -> bool:
        """Check if the entry may still be served."""
        return now - self.created_at < self.ttl


class ResultCache:
    """Maps request identities to decoded results.

    Expired entries are dropped by the lookup that finds them. Concurrent writers to the same key
    simply overwrite each other; the last write wins along with its own ttl window. Stored values
    must not be mutated by callers.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        """Initialize an empty cache.

        Args:
            clock: Monotonic time source in seconds.

        """
        self._clock = clock
        self._entries: dict[Hashable, CacheEntry] = {}

    def get(self, key: Hashable) -> CacheEntry | None:
        """Return the fresh entry for key, or None if absent or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if not entry.is_fresh(self._clock()):
            del self._entries[key]
            return None
        return entry

    def put(self, key: Hashable, value: object, ttl: float) -> None:
        """Store a value. A non-positive ttl stores nothing."""
        if ttl <= 0:
            return
        self._entries[key] = CacheEntry(value=value, created_at=self._clock(), ttl=ttl)

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
