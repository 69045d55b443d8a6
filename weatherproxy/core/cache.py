from __future__ import annotations

import time
from dataclasses import dataclass
from threading import Lock
from typing import Any, Callable, Dict, Optional, Tuple


def make_cache_key(latitude: str, longitude: str) -> str:
    """Build the cache key from the raw query strings, without normalising them."""
    return f"{latitude},{longitude}"


@dataclass(frozen=True)
class CacheEntry:
    timestamp: float
    payload: Any


class WeatherCache:
    """In-process TTL cache of upstream payloads.

    Stale entries are ignored on lookup but kept until the next store for the
    same key overwrites them; nothing is ever evicted.
    """

    def __init__(self, ttl_seconds: float, time_func: Callable[[], float] = time.monotonic) -> None:
        self.ttl_seconds = ttl_seconds
        self._time_func = time_func
        self._storage: Dict[str, CacheEntry] = {}
        self._lock = Lock()

    def lookup(self, key: str) -> Optional[Tuple[Any, float]]:
        with self._lock:
            entry = self._storage.get(key)
        if entry is None:
            return None
        age = self._time_func() - entry.timestamp
        if age >= self.ttl_seconds:
            return None
        return entry.payload, age

    def store(self, key: str, payload: Any) -> None:
        entry = CacheEntry(timestamp=self._time_func(), payload=payload)
        with self._lock:
            self._storage[key] = entry

    def __len__(self) -> int:
        return len(self._storage)


__all__ = ["CacheEntry", "WeatherCache", "make_cache_key"]
