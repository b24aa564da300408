"""Bounded least-recently-used cache for derived phone info.

Recency is tracked by both reads and writes.  When inserting a new key
into a full cache, the least recently used entry is evicted first, so the
cache never holds more than ``capacity`` entries.

``has`` and ``delete`` do not touch the recency order of other entries.

Every operation runs under one re-entrant lock, so the cache stays
consistent when a single instance is shared across threads.
``get_or_set`` holds the lock across the whole check-then-act sequence.
"""
from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Callable, Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_MISSING = object()


class LRUCache(Generic[K, V]):
    """Thread-safe LRU cache with a fixed maximum entry count."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1; got {capacity}")
        self._capacity = capacity
        self._data: OrderedDict[K, V] = OrderedDict()
        self._lock = threading.RLock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def size(self) -> int:
        with self._lock:
            return len(self._data)

    def __len__(self) -> int:
        return self.size

    def get(self, key: K, default: V | None = None) -> V | None:
        """Return the value for *key* and mark it most recently used."""
        with self._lock:
            value = self._data.get(key, _MISSING)
            if value is _MISSING:
                return default
            self._data.move_to_end(key)
            return value  # type: ignore[return-value]

    def set(self, key: K, value: V) -> None:
        """Insert or replace *key*, evicting the LRU entry when full."""
        with self._lock:
            if key in self._data:
                self._data.move_to_end(key)
            elif len(self._data) >= self._capacity:
                self._data.popitem(last=False)
            self._data[key] = value

    def get_or_set(self, key: K, factory: Callable[[], V]) -> V:
        """Return the cached value for *key*, computing it with *factory* on a miss."""
        with self._lock:
            value = self._data.get(key, _MISSING)
            if value is not _MISSING:
                self._data.move_to_end(key)
                return value  # type: ignore[return-value]
            value = factory()
            self.set(key, value)
            return value

    def has(self, key: K) -> bool:
        with self._lock:
            return key in self._data

    def delete(self, key: K) -> bool:
        """Remove *key*; return whether it was present."""
        with self._lock:
            return self._data.pop(key, _MISSING) is not _MISSING

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def keys(self) -> list[K]:
        """Snapshot of keys from least to most recently used."""
        with self._lock:
            return list(self._data.keys())
