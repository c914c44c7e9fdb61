"""
Recency cache for eldamo-lookup query results.

A fixed-capacity least-recently-used cache: a hit makes the key the most
recently used one, and inserting into a full cache evicts the least
recently used key. Lookups are O(1) (OrderedDict keeps the recency order
as a linked list over a hash map).
"""

import threading
from collections import OrderedDict
from typing import Generic, Hashable, List, Optional, TypeVar

# Number of query results kept
DEFAULT_CACHE_SIZE = 40

K = TypeVar('K', bound=Hashable)
V = TypeVar('V')


class RecencyCache(Generic[K, V]):
    """
    Fixed-capacity LRU cache, safe to share between threads.

    Example:
        >>> cache = RecencyCache(2)
        >>> cache.put("a", 1); cache.put("b", 2)
        >>> cache.get("a")
        1
        >>> cache.put("c", 3)   # evicts "b"
        >>> "b" in cache
        False
    """

    def __init__(self, capacity: int = DEFAULT_CACHE_SIZE):
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.capacity = capacity
        self._items: "OrderedDict[K, V]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: K) -> Optional[V]:
        """Return the cached value and mark the key as just used, or None."""
        with self._lock:
            if key not in self._items:
                return None
            self._items.move_to_end(key)
            return self._items[key]

    def put(self, key: K, value: V) -> None:
        """Store a value as the most recently used, evicting the oldest if full."""
        with self._lock:
            if key in self._items:
                self._items.move_to_end(key)
            elif len(self._items) >= self.capacity:
                self._items.popitem(last=False)
            self._items[key] = value

    def keys(self) -> List[K]:
        """Keys from least to most recently used (next victim first)."""
        with self._lock:
            return list(self._items)

    def dump(self) -> str:
        """
        Render the cache for debugging.

        Keys are listed from least to most recently used; the next eviction
        victim is marked with '>' once the cache is full, and free slots
        are shown as '?'.
        """
        keys = self.keys()
        parts = [str(key) for key in keys]
        if len(keys) >= self.capacity:
            parts[0] = '>' + parts[0]
        else:
            parts.append('>?')
            parts.extend('?' * (self.capacity - len(keys) - 1))
        return ' '.join(parts)

    def __contains__(self, key: K) -> bool:
        with self._lock:
            return key in self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __repr__(self) -> str:
        return f"RecencyCache({len(self)}/{self.capacity})"
