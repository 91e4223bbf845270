"""Caller-owned memo of ranked search results."""

import threading
from collections import OrderedDict
from typing import Any, Dict, Optional, Tuple

CacheKey = Tuple[str, int, int]


class SearchCache:
    """
    Thread-safe mapping from (normalized query, threshold, limit) to a ranking.
    
    Entries are never invalidated by changes to the searched records: clear
    the cache, or use a fresh one, after replacing or mutating the collection.
    With ``max_size`` set, the least recently used entry is evicted once the
    cache is full; by default it grows without bound.
    """
    
    def __init__(self, max_size: Optional[int] = None) -> None:
        """
        Initialize the cache.
        
        Args:
            max_size: Maximum number of entries, None for unbounded
        """
        if max_size is not None and max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")
        
        self.max_size = max_size
        self._entries: "OrderedDict[CacheKey, Tuple[Any, ...]]" = OrderedDict()
        self._lock = threading.Lock()
        self._stats = {
            "hits": 0,
            "misses": 0,
            "evictions": 0,
        }
    
    @staticmethod
    def make_key(normalized_query: str, threshold: int, limit: int) -> CacheKey:
        """Build the composite key for one search."""
        return (normalized_query, threshold, limit)
    
    def get(self, key: CacheKey) -> Optional[Tuple[Any, ...]]:
        """Return the cached ranking for ``key`` or None."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._stats["misses"] += 1
                return None
            
            self._entries.move_to_end(key)
            self._stats["hits"] += 1
            return entry
    
    def set(self, key: CacheKey, ranking) -> None:
        """Store a ranking, evicting the oldest entry when full."""
        with self._lock:
            self._entries[key] = tuple(ranking)
            self._entries.move_to_end(key)
            
            if self.max_size is not None:
                while len(self._entries) > self.max_size:
                    self._entries.popitem(last=False)
                    self._stats["evictions"] += 1
    
    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._entries.clear()
    
    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            stats = self._stats.copy()
            stats["size"] = len(self._entries)
            stats["max_size"] = self.max_size
        return stats
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
    
    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
