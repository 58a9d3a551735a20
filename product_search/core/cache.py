"""Bounded memo of ranked results per normalized query."""

from typing import Dict, List, Optional

import structlog

from ..models.match import SearchResult

logger = structlog.get_logger(__name__)


class QueryCache:
    """
    First-in first-out cache of search results.
    
    Entries are evicted in insertion order once ``max_size`` is exceeded.
    Reading an entry does not refresh its position.
    """
    
    def __init__(self, max_size: int = 100) -> None:
        """
        Initialize the cache.
        
        Args:
            max_size: Maximum number of cached queries
        """
        self.max_size = max_size
        self._entries: Dict[str, List[SearchResult]] = {}
    
    def get(self, key: str) -> Optional[List[SearchResult]]:
        """Return a copy of the cached results for a key, or None."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        return list(entry)
    
    def put(self, key: str, results: List[SearchResult]) -> None:
        """Store results, evicting the oldest insertions beyond capacity."""
        self._entries[key] = list(results)
        
        while len(self._entries) > self.max_size:
            oldest = next(iter(self._entries))
            del self._entries[oldest]
            logger.debug("Evicted cached query", query=oldest, cache_size=len(self._entries))
    
    def keys(self) -> List[str]:
        """Cached keys, oldest first."""
        return list(self._entries)
    
    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()
    
    def __contains__(self, key: object) -> bool:
        return key in self._entries
    
    def __len__(self) -> int:
        return len(self._entries)
