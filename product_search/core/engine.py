"""Main search engine implementation."""

import time
from typing import Any, Dict, Iterable, List, Optional, Tuple

import structlog

from ..config.search_config import SearchConfig
from ..models.match import MatchKind, SearchResult
from ..models.product import Product
from .cache import QueryCache
from .code_matcher import CodeMatcher
from .description_matcher import DescriptionMatcher
from .normalizer import TextNormalizer
from .ranker import Ranker

logger = structlog.get_logger(__name__)


def _empty_stats() -> Dict[str, Any]:
    return {
        "total_queries": 0,
        "cache_hits": 0,
        "cache_misses": 0,
        "no_matches": 0,
        "total_execution_time": 0.0,
        "match_kinds": {kind.value: 0 for kind in MatchKind},
    }


class SearchEngine:
    """
    In-memory product search over a catalog snapshot.
    
    Each product is first tested against its code and then against its
    description; the first matching step produces that product's single
    result. Ranked results are memoized per normalized query.
    
    Not safe for concurrent mutation: ``replace_catalog`` and ``clear_cache``
    must not run while another thread is inside ``search``.
    """
    
    def __init__(
        self,
        catalog: Iterable[Product] = (),
        config: Optional[SearchConfig] = None,
    ) -> None:
        """
        Initialize the search engine.
        
        Args:
            catalog: Products to search
            config: Engine configuration (defaults apply when None)
        """
        self.config = config or SearchConfig()
        self.normalizer = TextNormalizer()
        self.code_matcher = CodeMatcher()
        self.description_matcher = DescriptionMatcher(self.config, self.normalizer)
        self.ranker = Ranker(self.config.max_results)
        self.cache = QueryCache(self.config.cache_max_size)
        self._catalog: Tuple[Product, ...] = tuple(catalog)
        
        # Observational counters only; they never influence results
        self._stats = _empty_stats()
    
    @property
    def catalog(self) -> Tuple[Product, ...]:
        """The current catalog snapshot."""
        return self._catalog
    
    def search(self, query: str) -> List[SearchResult]:
        """
        Search the catalog.
        
        Args:
            query: Free-text or numeric query
            
        Returns:
            Ranked results, best first; empty for blank queries
        """
        if not query or not query.strip():
            return []
        
        normalized_query = self.normalizer.normalize(query)
        if not normalized_query:
            # Nothing left after stripping diacritics
            return []
        
        start_time = time.time()
        self._stats["total_queries"] += 1
        
        cached = self.cache.get(normalized_query)
        if cached is not None:
            self._stats["cache_hits"] += 1
            self._record(cached, start_time)
            return cached
        
        self._stats["cache_misses"] += 1
        results = self.ranker.rank(self._match_catalog(normalized_query))
        self.cache.put(normalized_query, results)
        self._record(results, start_time)
        
        return list(results)
    
    def is_cached(self, query: str) -> bool:
        """Whether the normalized form of ``query`` has cached results."""
        if not query or not query.strip():
            return False
        return self.normalizer.normalize(query) in self.cache
    
    def replace_catalog(self, catalog: Iterable[Product]) -> None:
        """
        Swap the catalog snapshot and drop every cached result.
        
        Args:
            catalog: New products to search
        """
        previous_size = len(self._catalog)
        self._catalog = tuple(catalog)
        self.cache.clear()
        logger.info(
            "Catalog replaced",
            previous_size=previous_size,
            catalog_size=len(self._catalog),
        )
    
    def clear_cache(self) -> None:
        """Drop every cached result, keeping the catalog."""
        cleared = len(self.cache)
        self.cache.clear()
        logger.debug("Query cache cleared", cleared_entries=cleared)
    
    def _match_catalog(self, query: str) -> List[SearchResult]:
        """Produce at most one result per product."""
        results = []
        
        for product in self._catalog:
            result = self.code_matcher.match(product, query)
            if result is None:
                result = self.description_matcher.match(product, query)
            if result is not None:
                results.append(result)
        
        return results
    
    def _record(self, results: List[SearchResult], start_time: float) -> None:
        """Update statistics for a finished query."""
        self._stats["total_execution_time"] += (time.time() - start_time) * 1000
        if results:
            self._stats["match_kinds"][results[0].match_kind.value] += 1
        else:
            self._stats["no_matches"] += 1
    
    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        stats = dict(self._stats)
        stats["match_kinds"] = dict(self._stats["match_kinds"])
        
        total_queries = stats["total_queries"]
        if total_queries > 0:
            stats["average_execution_time_ms"] = stats["total_execution_time"] / total_queries
            stats["cache_hit_rate"] = stats["cache_hits"] / total_queries
            stats["no_match_rate"] = stats["no_matches"] / total_queries
        else:
            stats["average_execution_time_ms"] = 0.0
            stats["cache_hit_rate"] = 0.0
            stats["no_match_rate"] = 0.0
        
        stats["catalog_size"] = len(self._catalog)
        stats["cache_size"] = len(self.cache)
        
        return stats
    
    def reset_stats(self) -> None:
        """Reset statistics without touching the catalog or cache."""
        self._stats = _empty_stats()
