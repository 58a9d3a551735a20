"""Ordering and truncation of per-product results."""

from typing import Iterable, List

from ..models.match import SearchResult


def ranking_key(result: SearchResult):
    """Sort key: score descending, then match-kind priority descending."""
    return -result.score, -result.match_kind.priority


class Ranker:
    """Sorts search results and keeps the best ``max_results``."""
    
    def __init__(self, max_results: int = 10) -> None:
        self.max_results = max_results
    
    def rank(self, results: Iterable[SearchResult]) -> List[SearchResult]:
        """
        Order results best-first and truncate.
        
        The sort is stable, so results equal on both keys keep catalog order.
        
        Args:
            results: At most one result per product
            
        Returns:
            Ranked results, at most max_results long
        """
        return sorted(results, key=ranking_key)[:self.max_results]
