"""Matching of queries against short product codes."""

from typing import Optional

from ..models.match import HighlightRange, MatchKind, SearchResult
from ..models.product import Product

CODE_EXACT_SCORE = 10000.0
CODE_PARTIAL_BASE_SCORE = 8000.0
CODE_PARTIAL_SPAN_SCORE = 1000.0


class CodeMatcher:
    """Tests a query for an exact or prefix match on a product's code."""
    
    def match(self, product: Product, query: str) -> Optional[SearchResult]:
        """
        Match a normalized query against a product code.
        
        Codes are compared lowercased but keep their diacritics, since they
        are expected to be numeric or alphanumeric.
        
        Args:
            product: Catalog record
            query: Normalized, non-empty query
            
        Returns:
            SearchResult for an exact or partial code match, None otherwise
        """
        code = product.code.lower()
        if not code or not query:
            return None
        
        if code == query:
            return SearchResult(
                product=product,
                score=CODE_EXACT_SCORE,
                match_kind=MatchKind.CODE_EXACT,
                matched_text=product.code,
                highlight_ranges=(HighlightRange(start=0, end=len(product.code)),),
            )
        
        if code.startswith(query):
            match_ratio = len(query) / len(code)
            return SearchResult(
                product=product,
                score=CODE_PARTIAL_BASE_SCORE + match_ratio * CODE_PARTIAL_SPAN_SCORE,
                match_kind=MatchKind.CODE_PARTIAL,
                matched_text=product.code,
                highlight_ranges=(
                    HighlightRange(start=0, end=min(len(query), len(product.code))),
                ),
            )
        
        return None
