"""
Product Search - ranked, typo-tolerant search over an in-memory product catalog.

Queries are matched against product codes (exact and prefix) and descriptions
(substring, word, fuzzy and root similarity), ranked by score and match kind,
and memoized per normalized query.
"""

__version__ = "1.0.0"

from .config.search_config import SearchConfig
from .core.engine import SearchEngine
from .models.match import HighlightRange, MatchKind, SearchResult
from .models.product import Product

__all__ = [
    "SearchEngine",
    "SearchConfig",
    "SearchResult",
    "MatchKind",
    "HighlightRange",
    "Product",
]
