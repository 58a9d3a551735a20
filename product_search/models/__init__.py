"""Data models for product search."""

from .match import MATCH_KIND_PRIORITY, HighlightRange, MatchKind, SearchResult
from .product import Product
from .request import BatchSearchRequest, CatalogReplaceRequest, SearchRequest
from .response import (
    CatalogResponse,
    ErrorResponse,
    HealthResponse,
    MetricsResponse,
    SearchResponse,
)

__all__ = [
    "MATCH_KIND_PRIORITY",
    "HighlightRange",
    "MatchKind",
    "SearchResult",
    "Product",
    "SearchRequest",
    "BatchSearchRequest",
    "CatalogReplaceRequest",
    "SearchResponse",
    "CatalogResponse",
    "ErrorResponse",
    "HealthResponse",
    "MetricsResponse",
]
