"""Response models for API endpoints."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .match import SearchResult


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SearchResponse(BaseModel):
    """Response for search queries."""
    
    query: str = Field(..., description="Original search query")
    normalized_query: str = Field(..., description="Query after normalization")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    total_results: int = Field(..., description="Total number of results")
    results: List[SearchResult] = Field(..., description="Ranked search results")
    cache_hit: bool = Field(..., description="Whether result was served from cache")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")


class CatalogResponse(BaseModel):
    """Response for catalog inspection and replacement."""
    
    total_products: int = Field(..., description="Number of products in the catalog")
    cache_size: int = Field(..., description="Number of cached queries")
    message: Optional[str] = Field(None, description="Outcome of the operation")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")


class ErrorResponse(BaseModel):
    """Error response model."""
    
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")


class MetricsResponse(BaseModel):
    """Performance metrics response."""
    
    total_queries: int = Field(..., description="Total queries processed")
    average_response_time_ms: float = Field(..., description="Average response time")
    cache_hit_rate: float = Field(..., description="Cache hit rate (0-1)")
    no_match_rate: float = Field(..., description="Share of queries without results (0-1)")
    match_kinds: Dict[str, int] = Field(..., description="Top-result match kind counts")
    catalog_size: int = Field(..., description="Products in the catalog")
    cache_size: int = Field(..., description="Cached queries")
    memory_usage_mb: float = Field(..., description="Process resident memory in MB")
    timestamp: datetime = Field(default_factory=_utcnow, description="Metrics timestamp")
