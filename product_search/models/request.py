"""Request models for API endpoints."""

from typing import List

from pydantic import BaseModel, Field, field_validator

from .product import Product


class SearchRequest(BaseModel):
    """Request model for search queries."""
    
    query: str = Field(..., description="Search query")


class BatchSearchRequest(BaseModel):
    """Request model for batch search queries."""
    
    queries: List[str] = Field(..., min_length=1, max_length=100, description="List of search queries")

    @field_validator('queries')
    @classmethod
    def validate_queries(cls, v: List[str]) -> List[str]:
        """Reject batches made only of blank queries."""
        if not any(query.strip() for query in v):
            raise ValueError("At least one query must be non-empty")
        return v


class CatalogReplaceRequest(BaseModel):
    """Request model for swapping the searchable catalog."""
    
    products: List[Product] = Field(..., description="New catalog snapshot")
