"""Metrics and monitoring API endpoints."""

import psutil
from fastapi import APIRouter, Depends, HTTPException

from ..core.engine import SearchEngine
from ..models.response import MetricsResponse
from .dependencies import get_engine

router = APIRouter(prefix="/api/v1", tags=["metrics"])


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get performance metrics",
    description="Get query, cache and memory metrics for the search engine"
)
async def get_metrics(engine: SearchEngine = Depends(get_engine)) -> MetricsResponse:
    """Get performance metrics for the search engine."""
    try:
        stats = engine.get_stats()
        memory_usage_mb = psutil.Process().memory_info().rss / (1024 * 1024)
        
        return MetricsResponse(
            total_queries=stats["total_queries"],
            average_response_time_ms=stats["average_execution_time_ms"],
            cache_hit_rate=stats["cache_hit_rate"],
            no_match_rate=stats["no_match_rate"],
            match_kinds=stats["match_kinds"],
            catalog_size=stats["catalog_size"],
            cache_size=stats["cache_size"],
            memory_usage_mb=memory_usage_mb
        )
        
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get metrics: {str(e)}"
        )
