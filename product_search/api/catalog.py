"""Catalog and cache management endpoints."""

from fastapi import APIRouter, Depends, HTTPException
import structlog

from ..core.engine import SearchEngine
from ..models.request import CatalogReplaceRequest
from ..models.response import CatalogResponse
from .dependencies import get_engine

router = APIRouter(prefix="/api/v1", tags=["catalog"])
logger = structlog.get_logger(__name__)


@router.get(
    "/catalog",
    response_model=CatalogResponse,
    summary="Catalog summary",
    description="Get the size of the searchable catalog and the query cache"
)
async def get_catalog(engine: SearchEngine = Depends(get_engine)) -> CatalogResponse:
    """Summarize the current catalog snapshot."""
    return CatalogResponse(
        total_products=len(engine.catalog),
        cache_size=len(engine.cache),
    )


@router.put(
    "/catalog",
    response_model=CatalogResponse,
    summary="Replace catalog",
    description="Swap the searchable catalog; cached results are discarded"
)
async def replace_catalog(
    request: CatalogReplaceRequest,
    engine: SearchEngine = Depends(get_engine),
) -> CatalogResponse:
    """
    Replace the catalog snapshot.
    
    Every cached query is invalidated so subsequent searches only see the
    new products.
    """
    try:
        engine.replace_catalog(request.products)
    except Exception as e:
        logger.error("Catalog replacement failed", error=str(e))
        raise HTTPException(
            status_code=500,
            detail=f"Failed to replace catalog: {str(e)}"
        )
    
    return CatalogResponse(
        total_products=len(engine.catalog),
        cache_size=len(engine.cache),
        message="Catalog replaced successfully",
    )


@router.delete(
    "/cache",
    response_model=CatalogResponse,
    summary="Clear query cache",
    description="Discard cached search results without changing the catalog"
)
async def clear_cache(engine: SearchEngine = Depends(get_engine)) -> CatalogResponse:
    """Empty the query cache."""
    engine.clear_cache()
    return CatalogResponse(
        total_products=len(engine.catalog),
        cache_size=len(engine.cache),
        message="Cache cleared successfully",
    )
