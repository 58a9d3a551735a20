"""Search API endpoints."""

import time
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path

from ..config import Settings
from ..core.engine import SearchEngine
from ..models.request import BatchSearchRequest, SearchRequest
from ..models.response import SearchResponse
from .dependencies import get_app_settings, get_engine

router = APIRouter(prefix="/api/v1", tags=["search"])


def run_search(engine: SearchEngine, query: str, settings: Settings) -> SearchResponse:
    """Run one query and wrap it with timing and cache metadata."""
    if len(query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )
    
    start_time = time.time()
    cache_hit = engine.is_cached(query)
    results = engine.search(query)
    execution_time = (time.time() - start_time) * 1000
    
    return SearchResponse(
        query=query,
        normalized_query=engine.normalizer.normalize(query),
        execution_time_ms=execution_time,
        total_results=len(results),
        results=results,
        cache_hit=cache_hit,
    )


@router.get(
    "/search/{query}",
    response_model=SearchResponse,
    summary="Search products",
    description="Rank catalog products against a free-text or code query"
)
async def search_products(
    query: str = Path(..., description="Product code or description text", min_length=1),
    engine: SearchEngine = Depends(get_engine),
    settings: Settings = Depends(get_app_settings),
) -> SearchResponse:
    """
    Search for products matching a query.
    
    Codes are matched exactly or by prefix; descriptions by substring, word,
    fuzzy and root similarity. Results carry highlight ranges into their
    matched text.
    """
    try:
        return run_search(engine, query, settings)
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search with request body",
    description="Search products using a structured request body"
)
async def search_with_body(
    request: SearchRequest,
    engine: SearchEngine = Depends(get_engine),
    settings: Settings = Depends(get_app_settings),
) -> SearchResponse:
    """Search for products using a JSON request body."""
    try:
        return run_search(engine, request.query, settings)
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.post(
    "/search/batch",
    response_model=List[SearchResponse],
    summary="Batch search",
    description="Search multiple queries in a single request"
)
async def batch_search(
    request: BatchSearchRequest,
    engine: SearchEngine = Depends(get_engine),
    settings: Settings = Depends(get_app_settings),
) -> List[SearchResponse]:
    """
    Perform batch search for multiple queries.
    
    Queries run in order against the same catalog snapshot.
    """
    try:
        return [run_search(engine, query, settings) for query in request.queries]
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Batch search failed: {str(e)}"
        )
