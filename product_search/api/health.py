"""Health check endpoints."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from ..config import Settings
from ..core.engine import SearchEngine
from ..models.response import HealthResponse
from .dependencies import get_app_settings, get_engine

router = APIRouter(prefix="/api/v1", tags=["health"])

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the search service"
)
async def health_check(
    engine: SearchEngine = Depends(get_engine),
    settings: Settings = Depends(get_app_settings),
) -> HealthResponse:
    """
    Perform a health check on the search service.
    
    An empty catalog is reported as degraded since every query would come
    back empty.
    """
    try:
        dependencies = {
            "search_engine": "healthy",
            "catalog": "healthy" if engine.catalog else "degraded",
        }
        
        if all(status == "healthy" for status in dependencies.values()):
            status = "healthy"
        elif any(status == "unhealthy" for status in dependencies.values()):
            status = "unhealthy"
        else:
            status = "degraded"
        
        return HealthResponse(
            status=status,
            version=settings.app_version,
            uptime=time.time() - app_start_time,
            dependencies=dependencies
        )
        
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Health check failed: {str(e)}"
        )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the service is ready to accept requests"
)
async def readiness_check(engine: SearchEngine = Depends(get_engine)) -> JSONResponse:
    """Ready once a non-empty catalog is loaded."""
    timestamp = datetime.now(timezone.utc).isoformat()
    
    if not engine.catalog:
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "reason": "catalog is empty", "timestamp": timestamp}
        )
    
    return JSONResponse(
        status_code=200,
        content={"status": "ready", "catalog_size": len(engine.catalog), "timestamp": timestamp}
    )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    """Report that the process is responding."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": time.time() - app_start_time
        }
    )
