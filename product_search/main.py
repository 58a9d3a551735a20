"""FastAPI application exposing the product search engine."""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional, Sequence

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from .api import catalog_router, health_router, metrics_router, search_router
from .catalog import load_catalog
from .config import SearchConfig, Settings, get_settings
from .core.engine import SearchEngine
from .logging_config import configure_logging
from .models.product import Product
from .models.response import ErrorResponse

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    logger.info("Starting Product Search service", version=settings.app_version)
    
    if not app.state.catalog_preloaded:
        try:
            app.state.search_engine.replace_catalog(load_catalog(settings.catalog_path))
        except FileNotFoundError:
            logger.warning(
                "Catalog file not found, starting with an empty catalog",
                path=settings.catalog_path,
            )
        except ValueError as e:
            logger.error("Failed to load catalog", path=settings.catalog_path, error=str(e))
            raise
    
    yield
    
    logger.info("Shutting down Product Search service")


def create_app(
    settings: Optional[Settings] = None,
    catalog: Optional[Sequence[Product]] = None,
) -> FastAPI:
    """
    Build the application and the search engine it owns.
    
    Args:
        settings: Application settings (environment defaults when None)
        catalog: Initial catalog; when None it is loaded on startup from
            ``settings.catalog_path``
            
    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    
    app = FastAPI(
        title=settings.app_name,
        description="Ranked product search by code and description",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )
    
    app.state.settings = settings
    app.state.search_engine = SearchEngine(catalog or (), SearchConfig.from_settings(settings))
    app.state.catalog_preloaded = catalog is not None
    
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    
    @app.middleware("http")
    async def log_requests(request: Request, call_next) -> Response:
        """Log all HTTP requests."""
        start_time = time.time()
        
        logger.info(
            "Request started",
            method=request.method,
            url=str(request.url),
            client_ip=request.client.host if request.client else None,
        )
        
        response = await call_next(request)
        
        logger.info(
            "Request completed",
            method=request.method,
            url=str(request.url),
            status_code=response.status_code,
            process_time_ms=round((time.time() - start_time) * 1000, 2)
        )
        
        return response
    
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle global exceptions."""
        logger.error(
            "Unhandled exception",
            method=request.method,
            url=str(request.url),
            error=str(exc),
            exc_info=True
        )
        
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Internal Server Error",
                message="An unexpected error occurred",
                details={"exception": str(exc)} if settings.debug else None
            ).model_dump(mode="json")
        )
    
    app.include_router(search_router)
    app.include_router(catalog_router)
    app.include_router(health_router)
    app.include_router(metrics_router)
    
    @app.get("/", summary="Root endpoint", description="Get basic information about the API")
    async def root() -> dict:
        """Root endpoint with basic API information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "description": "Ranked product search by code and description",
            "docs_url": "/docs",
            "health_url": "/api/v1/health",
            "endpoints": {
                "search": "/api/v1/search/{query}",
                "batch_search": "/api/v1/search/batch",
                "catalog": "/api/v1/catalog",
                "cache": "/api/v1/cache",
                "metrics": "/api/v1/metrics"
            },
            "status": "running"
        }
    
    return app


configure_logging(get_settings())
app = create_app()


if __name__ == "__main__":
    import uvicorn
    
    settings = get_settings()
    uvicorn.run(
        "product_search.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
        log_level=settings.log_level.lower()
    )
