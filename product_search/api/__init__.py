"""API endpoints for product search."""

from .catalog import router as catalog_router
from .health import router as health_router
from .metrics import router as metrics_router
from .search import router as search_router

__all__ = [
    "search_router",
    "catalog_router",
    "health_router",
    "metrics_router",
]
