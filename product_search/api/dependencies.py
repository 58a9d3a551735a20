"""Request-scoped access to application-owned objects."""

from fastapi import Request

from ..config import Settings
from ..core.engine import SearchEngine


def get_engine(request: Request) -> SearchEngine:
    """Return the search engine owned by the running application."""
    return request.app.state.search_engine


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running application was created with."""
    return request.app.state.settings
