"""Configuration management for product search."""

from .search_config import SearchConfig
from .settings import Settings, get_settings

__all__ = ["SearchConfig", "Settings", "get_settings"]
