"""Application settings and configuration management."""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""
    
    # Application
    app_name: str = Field(default="Product Search")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    
    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    workers: int = Field(default=1)
    
    # Catalog
    catalog_path: Optional[str] = Field(default=None)  # packaged sample when unset
    
    # Search Configuration
    fuzzy_threshold: float = Field(default=0.6)
    max_results: int = Field(default=10)
    max_query_length: int = Field(default=100)
    enable_phonetic: bool = Field(default=True)
    enable_ngram: bool = Field(default=True)
    enable_semantic: bool = Field(default=True)
    
    # Cache Configuration
    cache_max_size: int = Field(default=100)
    
    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")
    
    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080", "http://localhost:8000"]
    )
    
    model_config = SettingsConfigDict(
        env_prefix="PRODUCT_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
