"""Engine configuration with clamping of out-of-range values."""

import math
from typing import TYPE_CHECKING

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from .settings import Settings

logger = structlog.get_logger(__name__)

DEFAULT_MAX_RESULTS = 10
DEFAULT_FUZZY_THRESHOLD = 0.6
DEFAULT_CACHE_MAX_SIZE = 100


class SearchConfig(BaseModel):
    """
    Tuning knobs for a SearchEngine.
    
    Values outside their usable range are clamped instead of rejected so an
    engine can always be constructed.
    """
    
    model_config = ConfigDict(frozen=True)
    
    max_results: int = Field(default=DEFAULT_MAX_RESULTS, description="Maximum results per query")
    fuzzy_threshold: float = Field(
        default=DEFAULT_FUZZY_THRESHOLD, description="Minimum similarity (0-1) for fuzzy matches"
    )
    # Accepted for compatibility with older configurations; no matching step reads it.
    enable_phonetic: bool = Field(default=True, description="Legacy toggle, has no effect")
    enable_ngram: bool = Field(default=True, description="Use bigram similarity in fuzzy matching")
    enable_semantic: bool = Field(default=True, description="Enable root-based semantic matching")
    cache_max_size: int = Field(default=DEFAULT_CACHE_MAX_SIZE, description="Query cache capacity")

    @field_validator("max_results")
    @classmethod
    def clamp_max_results(cls, v: int) -> int:
        """Fall back to the default for non-positive limits."""
        if v < 1:
            logger.warning("max_results out of range, using default", value=v, default=DEFAULT_MAX_RESULTS)
            return DEFAULT_MAX_RESULTS
        return v

    @field_validator("fuzzy_threshold")
    @classmethod
    def clamp_fuzzy_threshold(cls, v: float) -> float:
        """Clamp the threshold into [0, 1]."""
        if math.isnan(v):
            logger.warning("fuzzy_threshold is NaN, using default", default=DEFAULT_FUZZY_THRESHOLD)
            return DEFAULT_FUZZY_THRESHOLD
        if v < 0.0 or v > 1.0:
            clamped = min(1.0, max(0.0, v))
            logger.warning("fuzzy_threshold out of range, clamping", value=v, clamped=clamped)
            return clamped
        return v

    @field_validator("cache_max_size")
    @classmethod
    def clamp_cache_max_size(cls, v: int) -> int:
        """Fall back to the default for non-positive capacities."""
        if v < 1:
            logger.warning(
                "cache_max_size out of range, using default", value=v, default=DEFAULT_CACHE_MAX_SIZE
            )
            return DEFAULT_CACHE_MAX_SIZE
        return v

    @classmethod
    def from_settings(cls, settings: "Settings") -> "SearchConfig":
        """Build an engine configuration from application settings."""
        return cls(
            max_results=settings.max_results,
            fuzzy_threshold=settings.fuzzy_threshold,
            enable_phonetic=settings.enable_phonetic,
            enable_ngram=settings.enable_ngram,
            enable_semantic=settings.enable_semantic,
            cache_max_size=settings.cache_max_size,
        )
