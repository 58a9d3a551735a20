"""Search result models and the match-kind ordering used for tie-breaks."""

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .product import Product


class MatchKind(str, Enum):
    """How a product matched a query."""
    
    CODE_EXACT = "code_exact"
    CODE_PARTIAL = "code_partial"
    DESCRIPTION_EXACT = "description_exact"
    DESCRIPTION_FUZZY = "description_fuzzy"
    DESCRIPTION_SEMANTIC = "description_semantic"

    @property
    def priority(self) -> int:
        """Tie-break rank; higher wins when scores are equal."""
        return MATCH_KIND_PRIORITY[self]


MATCH_KIND_PRIORITY = {
    MatchKind.CODE_EXACT: 5,
    MatchKind.CODE_PARTIAL: 4,
    MatchKind.DESCRIPTION_EXACT: 3,
    MatchKind.DESCRIPTION_FUZZY: 2,
    MatchKind.DESCRIPTION_SEMANTIC: 1,
}


class HighlightRange(BaseModel):
    """Half-open character range ``[start, end)`` into a result's matched text."""
    
    model_config = ConfigDict(frozen=True)
    
    start: int = Field(..., ge=0, description="Inclusive start offset")
    end: int = Field(..., ge=1, description="Exclusive end offset")

    @model_validator(mode="after")
    def check_order(self) -> "HighlightRange":
        """Reject empty or inverted ranges."""
        if self.end <= self.start:
            raise ValueError("end must be greater than start")
        return self


class SearchResult(BaseModel):
    """A single ranked match."""
    
    model_config = ConfigDict(frozen=True)
    
    product: Product = Field(..., description="The matched catalog record")
    score: float = Field(..., description="Ranking score, higher is better")
    match_kind: MatchKind = Field(..., description="Which matching step produced the result")
    matched_text: str = Field(..., description="Text the highlight ranges refer to")
    highlight_ranges: Tuple[HighlightRange, ...] = Field(
        default_factory=tuple, description="Spans of matched_text to emphasize"
    )
