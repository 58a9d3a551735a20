"""Catalog record model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Alternate field names used by older catalog exports.
_FIELD_ALIASES = {
    "code": ("ean", "product_code"),
    "description": ("name",),
    "price": ("regular_price",),
}


class Product(BaseModel):
    """
    A product record as read by the search engine.
    
    Only ``code`` and ``description`` are consulted for matching. Any other
    field is kept as-is so callers can render it next to a result.
    """
    
    model_config = ConfigDict(extra="allow", frozen=True)
    
    code: str = Field(default="", description="Short product identifier, e.g. a shortened barcode")
    description: str = Field(default="", description="Human-readable product description")
    price: float = Field(default=0.0, description="Unit price")

    @model_validator(mode="before")
    @classmethod
    def apply_aliases(cls, data: Any) -> Any:
        """Map alternate catalog field names onto the canonical ones."""
        if not isinstance(data, dict):
            return data
        
        data = dict(data)
        for field_name, aliases in _FIELD_ALIASES.items():
            if data.get(field_name) is not None:
                continue
            for alias in aliases:
                if data.get(alias) is not None:
                    data[field_name] = data[alias]
                    # "name" stays available as a display field
                    if alias != "name":
                        del data[alias]
                    break
        return data

    @field_validator("code", "description", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        """Treat missing text as empty and stringify numeric codes."""
        if v is None:
            return ""
        return str(v)

    @field_validator("price", mode="before")
    @classmethod
    def coerce_price(cls, v: Any) -> Any:
        """Treat a missing price as zero."""
        return 0.0 if v is None else v
