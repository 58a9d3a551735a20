"""Loading of product catalogs from JSON files."""

import json
from pathlib import Path
from typing import List, Optional, Union

import structlog
from pydantic import ValidationError

from .models.product import Product

logger = structlog.get_logger(__name__)

SAMPLE_CATALOG_PATH = Path(__file__).parent / "data" / "sample_catalog.json"


def parse_catalog(payload: object) -> List[Product]:
    """
    Build products from decoded JSON.
    
    Args:
        payload: A list of product objects
        
    Returns:
        List of products in payload order
        
    Raises:
        ValueError: If the payload is not a list of valid product objects
    """
    if not isinstance(payload, list):
        raise ValueError("Catalog must be a JSON array of products")
    
    try:
        return [Product.model_validate(item) for item in payload]
    except ValidationError as e:
        raise ValueError(f"Invalid product record: {e}") from e


def load_catalog(path: Optional[Union[str, Path]] = None) -> List[Product]:
    """
    Load a catalog from a JSON file.
    
    Args:
        path: File to read; the packaged sample catalog when None
        
    Returns:
        List of products
        
    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid catalog JSON
    """
    catalog_path = Path(path) if path else SAMPLE_CATALOG_PATH
    
    with open(catalog_path, 'r', encoding='utf-8') as f:
        try:
            payload = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Catalog file {catalog_path} is not valid JSON: {e}") from e
    
    products = parse_catalog(payload)
    logger.info("Catalog loaded", path=str(catalog_path), total_products=len(products))
    return products
