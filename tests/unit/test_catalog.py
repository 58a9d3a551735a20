"""Unit tests for catalog loading."""

import json

import pytest

from product_search.catalog import load_catalog, parse_catalog


class TestCatalogLoading:
    """Test cases for JSON catalog loading."""
    
    def test_load_sample_catalog(self):
        """Test loading the packaged sample catalog."""
        products = load_catalog()
        
        assert len(products) > 0
        assert "1595" in [product.code for product in products]
        assert all(product.description for product in products)
    
    def test_load_from_path(self, tmp_path):
        """Test loading a catalog file."""
        path = tmp_path / "catalog.json"
        path.write_text(
            json.dumps([
                {"code": "1595", "description": "BANANA CATURRA KG", "price": 5.99},
                {"ean": "7891234567890", "description": "Smartphone", "price": 299.99},
            ]),
            encoding="utf-8",
        )
        
        products = load_catalog(path)
        
        assert [product.code for product in products] == ["1595", "7891234567890"]
    
    def test_missing_file(self, tmp_path):
        """Test that a missing file is reported."""
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "missing.json")
    
    def test_invalid_json(self, tmp_path):
        """Test that malformed JSON is rejected."""
        path = tmp_path / "catalog.json"
        path.write_text("[{", encoding="utf-8")
        
        with pytest.raises(ValueError):
            load_catalog(path)
    
    def test_payload_must_be_list(self):
        """Test that a non-list payload is rejected."""
        with pytest.raises(ValueError):
            parse_catalog({"code": "1595"})
    
    def test_invalid_record(self):
        """Test that a record with an unusable price is rejected."""
        with pytest.raises(ValueError):
            parse_catalog([{"code": "1595", "price": "cheap"}])
