"""Integration tests for the API endpoints."""

import json

import pytest
from fastapi.testclient import TestClient

from product_search.config import Settings
from product_search.main import create_app
from product_search.models import Product


class TestAPI:
    """Integration tests for API endpoints."""
    
    @pytest.fixture
    def catalog(self):
        """Sample catalog for testing."""
        return [
            Product(code="1595", description="BANANA CATURRA KG", price=5.99, unit_type="KG"),
            Product(code="2010", description="MAÇÃ FUJI KG", price=9.9, unit_type="KG"),
        ]
    
    @pytest.fixture
    def client(self, catalog):
        """Create a test client."""
        return TestClient(create_app(settings=Settings(), catalog=catalog))
    
    def test_root_endpoint(self, client):
        """Test the root endpoint."""
        response = client.get("/")
        assert response.status_code == 200
        
        data = response.json()
        assert data["name"] == "Product Search"
        assert data["status"] == "running"
        assert "endpoints" in data
    
    def test_search_exact_code(self, client):
        """Test exact code search."""
        response = client.get("/api/v1/search/1595")
        assert response.status_code == 200
        
        data = response.json()
        assert data["total_results"] == 1
        assert data["cache_hit"] is False
        assert data["results"][0]["match_kind"] == "code_exact"
        assert data["results"][0]["score"] == 10000
        assert data["results"][0]["product"]["unit_type"] == "KG"
    
    def test_search_cache_hit(self, client):
        """Test that a repeated query is served from cache."""
        first = client.get("/api/v1/search/banana").json()
        second = client.get("/api/v1/search/BANANA").json()
        
        assert first["cache_hit"] is False
        assert second["cache_hit"] is True
        assert second["normalized_query"] == "banana"
        assert first["results"] == second["results"]
    
    def test_search_highlights(self, client):
        """Test highlight ranges into the original description."""
        data = client.get("/api/v1/search/maca").json()
        
        result = data["results"][0]
        span = result["highlight_ranges"][0]
        assert result["matched_text"][span["start"]:span["end"]] == "MAÇÃ"
    
    def test_search_no_match(self, client):
        """Test search with no matches."""
        response = client.get("/api/v1/search/xyz-nonexistent")
        assert response.status_code == 200
        
        data = response.json()
        assert data["total_results"] == 0
        assert data["results"] == []
    
    def test_search_query_too_long(self, client):
        """Test rejection of oversized queries."""
        response = client.get("/api/v1/search/" + "a" * 150)
        assert response.status_code == 400

    def test_query_length_limit_from_app_settings(self, catalog):
        """Test that the length limit comes from the settings the app was built with."""
        client = TestClient(create_app(settings=Settings(max_query_length=5), catalog=catalog))

        assert client.get("/api/v1/search/1595").status_code == 200
        assert client.get("/api/v1/search/bananas").status_code == 400
        assert client.post("/api/v1/search", json={"query": "bananas"}).status_code == 400
        response = client.post("/api/v1/search/batch", json={"queries": ["1595", "bananas"]})
        assert response.status_code == 400
        assert "5 characters" in response.json()["detail"]

    def test_search_with_body(self, client):
        """Test search with request body."""
        response = client.post("/api/v1/search", json={"query": "159"})
        assert response.status_code == 200
        
        data = response.json()
        assert data["results"][0]["match_kind"] == "code_partial"
    
    def test_search_with_blank_body(self, client):
        """Test that a blank query returns no results."""
        response = client.post("/api/v1/search", json={"query": "   "})
        assert response.status_code == 200
        assert response.json()["total_results"] == 0
    
    def test_batch_search(self, client):
        """Test batch search functionality."""
        response = client.post(
            "/api/v1/search/batch",
            json={"queries": ["1595", "fuji", "bananaa"]}
        )
        assert response.status_code == 200
        
        data = response.json()
        assert len(data) == 3
        assert [item["results"][0]["match_kind"] for item in data] == [
            "code_exact", "description_exact", "description_fuzzy"
        ]
    
    def test_batch_search_rejects_blank_batch(self, client):
        """Test validation of an all-blank batch."""
        response = client.post("/api/v1/search/batch", json={"queries": ["", "  "]})
        assert response.status_code == 422
    
    def test_get_catalog(self, client):
        """Test catalog summary."""
        data = client.get("/api/v1/catalog").json()
        
        assert data["total_products"] == 2
        assert data["cache_size"] == 0
    
    def test_replace_catalog(self, client):
        """Test that replacing the catalog invalidates cached results."""
        assert client.get("/api/v1/search/banana").json()["total_results"] == 1
        
        response = client.put(
            "/api/v1/catalog",
            json={"products": [{"ean": "7891234567890", "description": "Smartphone Android", "price": 299.99}]}
        )
        assert response.status_code == 200
        assert response.json()["total_products"] == 1
        assert response.json()["cache_size"] == 0
        
        data = client.get("/api/v1/search/banana").json()
        assert data["total_results"] == 0
        assert data["cache_hit"] is False
    
    def test_clear_cache(self, client):
        """Test clearing the query cache."""
        client.get("/api/v1/search/banana")
        
        response = client.delete("/api/v1/cache")
        assert response.status_code == 200
        assert response.json()["cache_size"] == 0
        assert response.json()["total_products"] == 2
    
    def test_health(self, client):
        """Test the health endpoint."""
        data = client.get("/api/v1/health").json()
        
        assert data["status"] == "healthy"
        assert data["dependencies"]["catalog"] == "healthy"
    
    def test_health_with_empty_catalog(self):
        """Test that an empty catalog reports degraded and not ready."""
        client = TestClient(create_app(settings=Settings(), catalog=[]))
        
        assert client.get("/api/v1/health").json()["status"] == "degraded"
        assert client.get("/api/v1/health/ready").status_code == 503
    
    def test_readiness_and_liveness(self, client):
        """Test readiness and liveness probes."""
        assert client.get("/api/v1/health/ready").status_code == 200
        assert client.get("/api/v1/health/live").json()["status"] == "alive"
    
    def test_metrics(self, client):
        """Test metrics after a few searches."""
        client.get("/api/v1/search/1595")
        client.get("/api/v1/search/1595")
        client.get("/api/v1/search/xyz-nonexistent")
        
        data = client.get("/api/v1/metrics").json()
        
        assert data["total_queries"] == 3
        assert data["cache_hit_rate"] == pytest.approx(1 / 3)
        assert data["match_kinds"]["code_exact"] == 2
        assert data["catalog_size"] == 2
        assert data["memory_usage_mb"] > 0


class TestLifespan:
    """Tests for catalog loading at startup."""
    
    def test_loads_catalog_file(self, tmp_path):
        """Test that the configured catalog is loaded on startup."""
        path = tmp_path / "catalog.json"
        path.write_text(
            json.dumps([{"code": "1595", "description": "BANANA CATURRA KG", "price": 5.99}]),
            encoding="utf-8",
        )
        app = create_app(settings=Settings(catalog_path=str(path)))
        
        with TestClient(app) as client:
            assert client.get("/api/v1/catalog").json()["total_products"] == 1
            assert client.get("/api/v1/search/1595").json()["total_results"] == 1
    
    def test_missing_catalog_file(self, tmp_path):
        """Test that a missing catalog file starts an empty service."""
        app = create_app(settings=Settings(catalog_path=str(tmp_path / "missing.json")))
        
        with TestClient(app) as client:
            assert client.get("/api/v1/catalog").json()["total_products"] == 0
    
    def test_default_sample_catalog(self):
        """Test that the packaged sample catalog is used by default."""
        app = create_app(settings=Settings(catalog_path=None))
        
        with TestClient(app) as client:
            assert client.get("/api/v1/catalog").json()["total_products"] > 0
