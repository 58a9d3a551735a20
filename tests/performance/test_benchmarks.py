"""Performance benchmarks for product search."""

import random
import string

import pytest

from product_search.core.engine import SearchEngine
from product_search.models import Product

WORDS = [
    "banana", "caturra", "prata", "maca", "fuji", "gala", "limao", "tahiti",
    "pao", "frances", "arroz", "feijao", "carioca", "leite", "integral", "cafe",
    "torrado", "acucar", "refinado", "oleo", "soja", "sabonete", "shampoo", "kg",
]


class TestPerformanceBenchmarks:
    """Performance benchmark tests."""
    
    @pytest.fixture
    def large_engine(self):
        """Create a search engine with a large catalog for performance testing."""
        rng = random.Random(42)
        catalog = [
            Product(
                code=str(100000 + i),
                description=" ".join(rng.choice(WORDS) for _ in range(rng.randint(2, 6))).upper(),
                price=round(rng.uniform(1, 100), 2),
            )
            for i in range(1000)
        ]
        return SearchEngine(catalog)
    
    def test_code_search_performance(self, large_engine, benchmark):
        """Benchmark uncached code search."""
        def code_search():
            large_engine.clear_cache()
            return large_engine.search("100500")
        
        results = benchmark(code_search)
        assert results[0].product.code == "100500"
    
    def test_description_search_performance(self, large_engine, benchmark):
        """Benchmark uncached substring search."""
        def description_search():
            large_engine.clear_cache()
            return large_engine.search("banana")
        
        results = benchmark(description_search)
        assert len(results) == 10
    
    def test_fuzzy_search_performance(self, large_engine, benchmark):
        """Benchmark uncached search that falls through to fuzzy matching."""
        def fuzzy_search():
            large_engine.clear_cache()
            return large_engine.search("bananna cattura")
        
        results = benchmark(fuzzy_search)
        assert len(results) > 0
    
    def test_cached_search_performance(self, large_engine, benchmark):
        """Benchmark cache hits."""
        large_engine.search("banana")
        
        results = benchmark(large_engine.search, "banana")
        assert len(results) == 10
    
    def test_random_queries_respect_limits(self, large_engine):
        """Test result bounds and cache size under random queries."""
        rng = random.Random(7)
        
        for _ in range(250):
            query = "".join(rng.choice(string.ascii_lowercase + " ") for _ in range(rng.randint(1, 12)))
            results = large_engine.search(query)
            assert len(results) <= large_engine.config.max_results
        
        assert len(large_engine.cache) <= 100
