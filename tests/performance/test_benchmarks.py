"""Performance benchmarks for fuzzy record search."""

import random
import string

import pytest
from fuzzy_record_search.config import Settings
from fuzzy_record_search.core.cache import SearchCache
from fuzzy_record_search.core.edit_distance import edit_distance
from fuzzy_record_search.core.engine import SearchEngine


class TestPerformanceBenchmarks:
    """Performance benchmark tests."""
    
    @pytest.fixture
    def records(self):
        """Generate a realistic record collection."""
        rng = random.Random(42)
        
        def word():
            return "".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(3, 9)))
        
        records = [
            {
                "id": i,
                "title": " ".join(word() for _ in range(rng.randint(1, 4))),
                "description": " ".join(word() for _ in range(rng.randint(4, 10))),
            }
            for i in range(200)
        ]
        records.append({"id": 200, "title": "Blue Whale", "description": "Largest animal alive"})
        return records
    
    def test_uncached_search_performance(self, records, benchmark):
        """Benchmark a full scoring pass."""
        engine = SearchEngine(settings=Settings(enable_cache=False))
        
        def uncached_search():
            return engine.search(records, "blue whale", ["title", "description"])
        
        results = benchmark(uncached_search)
        assert results[0]["id"] == 200
    
    def test_cached_search_performance(self, records, benchmark):
        """Benchmark a cache hit."""
        engine = SearchEngine(settings=Settings(), cache=SearchCache())
        engine.search(records, "blue whale", ["title", "description"])
        
        def cached_search():
            return engine.search(records, "blue whale", ["title", "description"])
        
        results = benchmark(cached_search)
        assert results[0]["id"] == 200
        assert engine.get_stats()["records_scored"] == len(records)
    
    def test_edit_distance_performance(self, benchmark):
        """Benchmark edit distance on paragraph-sized text."""
        a = "the quick brown fox jumps over the lazy dog " * 5
        b = "the quick brown fax jumped over a lazy dog " * 5
        
        result = benchmark(edit_distance, a, b)
        assert result > 0
