#!/usr/bin/env python3
"""Basic test script to verify the search engine functionality."""

import sys
import os

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from fuzzy_record_search import SearchEngine, SearchCache


def test_basic_functionality():
    """Test basic search engine functionality."""
    print("🚀 Testing Fuzzy Record Search Engine")
    print("=" * 50)
    
    # Initialize search engine
    engine = SearchEngine(cache=SearchCache())
    
    # Sample records
    records = [
        {"id": 1, "title": "Blue Whale", "description": "Largest animal ever known"},
        {"id": 2, "title": "Blue Wale", "description": "A common misspelling"},
        {"id": 3, "title": "Red Panda", "description": "Lives in the eastern Himalayas"},
        {"id": 4, "title": "Humpback Whale", "description": "Known for its song"},
    ]
    fields = ["title", "description"]
    print(f"📊 Searching {len(records)} records over fields {fields}")
    
    # Test cases
    test_cases = [
        ("blue whale", "Exact match"),
        ("blu whale", "Single typo"),
        ("BLUE WHALE!", "Case and punctuation insensitive"),
        ("whale humpback", "Word reordering"),
        ("himalaya", "Partial word in description"),
        ("xyz123", "No match"),
        ("bw", "Too short"),
    ]
    
    print("\n🔍 Running test cases...")
    print("-" * 50)
    
    for query, description in test_cases:
        print(f"\nQuery: '{query}' ({description})")
        result = engine.search_detailed(records, query, fields)
        
        print(f"  ⏱️  Execution time: {result.execution_time_ms:.2f}ms")
        print(f"  🎯 Exact match: {result.exact_match}")
        print(f"  📊 Total results: {result.total_results}")
        
        if result.results:
            for i, match in enumerate(result.results, 1):
                print(f"  📋 Result {i}:")
                print(f"     Title: {match.record['title']}")
                print(f"     Score: {match.score}")
                print(f"     Match type: {match.match_type.value}")
        else:
            print("  ❌ No results found")
            if result.suggestions:
                print(f"  💡 Suggestions: {result.suggestions}")
    
    # Repeat a query to exercise the cache
    print("\n🗄️  Testing cache...")
    print("-" * 50)
    repeat = engine.search_detailed(records, "blue whale", fields)
    print(f"Repeated 'blue whale' served from cache: {repeat.cache_hit}")
    assert repeat.cache_hit
    assert [match.record["id"] for match in repeat.results][:2] == [1, 2]
    
    # Get statistics
    print("\n📈 Engine Statistics...")
    print("-" * 50)
    stats = engine.get_stats()
    print(f"Total queries: {stats['total_queries']}")
    print(f"Rejected queries: {stats['rejected_queries']}")
    print(f"Exact matches: {stats['exact_matches']}")
    print(f"Fuzzy matches: {stats['fuzzy_matches']}")
    print(f"No matches: {stats['no_matches']}")
    print(f"Cache hits: {stats['cache_hits']}")
    print(f"Average execution time: {stats['average_execution_time_ms']:.2f}ms")
    
    print("\n✅ All tests completed successfully!")


if __name__ == "__main__":
    try:
        test_basic_functionality()
    except Exception as e:
        print(f"\n❌ Test failed with error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
