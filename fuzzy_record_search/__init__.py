"""
Fuzzy Record Search - approximate string matching over in-memory records.

Ranks caller-supplied records by how closely their text fields match a
query, tolerating typos, partial words and short word reorderings.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine
from .core.cache import SearchCache
from .core.edit_distance import edit_distance
from .core.fields import field
from .core.normalizer import normalize
from .exceptions import FuzzySearchError, TextTooLongError
from .models.response import MatchType, ScoredMatch, SearchResponse
from .search import search

__all__ = [
    "SearchEngine",
    "SearchCache",
    "edit_distance",
    "field",
    "normalize",
    "search",
    "FuzzySearchError",
    "TextTooLongError",
    "MatchType",
    "ScoredMatch",
    "SearchResponse",
]
