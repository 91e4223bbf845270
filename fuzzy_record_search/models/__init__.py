"""Data models for fuzzy record search."""

from .response import MatchType, ScoredMatch, SearchResponse

__all__ = [
    "MatchType",
    "ScoredMatch",
    "SearchResponse",
]
