"""Core matching engine functionality."""

from .edit_distance import MAX_TEXT_LENGTH, edit_distance
from .normalizer import TextNormalizer, normalize
from .phrases import generate_phrases
from .fields import field, resolve_fields
from .cache import SearchCache
from .fuzzy_matcher import FuzzyMatcher, RecordScore, NO_MATCH
from .engine import SearchEngine

__all__ = [
    "MAX_TEXT_LENGTH",
    "edit_distance",
    "TextNormalizer",
    "normalize",
    "generate_phrases",
    "field",
    "resolve_fields",
    "SearchCache",
    "FuzzyMatcher",
    "RecordScore",
    "NO_MATCH",
    "SearchEngine",
]
