"""Levenshtein edit distance."""

from rapidfuzz.distance import Levenshtein

from ..exceptions import TextTooLongError

# Longest string accepted by edit_distance(). Distances stay below this bound,
# so every value fits a 16-bit unsigned range.
MAX_TEXT_LENGTH = 65535


def edit_distance(a: str, b: str) -> int:
    """
    Compute the Levenshtein distance between two strings.
    
    The distance is the minimum number of single-character insertions,
    deletions or substitutions needed to turn ``a`` into ``b``, each
    costing one.
    
    Args:
        a: Source string
        b: Target string
        
    Returns:
        Non-negative edit distance
        
    Raises:
        TextTooLongError: If either string exceeds MAX_TEXT_LENGTH
    """
    for text in (a, b):
        if len(text) > MAX_TEXT_LENGTH:
            raise TextTooLongError(len(text), MAX_TEXT_LENGTH)
    
    return Levenshtein.distance(a, b)
