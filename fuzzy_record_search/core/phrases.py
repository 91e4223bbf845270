"""Contiguous word-sequence (n-gram) generation for sub-phrase matching."""

from typing import List, Sequence


def generate_phrases(words: Sequence[str], max_length: int) -> List[str]:
    """
    Generate every contiguous run of 1..max_length words.
    
    Phrases are ordered by run length, then by starting position.
    
    Args:
        words: Word sequence to draw runs from
        max_length: Longest run to produce, at least 1
        
    Returns:
        Space-joined phrases
    """
    if max_length < 1:
        raise ValueError(f"max_length must be at least 1, got {max_length}")
    
    phrases = []
    for n in range(1, max_length + 1):
        for start in range(len(words) - n + 1):
            phrases.append(" ".join(words[start:start + n]))
    
    return phrases
