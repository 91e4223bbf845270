"""Exception hierarchy for fuzzy record search."""


class FuzzySearchError(Exception):
    """Base exception for all fuzzy record search errors."""


class TextTooLongError(FuzzySearchError, ValueError):
    """A string is longer than the edit distance computation supports."""

    def __init__(self, length: int, max_length: int):
        self.length = length
        self.max_length = max_length
        super().__init__(
            f"Text of length {length} exceeds the supported maximum of {max_length} characters"
        )
