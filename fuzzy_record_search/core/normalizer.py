"""Text normalization applied identically to queries and field values."""

import re
from typing import List, Optional


class TextNormalizer:
    """Canonicalizes text before comparison."""
    
    # Anything that is not a lowercase latin letter, a digit or a space
    _disallowed = re.compile(r"[^a-z0-9 ]+")
    
    def normalize(self, text: Optional[str]) -> str:
        """
        Normalize text for comparison.
        
        Lower-cases the input, drops every character outside ``a-z``,
        ``0-9`` and the space character, then trims surrounding spaces.
        Inner runs of spaces are preserved. The result is idempotent:
        normalizing a normalized string returns it unchanged.
        
        Args:
            text: Input text to normalize
            
        Returns:
            Normalized text, possibly empty
        """
        if not text:
            return ""
        
        return self._disallowed.sub("", text.lower()).strip(" ")
    
    def tokenize(self, text: Optional[str]) -> List[str]:
        """Split normalized text into its words."""
        return self.normalize(text).split()


_default_normalizer = TextNormalizer()


def normalize(text: Optional[str]) -> str:
    """Normalize text with the shared default normalizer."""
    return _default_normalizer.normalize(text)
