"""Record scoring: exact, prefix, substring, phrase and full-text signals."""

from typing import Any, Iterable, List, NamedTuple, Optional, Sequence

from rapidfuzz import fuzz, process

from ..config import Settings, get_settings
from ..models.response import MatchType
from .edit_distance import edit_distance
from .fields import FieldAccessor
from .normalizer import TextNormalizer
from .phrases import generate_phrases

NO_MATCH = float("inf")

EXACT_SCORE = 0
PREFIX_SCORE = 1
SUBSTRING_SCORE = 2


class RecordScore(NamedTuple):
    """Best score of one record and the signal that produced it."""
    
    score: float
    match_type: Optional[MatchType]


class FuzzyMatcher:
    """Scores records against a normalized query."""
    
    def __init__(self, settings: Optional[Settings] = None) -> None:
        """
        Initialize the fuzzy matcher.
        
        Args:
            settings: Search settings (uses the cached global settings if None)
        """
        self.settings = settings or get_settings()
        self.normalizer = TextNormalizer()
    
    def score_record(
        self,
        record: Any,
        normalized_query: str,
        query_word_count: int,
        fields: Sequence[FieldAccessor]
    ) -> RecordScore:
        """
        Score one record against the query.
        
        Exact and prefix hits on any field end scoring immediately with
        scores 0 and 1. Otherwise the result is the minimum over every
        field of the substring bound (2), the best phrase distance and the
        full-text distance.
        
        Args:
            record: Caller record, only read through ``fields``
            normalized_query: Query after normalization
            query_word_count: Number of words in the query
            fields: Ordered field accessors
            
        Returns:
            RecordScore; score is NO_MATCH when no field had text
        """
        best = RecordScore(NO_MATCH, None)
        max_phrase_words = query_word_count + self.settings.phrase_window_extra
        
        for accessor in fields:
            value = self._field_text(record, accessor)
            if not value:
                continue
            
            if value == normalized_query:
                return RecordScore(EXACT_SCORE, MatchType.EXACT)
            if value.startswith(normalized_query):
                return RecordScore(PREFIX_SCORE, MatchType.PREFIX)
            
            if normalized_query in value:
                best = self._better(best, SUBSTRING_SCORE, MatchType.SUBSTRING)
            
            phrases = generate_phrases(self.normalizer.tokenize(value), max(1, max_phrase_words))
            for phrase in phrases:
                best = self._better(
                    best, edit_distance(phrase, normalized_query), MatchType.PHRASE
                )
            
            best = self._better(
                best, edit_distance(value, normalized_query), MatchType.FULL
            )
        
        return best
    
    def suggest_corrections(
        self,
        query: str,
        records: Iterable[Any],
        fields: Sequence[FieldAccessor],
        max_suggestions: Optional[int] = None
    ) -> List[str]:
        """
        Suggest field values close to a query that matched nothing.
        
        Args:
            query: Query to get suggestions for
            records: Records whose field values are candidates
            fields: Field accessors to read candidates from
            max_suggestions: Maximum number of suggestions
            
        Returns:
            Distinct normalized field values, best first
        """
        normalized_query = self.normalizer.normalize(query)
        if max_suggestions is None:
            max_suggestions = self.settings.suggestion_limit
        if not normalized_query or max_suggestions <= 0:
            return []
        
        candidates = []
        seen = set()
        for record in records:
            for accessor in fields:
                value = self._field_text(record, accessor)
                if value and value not in seen:
                    seen.add(value)
                    candidates.append(value)
        
        if not candidates:
            return []
        
        suggestions = process.extract(
            normalized_query,
            candidates,
            scorer=fuzz.WRatio,
            limit=max_suggestions,
            score_cutoff=self.settings.suggestion_cutoff
        )
        return [suggestion[0] for suggestion in suggestions]
    
    def _field_text(self, record: Any, accessor: FieldAccessor) -> str:
        """Read, normalize and clamp one field value; non-text reads as empty."""
        value = accessor(record)
        if not isinstance(value, str):
            return ""
        
        # Re-trim so a cut on a space leaves normalized text
        return self.normalizer.normalize(value)[:self.settings.max_text_length].strip(" ")
    
    @staticmethod
    def _better(current: RecordScore, score: float, match_type: MatchType) -> RecordScore:
        if score < current.score:
            return RecordScore(score, match_type)
        return current
