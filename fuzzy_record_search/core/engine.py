"""Search coordinator: normalization, thresholds, caching and ranking."""

import math
import time
from typing import Any, Dict, List, Optional, Sequence, Tuple

import structlog

from ..config import Settings, get_settings
from ..models.response import MatchType, ScoredMatch, SearchResponse
from .cache import SearchCache
from .fields import FieldSpec, describe_fields, resolve_fields
from .fuzzy_matcher import FuzzyMatcher
from .normalizer import TextNormalizer

logger = structlog.get_logger(__name__)


class SearchEngine:
    """
    Ranks caller records by how closely their text fields match a query.
    
    The engine owns no records. Results are memoized in the optional
    ``cache`` under (normalized query, threshold, limit); the key does not
    identify the record collection, so callers must clear the cache (or
    pass a new one) whenever the collection they search changes.
    """
    
    def __init__(
        self,
        settings: Optional[Settings] = None,
        cache: Optional[SearchCache] = None,
        matcher: Optional[FuzzyMatcher] = None
    ) -> None:
        """
        Initialize the search engine.
        
        Args:
            settings: Search settings (uses the cached global settings if None)
            cache: Result cache; a private one is created when caching is
                enabled in settings and none is given
            matcher: Record scorer, mainly for instrumentation
        """
        self.settings = settings or get_settings()
        if cache is None and self.settings.enable_cache:
            cache = SearchCache(max_size=self.settings.cache_max_size)
        self.cache = cache
        self.matcher = matcher or FuzzyMatcher(self.settings)
        self.normalizer = TextNormalizer()
        
        self._stats = self._empty_stats()
    
    def search(
        self,
        records: Sequence[Any],
        query: str,
        fields: Sequence[FieldSpec],
        threshold: Optional[int] = None,
        limit: Optional[int] = None
    ) -> List[Any]:
        """
        Return the records best matching a query, best first.
        
        Args:
            records: Candidate records, in tie-breaking order
            query: Raw query text
            fields: Field names or accessors to inspect on each record
            threshold: Maximum accepted score (derived from the query if None)
            limit: Maximum number of records (settings default if None)
            
        Returns:
            Matching records; empty for queries shorter than the minimum
        """
        matches, _, _ = self._run(records, query, fields, threshold, limit)
        return [match.record for match in matches]
    
    def search_detailed(
        self,
        records: Sequence[Any],
        query: str,
        fields: Sequence[FieldSpec],
        threshold: Optional[int] = None,
        limit: Optional[int] = None,
        include_suggestions: bool = True
    ) -> SearchResponse:
        """
        Search and report scores, match types and timing.
        
        Args:
            records: Candidate records, in tie-breaking order
            query: Raw query text
            fields: Field names or accessors to inspect on each record
            threshold: Maximum accepted score (derived from the query if None)
            limit: Maximum number of results (settings default if None)
            include_suggestions: Whether to suggest close field values when
                nothing matched
            
        Returns:
            SearchResponse with ranked matches
        """
        start_time = time.time()
        
        matches, effective_threshold, cache_hit = self._run(
            records, query, fields, threshold, limit
        )
        
        suggestions = None
        if not matches and include_suggestions and effective_threshold is not None:
            suggestions = self.matcher.suggest_corrections(
                query, records, resolve_fields(fields)
            )
        
        return SearchResponse(
            query=query,
            normalized_query=self.normalizer.normalize(query),
            threshold=effective_threshold,
            limit=self._effective_limit(limit),
            total_results=len(matches),
            results=list(matches),
            exact_match=bool(matches) and matches[0].match_type == MatchType.EXACT,
            cache_hit=cache_hit,
            execution_time_ms=(time.time() - start_time) * 1000,
            suggestions=suggestions
        )
    
    def derive_threshold(self, normalized_query: str) -> int:
        """Default maximum score, growing with query length."""
        return max(
            self.settings.min_threshold,
            math.floor(self.settings.threshold_ratio * len(normalized_query))
        )
    
    def _run(
        self,
        records: Sequence[Any],
        query: str,
        fields: Sequence[FieldSpec],
        threshold: Optional[int],
        limit: Optional[int]
    ) -> Tuple[Tuple[ScoredMatch, ...], Optional[int], bool]:
        """Run the search pipeline; returns (matches, threshold, cache hit)."""
        start_time = time.time()
        self._stats["total_queries"] += 1
        
        normalized_query = self._clamp(self.normalizer.normalize(query))
        if len(normalized_query) < self.settings.min_query_length:
            self._stats["rejected_queries"] += 1
            logger.debug(
                "search_rejected_short_query",
                query_length=len(normalized_query),
                min_query_length=self.settings.min_query_length
            )
            return (), None, False
        
        effective_threshold = (
            threshold if threshold is not None else self.derive_threshold(normalized_query)
        )
        effective_limit = self._effective_limit(limit)
        
        key = SearchCache.make_key(normalized_query, effective_threshold, effective_limit)
        if self.cache is not None:
            cached = self.cache.get(key)
            if cached is not None:
                self._stats["cache_hits"] += 1
                self._record_outcome(cached, start_time)
                logger.debug("search_cache_hit", query=normalized_query, results=len(cached))
                return cached, effective_threshold, True
            self._stats["cache_misses"] += 1
        
        accessors = resolve_fields(fields)
        matches = self._rank(records, normalized_query, accessors, effective_threshold)
        matches = tuple(matches[:effective_limit])
        
        if self.cache is not None:
            self.cache.set(key, matches)
        
        self._record_outcome(matches, start_time)
        logger.debug(
            "search_completed",
            query=normalized_query,
            threshold=effective_threshold,
            limit=effective_limit,
            fields=describe_fields(accessors),
            records=len(records),
            results=len(matches)
        )
        return matches, effective_threshold, False
    
    def _rank(
        self,
        records: Sequence[Any],
        normalized_query: str,
        accessors,
        threshold: int
    ) -> List[ScoredMatch]:
        """Score every record, keep those within threshold, stable sort by score."""
        query_word_count = len(self.normalizer.tokenize(normalized_query))
        
        matches = []
        for position, record in enumerate(records):
            score, match_type = self.matcher.score_record(
                record, normalized_query, query_word_count, accessors
            )
            self._stats["records_scored"] += 1
            if score <= threshold:
                matches.append(ScoredMatch(
                    record=record,
                    score=int(score),
                    match_type=match_type,
                    position=position
                ))
        
        # list.sort is stable, so equal scores keep collection order
        matches.sort(key=lambda match: match.score)
        return matches
    
    def _clamp(self, normalized: str) -> str:
        """Cut normalized text to the supported length, keeping it trimmed."""
        return normalized[:self.settings.max_text_length].strip(" ")

    def _effective_limit(self, limit: Optional[int]) -> int:
        if limit is None:
            return self.settings.default_limit
        return max(0, limit)
    
    def _record_outcome(self, matches: Sequence[ScoredMatch], start_time: float) -> None:
        if not matches:
            self._stats["no_matches"] += 1
        elif matches[0].match_type == MatchType.EXACT:
            self._stats["exact_matches"] += 1
        else:
            self._stats["fuzzy_matches"] += 1
        self._stats["total_execution_time"] += (time.time() - start_time) * 1000
    
    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            "total_queries": 0,
            "rejected_queries": 0,
            "exact_matches": 0,
            "fuzzy_matches": 0,
            "no_matches": 0,
            "records_scored": 0,
            "cache_hits": 0,
            "cache_misses": 0,
            "total_execution_time": 0.0
        }
    
    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        stats = self._stats.copy()
        
        # Calculate averages over queries that reached the ranking stage
        answered = stats["total_queries"] - stats["rejected_queries"]
        if answered > 0:
            stats["average_execution_time_ms"] = stats["total_execution_time"] / answered
            stats["exact_match_rate"] = stats["exact_matches"] / answered
            stats["fuzzy_match_rate"] = stats["fuzzy_matches"] / answered
            stats["no_match_rate"] = stats["no_matches"] / answered
            lookups = stats["cache_hits"] + stats["cache_misses"]
            stats["cache_hit_rate"] = stats["cache_hits"] / lookups if lookups else 0.0
        else:
            stats["average_execution_time_ms"] = 0.0
            stats["exact_match_rate"] = 0.0
            stats["fuzzy_match_rate"] = 0.0
            stats["no_match_rate"] = 0.0
            stats["cache_hit_rate"] = 0.0
        
        stats["cache_size"] = len(self.cache) if self.cache is not None else 0
        
        return stats
    
    def clear(self) -> None:
        """Empty the cache and reset statistics."""
        if self.cache is not None:
            self.cache.clear()
        self._stats = self._empty_stats()
