"""Response models for detailed searches."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field


class MatchType(str, Enum):
    """Signal that produced a record's best score."""
    
    EXACT = "exact"
    PREFIX = "prefix"
    SUBSTRING = "substring"
    PHRASE = "phrase"
    FULL = "full"


class ScoredMatch(BaseModel):
    """A matched record with its score."""
    
    record: Any = Field(..., description="The caller's record, untouched")
    score: int = Field(..., ge=0, description="Match score, 0 is exact and lower is better")
    match_type: MatchType = Field(..., description="Signal that produced the score")
    position: int = Field(..., ge=0, description="Index of the record in the searched collection")


class SearchResponse(BaseModel):
    """Response for a detailed search."""
    
    query: str = Field(..., description="Original search query")
    normalized_query: str = Field(..., description="Query after normalization")
    threshold: Optional[int] = Field(None, description="Effective maximum score, None when the query was rejected")
    limit: int = Field(..., ge=0, description="Maximum number of results")
    total_results: int = Field(..., ge=0, description="Number of returned matches")
    results: List[ScoredMatch] = Field(default_factory=list, description="Ranked matches")
    exact_match: bool = Field(False, description="Whether the best match is exact")
    cache_hit: bool = Field(False, description="Whether the ranking was served from cache")
    execution_time_ms: float = Field(..., ge=0.0, description="Search execution time in milliseconds")
    suggestions: Optional[List[str]] = Field(None, description="Close field values when nothing matched")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), description="Response timestamp"
    )
    
    @property
    def records(self) -> List[Any]:
        """The matched records in rank order."""
        return [match.record for match in self.results]
