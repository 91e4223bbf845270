"""Search settings and configuration management."""

from functools import lru_cache
from typing import Optional

from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings

from ..core.edit_distance import MAX_TEXT_LENGTH


class Settings(BaseSettings):
    """Search settings with environment variable support."""
    
    # Query handling
    min_query_length: int = Field(default=3, ge=0)
    threshold_ratio: float = Field(default=0.45, ge=0.0)
    min_threshold: int = Field(default=3, ge=0)
    default_limit: int = Field(default=5, ge=0)
    
    # Scoring
    phrase_window_extra: int = Field(default=1, ge=0)  # phrases up to query words + this
    max_text_length: int = Field(default=MAX_TEXT_LENGTH, ge=1, le=MAX_TEXT_LENGTH)
    
    # Cache Configuration
    enable_cache: bool = Field(default=True)
    cache_max_size: Optional[int] = Field(default=None, ge=1)  # None = unbounded
    
    # Suggestions
    suggestion_limit: int = Field(default=5, ge=0)
    suggestion_cutoff: float = Field(default=60.0, ge=0.0, le=100.0)
    
    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")
    
    model_config = ConfigDict(
        env_prefix="FUZZY_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached search settings."""
    return Settings()
