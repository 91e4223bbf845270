"""Functional entry point around SearchEngine."""

from typing import Any, List, Optional, Sequence

from .config import Settings, get_settings
from .core.cache import SearchCache
from .core.engine import SearchEngine
from .core.fields import FieldSpec


def search(
    records: Sequence[Any],
    query: str,
    fields: Sequence[FieldSpec],
    threshold: Optional[int] = None,
    limit: int = 5,
    cache: Optional[SearchCache] = None,
    settings: Optional[Settings] = None
) -> List[Any]:
    """
    Rank ``records`` against ``query`` in one call.
    
    Results are memoized only in ``cache`` when one is given; keep using
    the same cache across calls for memoization, and clear it whenever the
    record collection changes.
    """
    settings = settings or get_settings()
    if cache is None:
        settings = settings.model_copy(update={"enable_cache": False})
    
    engine = SearchEngine(settings=settings, cache=cache)
    return engine.search(records, query, fields, threshold=threshold, limit=limit)
