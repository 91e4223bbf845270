"""Field accessors: how the engine reads text out of caller records."""

from collections.abc import Mapping
from typing import Any, Callable, Iterable, List, Optional, Union

FieldAccessor = Callable[[Any], Optional[str]]
FieldSpec = Union[str, FieldAccessor]


def field(name: str) -> FieldAccessor:
    """
    Build an accessor reading ``name`` from a record.
    
    Mapping records are read by key, anything else by attribute. Missing
    fields and values that are not strings read as None.
    """
    def accessor(record: Any) -> Optional[str]:
        if isinstance(record, Mapping):
            value = record.get(name)
        else:
            value = getattr(record, name, None)
        return value if isinstance(value, str) else None
    
    accessor.__name__ = f"field_{name}"
    accessor.field_name = name
    return accessor


def resolve_fields(fields: Optional[Iterable[FieldSpec]]) -> List[FieldAccessor]:
    """Turn a mix of field names and accessors into an ordered accessor list."""
    if not fields:
        return []
    
    return [field(spec) if isinstance(spec, str) else spec for spec in fields]


def describe_fields(fields: Iterable[FieldAccessor]) -> List[str]:
    """Readable names for accessors, used in log context."""
    return [
        getattr(accessor, "field_name", getattr(accessor, "__name__", repr(accessor)))
        for accessor in fields
    ]
