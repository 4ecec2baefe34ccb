"""Dot-path field resolution against opaque records."""

from collections.abc import Iterable, Mapping
from typing import Any, Callable, Sequence

FieldAccessor = Callable[[Any, str], str]

_MISSING = object()


def _resolve_segment(value: Any, segment: str) -> Any:
    """Look up one path segment on a mapping, sequence or plain object."""
    if isinstance(value, Mapping):
        return value.get(segment, _MISSING)
    
    if isinstance(value, (list, tuple)):
        if segment.isdigit() and int(segment) < len(value):
            return value[int(segment)]
        return _MISSING
    
    if isinstance(value, str):
        return _MISSING
    
    return getattr(value, segment, _MISSING)


def get_field_value(record: Any, field_path: str) -> str:
    """
    Resolve a dot-delimited field path against a record as a string.
    
    Missing segments and None values anywhere along the path resolve to an
    empty string. List and tuple values are joined with single spaces.
    
    Args:
        record: Record to read from (mapping, sequence or object)
        field_path: Dot-delimited path such as "meta.aliases"
        
    Returns:
        The field value as a string
    """
    if record is None or not field_path:
        return ""
    
    value = record
    for segment in field_path.split('.'):
        if value is None:
            return ""
        value = _resolve_segment(value, segment)
        if value is _MISSING:
            return ""
    
    if value is None:
        return ""
    
    if isinstance(value, (list, tuple)):
        return ' '.join("" if element is None else str(element) for element in value)
    
    return str(value)


def as_records(items: Any) -> Sequence[Any]:
    """Coerce a caller-supplied collection into a record sequence; anything else is empty."""
    if isinstance(items, (list, tuple)):
        return items
    if items is None or isinstance(items, (str, bytes, Mapping)) or not isinstance(items, Iterable):
        return []
    return list(items)
