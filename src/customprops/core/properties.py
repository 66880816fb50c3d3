"""
Shape-agnostic access to property sequences and the records inside them.

A control may be a `HasCustomProperties`, a mapping, or a plain object; a
record may be a mapping or an object spelling its keys `name`/`value` or
`Name`/`Value`. Anything else reads as "nothing there".
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, List, Tuple

from .record import HasCustomProperties

logger = logging.getLogger(__name__)

# (name key, value key); lower-case spelling is tried first
_SPELLINGS: Tuple[Tuple[str, str], ...] = (("name", "value"), ("Name", "Value"))

_MISSING = object()


def _lookup(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key, _MISSING)
    return getattr(obj, key, _MISSING)


def property_sequence(control: Any, field: str) -> List[Any] | None:
    """Return the control's records, or ``None`` when there are none to read."""
    if isinstance(control, HasCustomProperties):
        seq = control.property_sequence()
        source = "property_sequence()"
    elif isinstance(control, Mapping):
        seq = control.get(field)
        source = repr(field)
    else:
        seq = getattr(control, field, None)
        source = repr(field)

    kind = type(control).__name__
    if seq is None:
        logger.debug("no records from %s on %s", source, kind)
        return None
    if isinstance(seq, (str, bytes, Mapping)) or not isinstance(seq, Iterable):
        logger.debug("%s on %s is not a record sequence", source, kind)
        return None
    # a list is handed back as-is, other iterables are copied
    return seq if isinstance(seq, list) else list(seq)


def record_name(record: Any) -> str | None:
    """Name of `record`, or ``None`` for a malformed record."""
    for name_key, _ in _SPELLINGS:
        name = _lookup(record, name_key)
        if name is not _MISSING:
            return name
    logger.debug("skipping malformed record %r", record)
    return None


def record_value(record: Any) -> Any:
    """Value of `record`; ``None`` when it has no value field."""
    for name_key, value_key in _SPELLINGS:
        if _lookup(record, name_key) is not _MISSING:
            value = _lookup(record, value_key)
            return None if value is _MISSING else value
    return None


def set_record_value(record: Any, value: Any) -> bool:
    """
    Overwrite the value of `record` in place, matching its key spelling.

    Returns False, leaving the record alone, when it refuses the write
    (namedtuples, frozen models, read-only mappings).
    """
    value_key = _SPELLINGS[0][1]
    for name_key, key in _SPELLINGS:
        if _lookup(record, name_key) is not _MISSING:
            value_key = key
            break

    try:
        if isinstance(record, Mapping):
            record[value_key] = value  # type: ignore[index]
        else:
            setattr(record, value_key, value)
    except (AttributeError, TypeError, ValueError) as exc:
        logger.debug("record %r is read-only: %s", record, exc)
        return False
    return True
