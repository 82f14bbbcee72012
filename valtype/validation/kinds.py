"""Value Kinds

The universe of checkable values as a closed set of tags. Kind checks are a
tag match against ``kind_of(value)``.
"""
from __future__ import annotations

import asyncio
import concurrent.futures
import inspect
import threading
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any, Iterator


class Kind(str, Enum):
    """Runtime kind tag of a candidate value."""
    NONE = "none"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    RECORD = "record"
    FUNCTION = "function"
    OPAQUE = "opaque"
    CONCURRENT = "concurrent"


_CONCURRENT_TYPES = (threading.Thread, concurrent.futures.Future, asyncio.Future)


def is_number(value: Any) -> bool:
    # bool is an int subclass but has its own kind
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def is_record(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def is_concurrent(value: Any) -> bool:
    return (
        isinstance(value, _CONCURRENT_TYPES)
        or inspect.iscoroutine(value)
        or inspect.isgenerator(value)
        or inspect.isasyncgen(value)
    )


def kind_of(value: Any) -> Kind:
    """Classify a value into exactly one Kind."""
    if value is None:
        return Kind.NONE
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if is_number(value):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.STRING
    if is_record(value):
        return Kind.RECORD
    if is_concurrent(value):
        return Kind.CONCURRENT
    if callable(value):
        return Kind.FUNCTION
    return Kind.OPAQUE


def record_items(value: Any) -> Iterator[tuple[Any, Any]]:
    """Iterate (key, value) pairs of a record; sequences use 0-based indices."""
    if isinstance(value, Mapping):
        return iter(value.items())
    return enumerate(value)


def record_get(value: Any, key: Any) -> Any:
    """Return the entry at ``key``, or None when the record has no such key."""
    if isinstance(value, Mapping):
        return value.get(key)
    if isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(value):
        return value[key]
    return None
