"""Failure Message Rendering

Turns structured ``Failure`` data into the human-readable form:

    [User] Failed assertion at #3: {'age': 20.5} is not object:User (key 'age': ...)
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from valtype.config import get_settings

if TYPE_CHECKING:
    from .conditions import Failure


def render_value(value: Any, limit: int | None = None) -> str:
    """repr() of a value, truncated for diagnostics."""
    limit = limit if limit is not None else get_settings().REPR_MAX_LENGTH
    text = repr(value)
    if limit > 3 and len(text) > limit:
        return text[: limit - 3] + "..."
    return text


def render_failure(failure: Failure) -> str:
    message = (
        f"[{failure.validator_name}] Failed assertion at #{failure.index}: "
        f"{render_value(failure.value)} is not {failure.label}"
    )
    if failure.keyed:
        detail = render_failure(failure.cause) if failure.cause is not None else failure.reason
        return f"{message} (key {render_value(failure.key)}: {detail})"
    if failure.cause is not None:
        return f"{message} ({render_failure(failure.cause)})"
    if failure.reason:
        return f"{message} ({failure.reason})"
    return message
