"""Logical Combinators

optional, either and is_not over other validators. Like the structural
conditions, they consult nested validators through ``validate`` and never let
a nested failure raise.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from valtype.errors import OK, Err, ErrorCode, Result

from .conditions import REJECTED, Condition, Rejection
from .refinements import configuration_error
from .structural import require_validator

if TYPE_CHECKING:
    from .validator import Validator


def optional_condition(inner: Validator) -> Condition:
    """None passes; anything else must satisfy ``inner``."""
    inner = require_validator(inner, "optional")

    def check(value: Any) -> Result[None, Rejection]:
        if value is None:
            return OK
        return inner.validate(value).map_err(lambda failure: Rejection(cause=failure))

    return Condition(f"optional({inner.display_name})", check)


def either_condition(*alternatives: Validator) -> Condition:
    """At least one alternative passes; tried in order, first success wins."""
    if not alternatives:
        raise configuration_error("either() needs at least one alternative", "alternatives")
    alternatives = tuple(require_validator(alt, f"alternatives[{i}]") for i, alt in enumerate(alternatives))

    def check(value: Any) -> Result[None, Rejection]:
        if any(alt.validate(value).is_ok() for alt in alternatives):
            return OK
        return Err(Rejection(reason="no alternative matched", code=ErrorCode.E2007_NO_ALTERNATIVE))

    label = " | ".join(alt.display_name for alt in alternatives)
    return Condition(f"either({label})", check)


def is_not_condition(inner: Validator) -> Condition:
    inner = require_validator(inner, "is_not")

    def check(value: Any) -> Result[None, Rejection]:
        return REJECTED if inner.validate(value).is_ok() else OK

    return Condition(f"not({inner.display_name})", check)
