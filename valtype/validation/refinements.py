"""Primitive and Refinement Conditions

Factories that build exactly one Condition each. Arguments are checked here,
at build time; a bad argument raises ConfigurationError immediately.

Numeric refinements do not re-check the kind of the candidate. Order
``number()`` before ``integer()`` (and friends) in the chain.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Any

from valtype.errors import ConfigurationError, ErrorCode
from valtype.logging import builder_logger

from .conditions import Condition, Predicate
from .formatting import render_value
from .kinds import Kind, is_number, kind_of

log = builder_logger()


class LengthMode(str, Enum):
    """How ``length`` compares a value's length to the bound."""
    EXACT = "exact"
    LESS = "less"
    GREATER = "greater"


_LENGTH_OPERATORS = {LengthMode.EXACT: "==", LengthMode.LESS: "<", LengthMode.GREATER: ">"}


def configuration_error(message: str, argument: str | None = None, *,
                        code: ErrorCode = ErrorCode.E7002_INVALID_ARGUMENT) -> ConfigurationError:
    """Log and build a ConfigurationError for the caller to raise."""
    log.warning("invalid_configuration", argument=argument, message=message)
    return ConfigurationError(message, argument, code=code)


# ============================================================================
# Kind Checks
# ============================================================================

def kind_condition(kind: Kind | str) -> Condition:
    try:
        expected = Kind(kind)
    except ValueError:
        valid = ", ".join(k.value for k in Kind)
        raise configuration_error(f"Unknown kind {kind!r}; expected one of: {valid}", "kind") from None
    return Condition.from_predicate(expected.value, lambda value: kind_of(value) is expected,
                                    ErrorCode.E2004_INVALID_TYPE)


# ============================================================================
# Numeric Refinements
# ============================================================================

def integer_condition() -> Condition:
    return Condition.from_predicate("integer", lambda value: value % 1 == 0)


def even_condition() -> Condition:
    return Condition.from_predicate("even", lambda value: abs(value) % 2 == 0)


def odd_condition() -> Condition:
    return Condition.from_predicate("odd", lambda value: abs(value) % 2 == 1)


def _require_number(bound: Any, argument: str) -> None:
    if not is_number(bound):
        raise configuration_error(f"{argument} bound must be a number, got {type(bound).__name__}", argument)


def less_than_condition(bound: Any) -> Condition:
    _require_number(bound, "less_than")
    return Condition.from_predicate(f"less_than({bound!r})", lambda value: value < bound,
                                    ErrorCode.E2003_OUT_OF_RANGE)


def greater_than_condition(bound: Any) -> Condition:
    _require_number(bound, "greater_than")
    return Condition.from_predicate(f"greater_than({bound!r})", lambda value: value > bound,
                                    ErrorCode.E2003_OUT_OF_RANGE)


# ============================================================================
# String Refinements
# ============================================================================

def matches_condition(pattern: str | re.Pattern, flags: int = 0) -> Condition:
    """Search semantics: the pattern may match anywhere unless anchored."""
    if isinstance(pattern, re.Pattern):
        compiled = pattern
    elif isinstance(pattern, str):
        try:
            compiled = re.compile(pattern, flags)
        except re.error as e:
            raise configuration_error(f"Invalid pattern {pattern!r}: {e}", "pattern") from e
    else:
        raise configuration_error(f"Pattern must be a string or compiled regex, got {type(pattern).__name__}",
                                  "pattern")

    def predicate(value: Any) -> bool:
        return isinstance(value, str) and compiled.search(value) is not None

    return Condition.from_predicate(f"matches({compiled.pattern!r})", predicate, ErrorCode.E2002_INVALID_FORMAT)


def length_condition(size: int, mode: LengthMode | str = LengthMode.EXACT) -> Condition:
    if not isinstance(size, int) or isinstance(size, bool) or size < 0:
        raise configuration_error(f"Length must be a non-negative integer, got {size!r}", "length")
    try:
        mode = LengthMode(mode)
    except ValueError:
        valid = ", ".join(m.value for m in LengthMode)
        raise configuration_error(f"Unknown length mode {mode!r}; expected one of: {valid}", "mode") from None

    predicates: dict[LengthMode, Predicate] = {
        LengthMode.EXACT: lambda value: len(value) == size,
        LengthMode.LESS: lambda value: len(value) < size,
        LengthMode.GREATER: lambda value: len(value) > size,
    }
    return Condition.from_predicate(f"length({_LENGTH_OPERATORS[mode]} {size})", predicates[mode],
                                    ErrorCode.E2003_OUT_OF_RANGE)


# ============================================================================
# Equality
# ============================================================================

def equals_condition(expected: Any) -> Condition:
    return Condition.from_predicate(f"equals({render_value(expected, 40)})", lambda value: value == expected)


def custom_condition(label: str, predicate: Predicate,
                     code: ErrorCode = ErrorCode.E2005_CONSTRAINT_VIOLATION) -> Condition:
    """User-supplied predicate, appended as-is."""
    if not isinstance(label, str) or not label:
        raise configuration_error("Condition label must be a non-empty string", "label")
    if not callable(predicate):
        raise configuration_error(f"Predicate must be callable, got {type(predicate).__name__}", "predicate")
    return Condition.from_predicate(label, predicate, code)
