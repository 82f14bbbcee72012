"""Module-level Factories

Each function starts a fresh chain from ``validator()``, the empty template.
``validator()`` builds a new value on every call; there is no shared
singleton to mutate.
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Callable

from valtype.errors import ErrorCode

from .conditions import Predicate
from .kinds import Kind
from .refinements import LengthMode
from .validator import Validator


def validator(name: str | None = None) -> Validator:
    """Empty validator: accepts every value until conditions are added."""
    return Validator() if name is None else Validator().set_name(name)


def kind(expected: Kind | str) -> Validator:
    return validator().kind(expected)


def string() -> Validator:
    return validator().string()


def number() -> Validator:
    return validator().number()


def boolean() -> Validator:
    return validator().boolean()


def function() -> Validator:
    return validator().function()


def none() -> Validator:
    return validator().none()


def opaque() -> Validator:
    return validator().opaque()


def concurrent() -> Validator:
    return validator().concurrent()


def record() -> Validator:
    return validator().record()


def integer() -> Validator:
    """Number with no fractional part."""
    return validator().number().integer()


def matches(pattern: str | re.Pattern, flags: int = 0) -> Validator:
    return validator().string().matches(pattern, flags)


def length(size: int, mode: LengthMode | str = LengthMode.EXACT) -> Validator:
    return validator().length(size, mode)


def equals(expected: Any) -> Validator:
    return validator().equals(expected)


def structure(schema: Mapping[Any, Validator], name: str | None = None, strict: bool = False) -> Validator:
    """Record shape check; ``name`` also names the validator for diagnostics."""
    return validator(name).object(schema, name, strict)


def keys(inner: Validator) -> Validator:
    return validator().keys(inner)


def values(inner: Validator) -> Validator:
    return validator().values(inner)


def array() -> Validator:
    return validator().array()


def optional(inner: Validator) -> Validator:
    return validator().optional(inner)


def either(*alternatives: Validator) -> Validator:
    return validator().either(*alternatives)


def is_not(inner: Validator) -> Validator:
    return validator().is_not(inner)


def custom(label: str, code: ErrorCode = ErrorCode.E2005_CONSTRAINT_VIOLATION) -> Callable[[Predicate], Validator]:
    """Decorator to create a validator from a boolean predicate.

    Usage:
        @custom("positive")
        def positive(n) -> bool:
            return n > 0

        port = number().integer() & positive
    """
    return lambda predicate: validator().with_condition(label, predicate, code)
