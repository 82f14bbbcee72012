"""Validator

An immutable, ordered chain of conditions. Every builder method returns a new
Validator carrying one more condition; the receiver is never modified, so two
chains started from the same validator never observe each other.

Evaluation walks the chain in insertion order and stops at the first failing
condition. An empty chain accepts every value.

Usage:
    user = validator().object({
        "name": string(),
        "age": number().integer(),
    }, "User")

    user.assert_valid({"name": "test", "age": 20})
    user.validate({"name": "test", "age": 20.5})   # Err(Failure(...))
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from valtype.errors import OK, Err, ErrorCode, Result, ValidationError
from valtype.logging import validation_logger

from . import combinators, refinements, structural
from .conditions import Condition, Failure, Predicate
from .kinds import Kind
from .refinements import LengthMode, configuration_error

log = validation_logger()


@dataclass(frozen=True, slots=True)
class Validator:
    """Composed set of conditions describing acceptable values."""
    conditions: tuple[Condition, ...] = ()
    name: str | None = None

    # -- composition ---------------------------------------------------------

    def add(self, condition: Condition) -> Validator:
        """Return a new validator with ``condition`` appended."""
        return replace(self, conditions=(*self.conditions, condition))

    def with_condition(self, label: str, predicate: Predicate,
                       code: ErrorCode = ErrorCode.E2005_CONSTRAINT_VIOLATION) -> Validator:
        """Append a custom boolean predicate under ``label``."""
        return self.add(refinements.custom_condition(label, predicate, code))

    def set_name(self, name: str) -> Validator:
        """Replace the diagnostic name. Never affects the outcome."""
        if not isinstance(name, str) or not name:
            raise configuration_error("Validator name must be a non-empty string", "name")
        return replace(self, name=name)

    def describe(self) -> str:
        return " & ".join(c.label for c in self.conditions) or "any"

    @property
    def display_name(self) -> str:
        """Name used in diagnostics; falls back to the chain description."""
        return self.name or self.describe()

    # -- evaluation ----------------------------------------------------------

    def validate(self, value: Any) -> Result[None, Failure]:
        """Check ``value`` without raising. ``Err`` holds the first failure."""
        for index, condition in enumerate(self.conditions, start=1):
            result = condition.evaluate(value)
            if result.is_err():
                rejection = result.unwrap_err()
                return Err(Failure(
                    validator_name=self.display_name,
                    index=index,
                    label=condition.label,
                    value=value,
                    code=rejection.code or condition.code,
                    reason=rejection.reason,
                    key=rejection.key,
                    keyed=rejection.keyed,
                    cause=rejection.cause,
                ))
        return OK

    def is_valid(self, value: Any) -> bool:
        return self.validate(value).is_ok()

    def assert_valid(self, value: Any) -> None:
        """Raise ValidationError on the first violated condition."""
        result = self.validate(value)
        if result.is_err():
            failure = result.unwrap_err()
            log.debug("assertion_failed", validator=failure.validator_name, index=failure.index,
                      condition=failure.label, path=list(failure.path))
            raise ValidationError(failure)

    def __call__(self, value: Any) -> Result[None, Failure]:
        return self.validate(value)

    # -- kinds ---------------------------------------------------------------

    def kind(self, kind: Kind | str) -> Validator:
        return self.add(refinements.kind_condition(kind))

    def string(self) -> Validator:
        return self.kind(Kind.STRING)

    def number(self) -> Validator:
        return self.kind(Kind.NUMBER)

    def boolean(self) -> Validator:
        return self.kind(Kind.BOOLEAN)

    def function(self) -> Validator:
        return self.kind(Kind.FUNCTION)

    def none(self) -> Validator:
        return self.kind(Kind.NONE)

    def opaque(self) -> Validator:
        return self.kind(Kind.OPAQUE)

    def concurrent(self) -> Validator:
        return self.kind(Kind.CONCURRENT)

    def record(self) -> Validator:
        return self.kind(Kind.RECORD)

    # -- refinements ---------------------------------------------------------

    def integer(self) -> Validator:
        return self.add(refinements.integer_condition())

    def even(self) -> Validator:
        return self.add(refinements.even_condition())

    def odd(self) -> Validator:
        return self.add(refinements.odd_condition())

    def less_than(self, bound: Any) -> Validator:
        return self.add(refinements.less_than_condition(bound))

    def greater_than(self, bound: Any) -> Validator:
        return self.add(refinements.greater_than_condition(bound))

    def matches(self, pattern: str | re.Pattern, flags: int = 0) -> Validator:
        return self.add(refinements.matches_condition(pattern, flags))

    def length(self, size: int, mode: LengthMode | str = LengthMode.EXACT) -> Validator:
        return self.add(refinements.length_condition(size, mode))

    def equals(self, expected: Any) -> Validator:
        return self.add(refinements.equals_condition(expected))

    # -- structural ----------------------------------------------------------

    def object(self, schema: Mapping[Any, Validator], name: str | None = None, strict: bool = False) -> Validator:
        return self.add(structural.object_condition(schema, name, strict))

    structure = object

    def keys(self, inner: Validator) -> Validator:
        return self.add(structural.keys_condition(inner))

    def values(self, inner: Validator) -> Validator:
        return self.add(structural.values_condition(inner))

    def array(self) -> Validator:
        return self.add(structural.array_condition())

    # -- combinators ---------------------------------------------------------

    def optional(self, inner: Validator) -> Validator:
        return self.add(combinators.optional_condition(inner))

    def either(self, *alternatives: Validator) -> Validator:
        return self.add(combinators.either_condition(*alternatives))

    def is_not(self, inner: Validator) -> Validator:
        return self.add(combinators.is_not_condition(inner))

    # -- operators -----------------------------------------------------------

    def __and__(self, other: Validator) -> Validator:
        """Both chains, ``self`` first. The left operand's name is kept."""
        if not isinstance(other, Validator):
            return NotImplemented
        return replace(self, conditions=(*self.conditions, *other.conditions))

    def __or__(self, other: Validator) -> Validator:
        if not isinstance(other, Validator):
            return NotImplemented
        return Validator().either(self, other)

    def __invert__(self) -> Validator:
        return Validator().is_not(self)
