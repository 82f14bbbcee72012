"""Conditions and Failure Data

A Condition is one labelled check in a validator's chain. Checks return
``Result[None, Rejection]``; the chain walk turns the first Rejection into a
``Failure`` carrying where and why evaluation stopped. Message rendering lives
in ``formatting`` and never feeds back into the pass/fail decision.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from valtype.errors import OK, Err, ErrorCode, Result
from valtype.logging import validation_logger

from .formatting import render_failure, render_value

log = validation_logger()

Check = Callable[[Any], "Result[None, Rejection]"]
Predicate = Callable[[Any], bool]

# Predicates are pure; these are the ways they break on an unexpected kind
PREDICATE_ERRORS = (TypeError, ValueError, ArithmeticError)


@dataclass(frozen=True, slots=True)
class Rejection:
    """Why a single condition rejected a value.

    - key: offending key for structural checks (``keyed`` tells whether set,
      since None is a legal key)
    - cause: the nested validator's Failure, when one was consulted
    """
    reason: str | None = None
    key: Any = None
    keyed: bool = False
    cause: Failure | None = None
    code: ErrorCode | None = None

    @classmethod
    def at(cls, key: Any, *, reason: str | None = None, cause: Failure | None = None,
           code: ErrorCode | None = None) -> Rejection:
        return cls(reason=reason, key=key, keyed=True, cause=cause, code=code)


REJECTED = Err(Rejection())


@dataclass(frozen=True, slots=True)
class Failure:
    """Structured record of the first violated condition."""
    validator_name: str
    index: int
    label: str
    value: Any
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC
    reason: str | None = None
    key: Any = None
    keyed: bool = False
    cause: Failure | None = None

    @property
    def path(self) -> tuple[Any, ...]:
        """Keys leading from this value to the innermost offending value."""
        head = (self.key,) if self.keyed else ()
        return head + (self.cause.path if self.cause is not None else ())

    @property
    def innermost(self) -> Failure:
        failure = self
        while failure.cause is not None:
            failure = failure.cause
        return failure

    @property
    def message(self) -> str:
        return render_failure(self)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "validator": self.validator_name,
            "index": self.index,
            "condition": self.label,
            "value": render_value(self.value),
            "code": self.code.name,
            "path": list(self.path),
        }
        if self.reason:
            result["reason"] = self.reason
        if self.cause is not None:
            result["cause"] = self.cause.to_dict()
        return result


@dataclass(frozen=True, slots=True)
class Condition:
    """One named, checkable unit of a validator."""
    label: str
    check: Check = field(repr=False)
    code: ErrorCode = ErrorCode.E2005_CONSTRAINT_VIOLATION

    @classmethod
    def from_predicate(cls, label: str, predicate: Predicate,
                       code: ErrorCode = ErrorCode.E2005_CONSTRAINT_VIOLATION) -> Condition:
        """Wrap a boolean predicate as a condition."""
        def check(value: Any) -> Result[None, Rejection]:
            return OK if predicate(value) else REJECTED
        return cls(label, check, code)

    def evaluate(self, value: Any) -> Result[None, Rejection]:
        try:
            return self.check(value)
        except PREDICATE_ERRORS as e:
            log.debug("predicate_raised", condition=self.label, error=type(e).__name__, detail=str(e))
            return Err(Rejection(reason=f"{type(e).__name__}: {e}", code=ErrorCode.E2008_PREDICATE_ERROR))
