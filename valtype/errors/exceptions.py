"""Exception Hierarchy

Two failure families:
- ValidationError: a candidate value was rejected by a validator. Raised only
  by ``Validator.assert_valid``; nested checks report through ``Result``.
- ConfigurationError: a validator was built from an invalid definition.
  Raised while building, never while evaluating.

All exceptions inherit from ``ValtypeError`` and provide ``to_dict()``.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .types import ErrorCode

if TYPE_CHECKING:
    from valtype.validation.conditions import Failure


class ValtypeError(Exception):
    """Base exception for all valtype errors."""
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "code": self.code.name,
            "message": str(self),
        }


class ValidationError(ValtypeError):
    """A value failed a validator's condition chain.

    Carries the structured ``Failure`` for programmatic handling; the
    exception message is its rendered form.
    """

    def __init__(self, failure: Failure) -> None:
        self.failure = failure
        self.code = failure.code
        super().__init__(failure.message)

    @property
    def index(self) -> int:
        return self.failure.index

    @property
    def label(self) -> str:
        return self.failure.label

    @property
    def validator_name(self) -> str:
        return self.failure.validator_name

    @property
    def value(self) -> Any:
        return self.failure.value

    @property
    def path(self) -> tuple[Any, ...]:
        """Keys leading from the asserted value to the innermost offender."""
        return self.failure.path

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "message": str(self),
            **self.failure.to_dict(),
        }


class ConfigurationError(ValtypeError):
    """A validator was built from an invalid definition."""
    code = ErrorCode.E7000_CONFIGURATION_GENERIC

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        *,
        code: ErrorCode = ErrorCode.E7000_CONFIGURATION_GENERIC,
    ) -> None:
        self.message = message
        self.argument = argument
        self.code = code
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "CONFIGURATION_ERROR",
            "code": self.code.name,
            "message": self.message,
            "argument": self.argument,
        }
