"""Error Handling

Result values for nested checks, exceptions for the outer boundary.

Usage:
    from valtype.errors import Ok, Err, ValidationError

    match number().validate("x"):
        case Ok():
            ...
        case Err(failure):
            print(failure.message)
"""
from .types import (
    OK,
    Err,
    ErrorCode,
    Ok,
    Result,
)
from .exceptions import (
    ConfigurationError,
    ValidationError,
    ValtypeError,
)

__all__ = [
    "OK",
    "Err",
    "ErrorCode",
    "Ok",
    "Result",
    "ConfigurationError",
    "ValidationError",
    "ValtypeError",
]
