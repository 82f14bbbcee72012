"""Validator Composition Engine

Validators are immutable chains of named conditions, built by chaining
builder calls and checked with ``validate`` (a Result) or ``assert_valid``
(raises ValidationError).

Key Features:
- Ordered, fail-fast condition chains
- Kind checks over a closed set of value kinds
- Numeric, string and equality refinements
- Structural checks (object shape, keys, values, array) with strict mode
- Combinators (optional, either, is_not) and &, |, ~ operators
- Structured failures with key paths, rendered on demand

Usage:
    from valtype.validation import structure, string, number, either

    user = structure({"name": string(), "age": number().integer()}, "User")
    user.assert_valid({"name": "test", "age": 20})

    match either(number(), string()).validate(True):
        case Err(failure):
            print(failure.message)
"""

from .kinds import Kind, kind_of
from .conditions import Condition, Failure, Rejection
from .formatting import render_failure, render_value
from .refinements import LengthMode
from .validator import Validator
from .factory import (
    array,
    boolean,
    concurrent,
    custom,
    either,
    equals,
    function,
    integer,
    is_not,
    keys,
    kind,
    length,
    matches,
    none,
    number,
    opaque,
    optional,
    record,
    string,
    structure,
    validator,
    values,
)

__all__ = [
    "Kind",
    "kind_of",
    "Condition",
    "Failure",
    "Rejection",
    "render_failure",
    "render_value",
    "LengthMode",
    "Validator",
    "array",
    "boolean",
    "concurrent",
    "custom",
    "either",
    "equals",
    "function",
    "integer",
    "is_not",
    "keys",
    "kind",
    "length",
    "matches",
    "none",
    "number",
    "opaque",
    "optional",
    "record",
    "string",
    "structure",
    "validator",
    "values",
]
