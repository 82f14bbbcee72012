"""valtype: runtime value validation

Declaratively compose validators and check dynamically-typed values against
them at untyped boundaries (deserialized data, configuration, payloads).

Usage:
    from valtype import structure, string, number, ValidationError

    user = structure({"name": string(), "age": number().integer()}, "User")
    try:
        user.assert_valid(payload)
    except ValidationError as e:
        print(e)            # [User] Failed assertion at #2: ... (key 'age': ...)
        print(e.path)       # ('age',)
"""
import logging

__version__ = "0.1.0"

# Library convention: silent unless the host configures logging
logging.getLogger("valtype").addHandler(logging.NullHandler())

from valtype.errors import (  # noqa: E402
    ConfigurationError,
    Err,
    ErrorCode,
    Ok,
    Result,
    ValidationError,
    ValtypeError,
)
from valtype.validation import (  # noqa: E402
    Condition,
    Failure,
    Kind,
    LengthMode,
    Validator,
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
    kind_of,
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
    "__version__",
    "ConfigurationError",
    "Err",
    "ErrorCode",
    "Ok",
    "Result",
    "ValidationError",
    "ValtypeError",
    "Condition",
    "Failure",
    "Kind",
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
    "kind_of",
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
