"""Structural Conditions

Conditions that recurse into other validators: record shape, uniform keys,
uniform values, and array. Nested validators report through ``validate``
(a Result), so one failing field never raises past this boundary; it becomes
a keyed Rejection carrying the nested Failure.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable

from valtype.errors import OK, Err, ErrorCode, Result

from .conditions import Condition, Rejection
from .kinds import is_record, kind_of, record_get, record_items
from .refinements import configuration_error

if TYPE_CHECKING:
    from .validator import Validator


def require_validator(candidate: Any, argument: str) -> Validator:
    """Raise ConfigurationError unless ``candidate`` is a built Validator."""
    from .validator import Validator

    if not isinstance(candidate, Validator):
        raise configuration_error(f"{argument} must be a Validator, got {type(candidate).__name__}",
                                  argument, code=ErrorCode.E7001_INVALID_SCHEMA)
    return candidate


def _not_a_record(value: Any) -> Err[Rejection]:
    return Err(Rejection(reason=f"expected record, got {kind_of(value).value}", code=ErrorCode.E2004_INVALID_TYPE))


# ============================================================================
# Shape
# ============================================================================

def object_condition(schema: Mapping[Any, Validator], name: str | None = None, strict: bool = False) -> Condition:
    """Record whose declared fields are present, non-None and valid.

    Fields are checked in declared order and the first offender is reported.
    With ``strict``, keys outside the schema are rejected afterwards, in the
    candidate's own order.
    """
    if not isinstance(schema, Mapping):
        raise configuration_error(f"Schema must be a mapping of field name to Validator, got {type(schema).__name__}",
                                  "schema", code=ErrorCode.E7001_INVALID_SCHEMA)
    if name is not None and not isinstance(name, str):
        raise configuration_error(f"Name must be a string, got {type(name).__name__}", "name")

    fields = tuple((key, require_validator(sub, f"schema[{key!r}]")) for key, sub in schema.items())
    declared = frozenset(key for key, _ in fields)

    def check(value: Any) -> Result[None, Rejection]:
        if not is_record(value):
            return _not_a_record(value)
        for key, sub in fields:
            entry = record_get(value, key)
            if entry is None:
                return Err(Rejection.at(key, reason="missing", code=ErrorCode.E2001_REQUIRED_FIELD_MISSING))
            match sub.validate(entry):
                case Err(failure):
                    return Err(Rejection.at(key, cause=failure))
        if strict:
            for key, _ in record_items(value):
                if key not in declared:
                    return Err(Rejection.at(key, reason="not declared in schema",
                                            code=ErrorCode.E2006_UNEXPECTED_FIELD))
        return OK

    return Condition(f"object:{name}" if name else "object", check)


# ============================================================================
# Keyed Collections
# ============================================================================

def _each_entry(label: str, inner: Validator, select: Callable[[Any, Any], Any]) -> Condition:
    def check(value: Any) -> Result[None, Rejection]:
        if not is_record(value):
            return _not_a_record(value)
        for key, entry in record_items(value):
            result = inner.validate(select(key, entry))
            if result.is_err():
                return Err(Rejection.at(key, cause=result.unwrap_err()))
        return OK

    return Condition(label, check)


def keys_condition(inner: Validator) -> Condition:
    inner = require_validator(inner, "keys")
    return _each_entry(f"keys({inner.display_name})", inner, lambda key, entry: key)


def values_condition(inner: Validator) -> Condition:
    inner = require_validator(inner, "values")
    return _each_entry(f"values({inner.display_name})", inner, lambda key, entry: entry)


def array_condition() -> Condition:
    """Record with numeric keys only. Contiguity of indices is not checked."""
    from .validator import Validator

    return _each_entry("array", Validator().number(), lambda key, entry: key)
