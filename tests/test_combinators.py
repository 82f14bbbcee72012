"""Tests for optional, either and is_not."""

from __future__ import annotations

import pytest

from valtype import (
    ConfigurationError,
    ErrorCode,
    ValidationError,
    boolean,
    either,
    is_not,
    number,
    optional,
    record,
    string,
    structure,
)

# -- optional -------------------------------------------------------------------------


def test_optional_accepts_none():
    assert optional(number()).is_valid(None)


@pytest.mark.parametrize("value", [1, "x", 2.5, [], {}])
def test_optional_matches_inner_for_present_values(value):
    inner = number().integer()
    assert optional(inner).is_valid(value) == inner.is_valid(value)


def test_optional_does_not_swallow_invalid_value():
    failure = optional(number()).validate("x").unwrap_err()
    assert failure.label == "optional(number)"
    assert failure.cause is not None
    assert failure.cause.label == "number"
    assert failure.path == ()


def test_optional_requires_validator():
    with pytest.raises(ConfigurationError):
        optional(None)


# -- either ---------------------------------------------------------------------------


def test_either_no_alternative_matches():
    with pytest.raises(ValidationError) as exc:
        either(number(), string(), record()).assert_valid(True)
    assert exc.value.failure.reason == "no alternative matched"
    assert exc.value.failure.code is ErrorCode.E2007_NO_ALTERNATIVE
    assert exc.value.failure.cause is None


@pytest.mark.parametrize("value", [1, "a", {}, []])
def test_either_any_alternative_matches(value):
    assert either(number(), string(), record()).is_valid(value)


def test_either_short_circuits_in_order():
    seen = []

    def spy(label, outcome):
        return number().with_condition(label, lambda v: seen.append(label) or outcome)

    assert either(spy("a", False), spy("b", True), spy("c", True)).is_valid(1)
    assert seen == ["a", "b"]


def test_either_nested_failure_does_not_raise():
    shape = structure({"id": either(number(), string())})
    assert shape.is_valid({"id": "x"})
    assert not shape.is_valid({"id": None})
    assert not shape.is_valid({"id": [1]})


def test_either_label():
    assert either(number(), string()).conditions[0].label == "either(number | string)"


def test_either_requires_alternatives():
    with pytest.raises(ConfigurationError):
        either()
    with pytest.raises(ConfigurationError) as exc:
        either(number(), "string")
    assert exc.value.argument == "alternatives[1]"


# -- is_not ---------------------------------------------------------------------------


def test_is_not_length_two_string():
    is_not(string().length(2)).assert_valid(2)


@pytest.mark.parametrize("value", [2, "a", "ab", "abc", None, True])
def test_is_not_inverts(value):
    inner = string().length(2)
    assert is_not(inner).is_valid(value) == (not inner.is_valid(value))


def test_is_not_either():
    not_scalar = is_not(either(number(), string(), boolean()))
    assert not_scalar.is_valid(None)
    assert not_scalar.is_valid({})
    assert not not_scalar.is_valid(True)


def test_is_not_label():
    failure = is_not(string()).validate("x").unwrap_err()
    assert failure.label == "not(string)"
    assert failure.message == "[not(string)] Failed assertion at #1: 'x' is not not(string)"
