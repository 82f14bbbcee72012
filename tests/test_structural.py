"""Tests for structural validators: object shape, keys, values, array."""

from __future__ import annotations

from collections import OrderedDict

import pytest

from valtype import (
    ConfigurationError,
    ErrorCode,
    ValidationError,
    array,
    keys,
    number,
    optional,
    record,
    string,
    structure,
    validator,
    values,
)

# -- object shape --------------------------------------------------------------------


def test_valid_user_passes(user):
    user.assert_valid({"name": "test", "age": 20, "social": {"twitter": "martonlederer"}})


def test_fractional_age_cites_field_and_condition(user):
    with pytest.raises(ValidationError) as exc:
        user.assert_valid({"name": "test", "age": 20.5, "social": {"twitter": "x"}})

    err = exc.value
    assert err.path == ("age",)
    assert err.validator_name == "User"
    assert err.label == "object:User"
    assert err.failure.innermost.label == "integer"
    assert "key 'age'" in str(err)
    assert "20.5 is not integer" in str(err)


def test_nested_failure_path(user):
    failure = user.validate({"name": "test", "age": 20, "social": {"twitter": 5}}).unwrap_err()
    assert failure.path == ("social", "twitter")
    assert failure.innermost.label == "string"


def test_missing_field(user):
    failure = user.validate({"name": "test", "social": {"twitter": "x"}}).unwrap_err()
    assert failure.key == "age"
    assert failure.reason == "missing"
    assert failure.code is ErrorCode.E2001_REQUIRED_FIELD_MISSING
    assert failure.message.endswith("(key 'age': missing)")


def test_none_field_counts_as_missing():
    shape = structure({"a": optional(string())})
    assert not shape.is_valid({"a": None})
    assert shape.is_valid({"a": "x"})


def test_non_record_rejected(user):
    failure = user.validate("not a record").unwrap_err()
    assert failure.code is ErrorCode.E2004_INVALID_TYPE
    assert failure.reason == "expected record, got string"


def test_extra_keys_ignored_when_not_strict():
    shape = structure({"a": number()})
    assert shape.is_valid({"a": 1, "b": "extra"})


def test_strict_rejects_undeclared_key():
    shape = structure({"a": number()}, strict=True)
    assert shape.is_valid({"a": 1})

    failure = shape.validate({"a": 1, "b": 2}).unwrap_err()
    assert failure.key == "b"
    assert failure.code is ErrorCode.E2006_UNEXPECTED_FIELD


def test_fields_checked_in_declared_order():
    shape = structure(OrderedDict([("first", number()), ("second", number())]))
    failure = shape.validate({"second": "x", "first": "y"}).unwrap_err()
    assert failure.key == "first"


def test_object_after_other_conditions():
    shape = validator().record().object({"id": number()}, "Row")
    failure = shape.validate({"id": "x"}).unwrap_err()
    assert failure.index == 2
    assert failure.label == "object:Row"
    assert failure.validator_name == "record & object:Row"


def test_empty_schema_accepts_any_record():
    assert structure({}).is_valid({"anything": 1})
    assert not structure({}).is_valid(1)
    assert not structure({}, strict=True).is_valid({"anything": 1})


def test_sequence_with_index_schema():
    assert structure({0: string(), 1: number()}).is_valid(["a", 1])


@pytest.mark.parametrize("schema", [["a"], "schema", None, 42])
def test_non_mapping_schema_is_configuration_error(schema):
    with pytest.raises(ConfigurationError) as exc:
        structure(schema)
    assert exc.value.code is ErrorCode.E7001_INVALID_SCHEMA


def test_non_validator_field_is_configuration_error():
    with pytest.raises(ConfigurationError) as exc:
        structure({"name": str})
    assert exc.value.argument == "schema['name']"


def test_bad_name_is_configuration_error():
    with pytest.raises(ConfigurationError):
        validator().object({}, name=5)


# -- keys / values -------------------------------------------------------------------


def test_keys_and_values_on_sequence():
    keys(number()).values(string()).assert_valid(["test", "haha", "test"])


def test_values_first_failure_reported():
    failure = values(string()).validate(["a", 2, 3]).unwrap_err()
    assert failure.key == 1
    assert failure.cause.value == 2


def test_keys_on_mapping():
    assert keys(string()).is_valid({"a": 1, "b": 2})
    failure = keys(string()).validate({"a": 1, 2: 2}).unwrap_err()
    assert failure.key == 2


def test_keys_label_uses_inner_name():
    assert keys(number()).conditions[0].label == "keys(number)"
    assert values(string().set_name("Text")).conditions[0].label == "values(Text)"


def test_keyed_collection_requires_record():
    assert not values(string()).is_valid("abc")
    assert values(string()).is_valid({})


def test_keys_requires_validator():
    with pytest.raises(ConfigurationError):
        keys(int)


# -- array ----------------------------------------------------------------------------


def test_array_accepts_sequences():
    assert array().is_valid([1, 2, 3])
    assert array().is_valid(())


def test_array_checks_keys_only():
    assert array().is_valid({0: "a", 5: "b"})
    assert not array().is_valid({"a": 1})


def test_array_of_strings():
    strings = array().values(string())
    assert strings.is_valid(["a", "b"])
    assert not strings.is_valid(["a", 1])


def test_record_then_array():
    assert record().array().is_valid([])
