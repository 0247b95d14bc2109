import copy

import jsonschema
import pytest
from hypothesis import given, strategies as st

from jsonschema_checker import ValidationError, Validator, has_errors, validate

json_values = st.recursive(
    st.none() | st.booleans() | st.integers() | st.floats(allow_nan=False, allow_infinity=False) | st.text(),
    lambda children: st.lists(children, max_size=4) | st.dictionaries(st.text(), children, max_size=4),
    max_leaves=20,
)


@given(json_values)
def test_empty_schema_accepts_everything(value):
    assert validate(value, {}) == []
    assert validate(value, {"type": "any"}) == []


def test_module_level_validate_and_has_errors():
    result = validate(1, {"type": "string"})
    assert result == [ValidationError("", "integer value found, but a string is required")]
    assert has_errors(result)
    assert not has_errors(validate("x", {"type": "string"}))


def test_schema_must_be_an_object(validator):
    with pytest.raises(TypeError):
        validator.validate(1, [{"type": "string"}])


def test_is_valid(validator):
    assert validator.is_valid({"a": 1}, {"properties": {"a": {"type": "integer"}}})
    assert not validator.is_valid({"a": "x"}, {"properties": {"a": {"type": "integer"}}})


def test_inputs_are_not_mutated(validator):
    value = {"a": [1, 2, 2], "b": {"c": "x"}}
    schema = {
        "properties": {
            "a": {"items": [{"type": "integer"}], "uniqueItems": True},
            "b": {"additionalProperties": False, "required": ["d"]},
            "d": {"required": True},
        },
        "oneOf": [{"type": "object"}, {"minProperties": 1}],
    }
    value_copy, schema_copy = copy.deepcopy(value), copy.deepcopy(schema)

    assert validator.validate(value, schema)
    assert value == value_copy
    assert schema == schema_copy


def test_validator_is_reusable(validator):
    schema = {"type": "integer", "minimum": 3}
    assert validator.validate(1, schema) == [ValidationError("", "Must have a minimum value of 3")]
    assert validator.validate(1, schema) == [ValidationError("", "Must have a minimum value of 3")]
    assert validator.validate(5, schema) == []


AGREEMENT_CASES = [
    (5, {"type": "integer"}),
    (5.5, {"type": "integer"}),
    ("x", {"type": ["string", "null"]}),
    (3, {"minimum": 3, "exclusiveMinimum": True}),
    (4, {"maximum": 4}),
    (7, {"multipleOf": 2}),
    ("abcd", {"maxLength": 3}),
    ("abc", {"pattern": "^b"}),
    ({}, {"required": ["a"]}),
    ({"a": None}, {"required": ["a"]}),
    ("c", {"enum": ["a", "b"]}),
    ([1, "x"], {"items": {"type": "integer"}}),
    ([1, 2, 2], {"uniqueItems": True}),
    ([1, 2], {"items": [{"type": "integer"}], "additionalItems": False}),
    (True, {"anyOf": [{"type": "string"}, {"type": "number"}]}),
    (6, {"oneOf": [{"multipleOf": 2}, {"multipleOf": 3}]}),
    (4, {"oneOf": [{"multipleOf": 2}, {"multipleOf": 3}]}),
    ("x", {"not": {"type": "string"}}),
    ({"a": 1, "b": 2}, {"properties": {"a": {}}, "additionalProperties": False}),
    ({"a": 1}, {"minProperties": 2}),
    ({"bar": 1}, {"dependencies": {"bar": ["foo"]}}),
    ({"x-a": "s"}, {"patternProperties": {"^x-": {"type": "integer"}}}),
]


@pytest.mark.parametrize("value, schema", AGREEMENT_CASES)
def test_agrees_with_reference_draft4_validator(validator, value, schema):
    expected = jsonschema.Draft4Validator(schema).is_valid(value)
    assert validator.is_valid(value, schema) == expected


@pytest.mark.parametrize("value, schema", [
    ([1], {"minItems": "2"}),
    ([1, 2], {"maxItems": "1"}),
    ("a", {"minLength": "2"}),
    ("abc", {"maxLength": None}),
    ({"a": 1}, {"minProperties": "2"}),
    ({"a": 1, "b": 2}, {"maxProperties": [1]}),
])
def test_malformed_count_keywords_are_ignored(validator, value, schema):
    assert validator.validate(value, schema) == []
