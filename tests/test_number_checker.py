import pytest

from jsonschema_checker.checkers.number_checker import float_remainder, is_multiple_of


@pytest.mark.parametrize("value, schema, expected", [
    (5, {"minimum": 10}, ["Must have a minimum value of 10"]),
    (10, {"minimum": 10}, []),
    (10, {"minimum": 10, "exclusiveMinimum": True},
     ["Must have a minimum value greater than boundary value of 10"]),
    (10, {"minimum": 10, "exclusiveMinimum": False}, []),
    (9, {"minimum": 10, "exclusiveMinimum": True}, ["Must have a minimum value of 10"]),
    (5, {"exclusiveMinimum": True}, ["Use of exclusiveMinimum requires presence of minimum"]),
    (15, {"maximum": 10}, ["Must have a maximum value of 10"]),
    (10, {"maximum": 10, "exclusiveMaximum": True},
     ["Must have a maximum value less than boundary value of 10"]),
    (10.0, {"maximum": 10, "exclusiveMaximum": True},
     ["Must have a maximum value less than boundary value of 10"]),
    (5, {"exclusiveMaximum": True}, ["Use of exclusiveMaximum requires presence of maximum"]),
    (5, {"minimum": 1, "maximum": 10}, []),
])
def test_bounds(messages, value, schema, expected):
    assert messages(value, schema) == expected


@pytest.mark.parametrize("value, divisor", [
    (6, 2),
    (0.3, 0.1),
    (-0.3, 0.1),
    (0.7, 0.1),
    (4.5, 1.5),
    (0.75, 0.25),
    (10, 0.5),
    (0, 7),
])
def test_multiple_of_accepts(messages, value, divisor):
    assert messages(value, {"multipleOf": divisor}) == []


@pytest.mark.parametrize("value, divisor", [
    (7, 2),
    (1.1, 0.2),
    (0.35, 0.1),
    (5, 0),
])
def test_multiple_of_rejects(messages, value, divisor):
    assert messages(value, {"multipleOf": divisor}) == [f"Must be a multiple of {divisor}"]


def test_divisible_by_is_draft3_multiple_of(messages):
    assert messages(9, {"divisibleBy": 3}) == []
    assert messages(10, {"divisibleBy": 3}) == ["Is not divisible by 3"]


def test_float_remainder_removes_noise():
    assert float_remainder(0.3, 0.1) == 0.0
    assert float_remainder(1.1, 0.2) == pytest.approx(0.1)
    assert is_multiple_of(3, 1)
    assert not is_multiple_of(3, True)


def test_numeric_string_is_checked_as_number(messages):
    assert messages("5", {"minimum": 10}) == ["Must have a minimum value of 10"]
    assert messages(" 12.5 ", {"maximum": 10}) == ["Must have a maximum value of 10"]


def test_booleans_are_not_numbers(messages):
    assert messages(True, {"minimum": 10, "multipleOf": 3}) == []


@pytest.mark.parametrize("keyword, template", [
    ("multipleOf", "Must be a multiple of {}"),
    ("divisibleBy", "Is not divisible by {}"),
])
def test_multiple_of_with_integers_beyond_float_range(messages, keyword, template):
    assert messages(10 ** 400, {keyword: 0.5}) == []
    assert messages(10 ** 400, {keyword: 0.3}) == [template.format(0.3)]
    assert messages(10 ** 400 + 1, {keyword: 2.0}) == [template.format(2.0)]
    assert messages(0.5, {keyword: 10 ** 400}) == [template.format(10 ** 400)]


def test_bounds_with_integers_beyond_float_range(messages):
    assert messages(10 ** 400, {"minimum": 0.5, "maximum": 10 ** 401}) == []
    assert messages(-(10 ** 400), {"minimum": 0.5}) == ["Must have a minimum value of 0.5"]
