from __future__ import annotations

import json
import math
import re
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional, Union


class _Missing:
    """Marker for a property or tuple slot absent from the instance."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<missing>"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Missing":
        return self

    def __deepcopy__(self, memo) -> "_Missing":
        return self


MISSING = _Missing()


class ValueKind(Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    MISSING = "missing"


# Decimal or exponent notation, surrounding whitespace allowed.
_NUMERIC_STRING_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$", re.ASCII)

BOOLEAN_STRINGS = {"true": True, "false": False}


def kind_of(value: Any) -> ValueKind:
    """Classify a decoded value; unknown Python types raise TypeError."""
    if value is MISSING:
        return ValueKind.MISSING
    if value is None:
        return ValueKind.NULL
    # bool is a subclass of int, test it first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    raise TypeError(f"Unsupported value type: {type(value).__name__}")


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integral(value: Any) -> bool:
    if not is_number(value):
        return False
    if isinstance(value, float):
        return math.isfinite(value) and value.is_integer()
    return True


def is_numeric(value: Any) -> bool:
    """True for numbers and for strings that look like numbers."""
    if is_number(value):
        return True
    return isinstance(value, str) and _NUMERIC_STRING_RE.match(value) is not None


def to_number(value: Any) -> Union[int, float]:
    """Convert a numeric value (or numeric-looking string) to int or float.

    Raises ValueError if the value is not numeric.
    """
    if is_number(value):
        return value
    if not is_numeric(value):
        raise ValueError(f"Invalid numeric value {value!r}")
    text = value.strip()
    try:
        return int(text)
    except ValueError:
        return float(text)


def decimal_places(value: Union[int, float]) -> int:
    """Number of digits after the decimal point in the shortest repr."""
    if isinstance(value, int):
        return 0
    try:
        exponent = Decimal(repr(value)).as_tuple().exponent
    except InvalidOperation:
        return 0
    if not isinstance(exponent, int):
        # nan / inf
        return 0
    return -exponent if exponent < 0 else 0


def coerce_scalar_string(value: str) -> Any:
    """Best-effort coercion of a scalar string for type-cast comparisons."""
    lowered = value.strip().lower()
    if lowered in BOOLEAN_STRINGS:
        return BOOLEAN_STRINGS[lowered]
    if is_numeric(value):
        return to_number(value)
    return value


def _normalize(value: Any) -> Any:
    kind = kind_of(value)
    if kind is ValueKind.NUMBER and isinstance(value, float) and value.is_integer():
        return int(value)
    if kind is ValueKind.ARRAY:
        return [_normalize(item) for item in value]
    if kind is ValueKind.OBJECT:
        return {str(key): _normalize(item) for key, item in value.items()}
    if kind is ValueKind.MISSING:
        return {"$missing": True}
    return value


def canonical_key(value: Any) -> str:
    """Deterministic structural key used for duplicate detection.

    Object keys are sorted, so key order does not participate; integral
    floats collapse onto ints so ``1`` and ``1.0`` share a key.
    """
    return json.dumps(_normalize(value), sort_keys=True, separators=(",", ":"))


def values_equal(left: Any, right: Any) -> bool:
    """Kind-aware deep equality (``True`` never equals ``1``)."""
    left_kind = kind_of(left)
    if left_kind is not kind_of(right):
        return False
    if left_kind is ValueKind.ARRAY:
        return len(left) == len(right) and all(
            values_equal(a, b) for a, b in zip(left, right)
        )
    if left_kind is ValueKind.OBJECT:
        if set(left.keys()) != set(right.keys()):
            return False
        return all(values_equal(left[key], right[key]) for key in left)
    return left == right
