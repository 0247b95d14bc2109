# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Checker for numeric keywords: bounds, ``multipleOf`` and ``divisibleBy``."""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Any, Dict, Union

from ..config import ValidatorConfig
from ..context import ValidationContext
from ..utils.value_kinds import decimal_places, is_number, to_number
from .format_checker import FormatChecker

Number = Union[int, float]

REMAINDER_EPSILON = 1e-10


def float_remainder(number: Number, divisor: Number) -> float:
    """Remainder of ``number / divisor`` with binary floating-point noise removed.

    A remainder within ``REMAINDER_EPSILON`` of the divisor counts as zero;
    otherwise it is rounded to the larger decimal-place count of the operands.
    """
    modulus = math.fmod(number, divisor)
    if abs(abs(modulus) - abs(divisor)) < REMAINDER_EPSILON:
        return 0.0

    places = max(decimal_places(number), decimal_places(divisor))
    return float(round(modulus, places))


def _is_finite(value: Number) -> bool:
    return isinstance(value, int) or math.isfinite(value)


def _fits_float(value: Number) -> bool:
    try:
        float(value)
    except OverflowError:
        return False
    return True


def _exact(value: Number) -> Fraction:
    return Fraction(value) if isinstance(value, int) else Fraction(repr(value))


def is_multiple_of(number: Number, divisor: Number) -> bool:
    if not is_number(divisor) or divisor == 0:
        return False
    if isinstance(number, int) and isinstance(divisor, int):
        return number % divisor == 0
    if not (_is_finite(number) and _is_finite(divisor)):
        return False
    if not (_fits_float(number) and _fits_float(divisor)):
        # Integers beyond float range: compare exactly against the float's shortest repr.
        return _exact(number) % _exact(divisor) == 0
    return float_remainder(number, divisor) == 0


class NumberChecker:
    """Validates a number (or numeric-looking string) against a schema."""

    def __init__(self, config: ValidatorConfig, format_checker: FormatChecker):
        self.config = config
        self.format_checker = format_checker

    def _check_lower_bound(self, number: Number, schema: Dict[str, Any], context: ValidationContext) -> None:
        minimum = schema.get('minimum')
        if 'exclusiveMinimum' in schema:
            if not is_number(minimum):
                context.append_error("Use of exclusiveMinimum requires presence of minimum")
            elif schema['exclusiveMinimum'] is True and number == minimum:
                context.append_error(f"Must have a minimum value greater than boundary value of {minimum}")
            elif number < minimum:
                context.append_error(f"Must have a minimum value of {minimum}")
        elif is_number(minimum) and number < minimum:
            context.append_error(f"Must have a minimum value of {minimum}")

    def _check_upper_bound(self, number: Number, schema: Dict[str, Any], context: ValidationContext) -> None:
        maximum = schema.get('maximum')
        if 'exclusiveMaximum' in schema:
            if not is_number(maximum):
                context.append_error("Use of exclusiveMaximum requires presence of maximum")
            elif schema['exclusiveMaximum'] is True and number == maximum:
                context.append_error(f"Must have a maximum value less than boundary value of {maximum}")
            elif number > maximum:
                context.append_error(f"Must have a maximum value of {maximum}")
        elif is_number(maximum) and number > maximum:
            context.append_error(f"Must have a maximum value of {maximum}")

    def check(self, value: Any, schema: Dict[str, Any], context: ValidationContext) -> None:
        number = to_number(value)

        self._check_lower_bound(number, schema, context)
        self._check_upper_bound(number, schema, context)

        # Draft 3
        if 'divisibleBy' in schema and not is_multiple_of(number, schema['divisibleBy']):
            context.append_error(f"Is not divisible by {schema['divisibleBy']}")

        # Draft 4
        if 'multipleOf' in schema and not is_multiple_of(number, schema['multipleOf']):
            context.append_error(f"Must be a multiple of {schema['multipleOf']}")

        self.format_checker.check(value, schema, context)
