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

"""Checker for string keywords: ``minLength``, ``maxLength``, ``pattern``."""

import re
from functools import lru_cache
from typing import Any, Dict, Optional

from ..config import ValidatorConfig
from ..context import ValidationContext
from ..utils.value_kinds import is_number
from .format_checker import FormatChecker


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> Optional[re.Pattern]:
    """Compile a schema regular expression, returning None when it is invalid."""
    try:
        return re.compile(pattern)
    except re.error:
        return None


class StringChecker:
    """Validates a string against length and pattern constraints."""

    def __init__(self, config: ValidatorConfig, format_checker: FormatChecker):
        self.config = config
        self.format_checker = format_checker

    def check(self, value: str, schema: Dict[str, Any], context: ValidationContext) -> None:
        # Length is counted in code points, not bytes.
        length = len(value)

        if is_number(schema.get('minLength')) and length < schema['minLength']:
            context.append_error(f"Must be at least {schema['minLength']} characters long")

        if is_number(schema.get('maxLength')) and length > schema['maxLength']:
            context.append_error(f"Must be at most {schema['maxLength']} characters long")

        if 'pattern' in schema:
            pattern = schema['pattern']
            compiled = compile_pattern(pattern) if isinstance(pattern, str) else None
            if compiled is None:
                context.append_error(f'The pattern "{pattern}" is invalid')
            elif not compiled.search(value):
                context.append_error(f"Does not match the regex pattern {pattern}")

        self.format_checker.check(value, schema, context)
