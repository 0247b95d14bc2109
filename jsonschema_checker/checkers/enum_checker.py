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

"""Checker for the ``enum`` keyword."""

import json
from typing import Any, Dict

from ..config import ValidatorConfig
from ..context import ValidationContext
from ..utils.value_kinds import MISSING, ValueKind, coerce_scalar_string, kind_of, values_equal


class EnumChecker:
    """Validates an element against a given set of possibilities."""

    def __init__(self, config: ValidatorConfig):
        self.config = config

    def _candidate_matches(self, value: Any, candidate: Any) -> bool:
        if values_equal(value, candidate):
            return True
        if not self.config.type_cast or kind_of(value) is not ValueKind.STRING:
            return False
        if kind_of(candidate) not in (ValueKind.NUMBER, ValueKind.BOOLEAN):
            return False
        return values_equal(coerce_scalar_string(value), candidate)

    def check(self, value: Any, schema: Dict[str, Any], context: ValidationContext) -> None:
        # Only validate enum if the attribute exists
        if value is MISSING and schema.get('required') is not True:
            return

        candidates = schema['enum']
        if not isinstance(candidates, list):
            candidates = [candidates]

        for candidate in candidates:
            if self._candidate_matches(value, candidate):
                return

        context.append_error(
            f"Does not have a value in the enumeration {json.dumps(candidates, default=repr)}"
        )
