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

"""Checker for the ``type`` keyword (draft 3 and draft 4)."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from ..config import ValidatorConfig
from ..context import ValidationContext
from ..utils.value_kinds import (
    BOOLEAN_STRINGS,
    ValueKind,
    is_integral,
    is_numeric,
    kind_of,
    to_number,
)

# Validates a value against an embedded schema in a fork, returning True when
# the fork stayed clean. Supplied by the dispatcher for draft-3 union types.
SchemaMatcher = Callable[[Any, Dict[str, Any], ValidationContext], bool]

_ARTICLES = {"integer": "an", "array": "an", "object": "an", "any": "any"}


def _describe_kind(value: Any) -> str:
    kind = kind_of(value)
    if kind is ValueKind.NUMBER and is_integral(value):
        return "integer"
    return kind.value


def _with_article(type_name: str) -> str:
    article = _ARTICLES.get(type_name, "a")
    if article == "any":
        return "any value"
    return f"{article} {type_name}"


class TypeChecker:
    """Resolves ``type`` against the runtime kind of a value."""

    def __init__(self, config: ValidatorConfig, schema_matcher: Optional[SchemaMatcher] = None):
        self.config = config
        self.schema_matcher = schema_matcher

    def matches_type_name(self, value: Any, type_name: str) -> bool:
        if type_name == "any":
            return True

        kind = kind_of(value)
        if type_name == "integer":
            if is_integral(value):
                return True
            return self.config.type_cast and kind is ValueKind.STRING and is_numeric(value) \
                and is_integral(to_number(value))
        if type_name == "number":
            if kind is ValueKind.NUMBER:
                return True
            return self.config.type_cast and kind is ValueKind.STRING and is_numeric(value)
        if type_name == "boolean":
            if kind is ValueKind.BOOLEAN:
                return True
            return self.config.type_cast and kind is ValueKind.STRING \
                and value.strip().lower() in BOOLEAN_STRINGS

        return kind.value == type_name

    def matches(self, value: Any, type_spec: Any, context: ValidationContext) -> bool:
        alternatives: List[Any] = type_spec if isinstance(type_spec, list) else [type_spec]
        for alternative in alternatives:
            if isinstance(alternative, str):
                if self.matches_type_name(value, alternative):
                    return True
            elif isinstance(alternative, dict) and self.schema_matcher is not None:
                if self.schema_matcher(value, alternative, context):
                    return True
        return False

    def check(self, value: Any, schema: Dict[str, Any], context: ValidationContext) -> None:
        if 'type' not in schema:
            return

        type_spec = schema['type']
        if self.matches(value, type_spec, context):
            return

        names = [t for t in (type_spec if isinstance(type_spec, list) else [type_spec]) if isinstance(t, str)]
        if isinstance(type_spec, list):
            expected = " or ".join(_with_article(name) for name in names) or "a matching schema"
        else:
            expected = _with_article(type_spec) if isinstance(type_spec, str) else "a matching schema"
        context.append_error(f"{_describe_kind(value)} value found, but {expected} is required")
