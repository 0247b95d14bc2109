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

"""Checker for objects: ``properties``, ``patternProperties``,
``additionalProperties`` and the draft-3 per-property ``requires``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Set

from ..config import ValidatorConfig
from ..context import ValidationContext
from ..utils.value_kinds import MISSING
from .string_checker import compile_pattern

if TYPE_CHECKING:
    from .any_checker import AnyChecker

logger = logging.getLogger(__name__)

# Instance property naming the instance's own schema; never "additional".
INLINE_SCHEMA_PROPERTY = '$schema'

EMPTY_SCHEMA: Dict[str, Any] = {}


class ObjectChecker:
    """Validates an object against a given schema."""

    def __init__(self, config: ValidatorConfig, dispatcher: "AnyChecker"):
        self.config = config
        self.dispatcher = dispatcher

    def check(self, value: Dict[str, Any], schema: Dict[str, Any], context: ValidationContext) -> None:
        if value is MISSING:
            return

        properties = schema.get('properties')
        if not isinstance(properties, dict):
            properties = {}

        self.validate_definition(value, properties, context)

        matches: Set[str] = set()
        pattern_properties = schema.get('patternProperties')
        if isinstance(pattern_properties, dict):
            matches = self.validate_pattern_properties(value, pattern_properties, context)

        self.validate_element(value, matches, properties, context, schema.get('additionalProperties'))

    def validate_definition(
        self, element: Dict[str, Any], definitions: Dict[str, Any], context: ValidationContext
    ) -> None:
        """Validate every declared property, absent ones as ``MISSING``."""
        for name, definition in definitions.items():
            with context.descend(name):
                self.dispatcher.check(
                    element.get(name, MISSING),
                    definition if isinstance(definition, dict) else EMPTY_SCHEMA,
                    context,
                )

    def validate_pattern_properties(
        self, element: Dict[str, Any], pattern_properties: Dict[str, Any], context: ValidationContext
    ) -> Set[str]:
        """Validate properties whose names match a pattern; return the matched names."""
        matches: Set[str] = set()
        for pattern, definition in pattern_properties.items():
            compiled = compile_pattern(pattern)
            if compiled is None:
                # Validate the pattern before using it to test for matches
                context.append_error(f'The pattern "{pattern}" is invalid')
                logger.debug(f"Skipping invalid patternProperties pattern {pattern!r}")
                continue

            for name, item in element.items():
                if compiled.search(name):
                    matches.add(name)
                    with context.descend(name):
                        self.dispatcher.check(
                            item, definition if isinstance(definition, dict) else EMPTY_SCHEMA, context
                        )
        return matches

    def validate_element(
        self,
        element: Dict[str, Any],
        matches: Set[str],
        definitions: Dict[str, Any],
        context: ValidationContext,
        additional: Any = None,
    ) -> None:
        """Enforce ``additionalProperties`` and per-property ``requires``."""
        for name, item in element.items():
            definition = definitions.get(name)
            covered = name in definitions or name in matches

            if not covered and additional is False and name != INLINE_SCHEMA_PROPERTY:
                context.append_error(
                    f"The property - {name} - is not defined and the definition does not allow additional properties"
                )

            if not covered and isinstance(additional, dict):
                with context.descend(name):
                    self.dispatcher.check(item, additional, context)

            # property requires presence of another
            require = definition.get('requires') if isinstance(definition, dict) else None
            if isinstance(require, str) and require not in element:
                context.append_error(
                    f"The presence of the property {name} requires that {require} also be present"
                )
