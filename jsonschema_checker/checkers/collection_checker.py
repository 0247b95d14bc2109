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

"""Checker for arrays: size limits, uniqueness and ``items``/``additionalItems``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Sequence

from ..config import ValidatorConfig
from ..context import ValidationContext
from ..utils.value_kinds import MISSING, canonical_key, is_number

if TYPE_CHECKING:
    from .any_checker import AnyChecker

EMPTY_SCHEMA: Dict[str, Any] = {}


def _as_schema(definition: Any) -> Dict[str, Any]:
    """``true`` (and anything that is not an object) behaves like ``{}``."""
    return definition if isinstance(definition, dict) else EMPTY_SCHEMA


class CollectionChecker:
    """Validates an array against a given schema."""

    def __init__(self, config: ValidatorConfig, dispatcher: "AnyChecker"):
        self.config = config
        self.dispatcher = dispatcher

    def check(self, value: Sequence[Any], schema: Dict[str, Any], context: ValidationContext) -> None:
        count = len(value)

        if is_number(schema.get('minItems')) and count < schema['minItems']:
            context.append_error(f"There must be a minimum of {schema['minItems']} items in the array")

        if is_number(schema.get('maxItems')) and count > schema['maxItems']:
            context.append_error(f"There must be a maximum of {schema['maxItems']} items in the array")

        if schema.get('uniqueItems') is True:
            distinct = {canonical_key(item) for item in value}
            if len(distinct) != count:
                context.append_error("There are no duplicates allowed in the array")

        if 'items' in schema:
            items = schema['items']
            if isinstance(items, list):
                self._check_tuple_items(value, items, schema, context)
            else:
                self._check_list_items(value, _as_schema(items), schema, context)

    def _check_list_items(
        self,
        value: Sequence[Any],
        items: Dict[str, Any],
        schema: Dict[str, Any],
        context: ValidationContext,
    ) -> None:
        """One schema for every element; ``additionalItems`` is only a fallback."""
        additional = schema.get('additionalItems', False)
        has_fallback = 'additionalItems' in schema and additional is not False

        for index, item in enumerate(value):
            with context.descend(index):
                first = context.fork()
                self.dispatcher.check(item, items, first)

                chosen = first
                if first.new_errors() and has_fallback:
                    second = context.fork()
                    self.dispatcher.check(item, _as_schema(additional), second)
                    if len(second.new_errors()) < len(first.new_errors()):
                        chosen = second

                context.merge(chosen)

    def _check_tuple_items(
        self,
        value: Sequence[Any],
        items: Sequence[Any],
        schema: Dict[str, Any],
        context: ValidationContext,
    ) -> None:
        """One schema per position."""
        for index, item in enumerate(value):
            with context.descend(index):
                if index < len(items):
                    self.dispatcher.check(item, _as_schema(items[index]), context)
                elif 'additionalItems' not in schema:
                    self.dispatcher.check(item, EMPTY_SCHEMA, context)
                elif schema['additionalItems'] is False:
                    context.append_error(
                        f"The item [{index}] is not defined and the definition does not allow additional items"
                    )
                else:
                    self.dispatcher.check(item, _as_schema(schema['additionalItems']), context)

        # Surface required-style failures in unused tuple slots, not for empty arrays.
        if len(value) > 0:
            for index in range(len(value), len(items)):
                with context.descend(index):
                    self.dispatcher.check(MISSING, _as_schema(items[index]), context)
