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

"""Per-node dispatcher: common keywords, combinators and kind fan-out.

The dispatcher and the container checkers (arrays, objects) are mutually
recursive. Every schema node visited goes through ``AnyChecker.check``, which
is also where the nesting depth guard lives.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import urljoin

from ..config import ValidatorConfig
from ..context import ValidationContext
from ..exceptions import UnresolvableReferenceError
from ..resolvers.reference_resolver import ReferenceResolver
from ..utils.value_kinds import MISSING, ValueKind, is_number, is_numeric, kind_of
from .collection_checker import CollectionChecker
from .enum_checker import EnumChecker
from .format_checker import FormatChecker
from .number_checker import NumberChecker
from .object_checker import ObjectChecker
from .string_checker import StringChecker
from .type_checker import TypeChecker

logger = logging.getLogger(__name__)

EMPTY_SCHEMA: Dict[str, Any] = {}

# Keywords that route an object instance to the ObjectChecker.
OBJECT_KEYWORDS = ('properties', 'patternProperties', 'additionalProperties')


class AnyChecker:
    """Entry point for validating any value against one schema node."""

    def __init__(
        self,
        config: Optional[ValidatorConfig] = None,
        resolver: Optional[ReferenceResolver] = None,
        format_checker: Optional[FormatChecker] = None,
    ):
        self.config = config or ValidatorConfig()
        self.resolver = resolver
        self.format_checker = format_checker or FormatChecker()

        self.type_checker = TypeChecker(self.config, schema_matcher=self.matches_schema)
        self.enum_checker = EnumChecker(self.config)
        self.number_checker = NumberChecker(self.config, self.format_checker)
        self.string_checker = StringChecker(self.config, self.format_checker)
        self.collection_checker = CollectionChecker(self.config, self)
        self.object_checker = ObjectChecker(self.config, self)

    def check(self, value: Any, schema: Dict[str, Any], context: ValidationContext) -> None:
        with context.nested():
            # check special properties
            self.validate_common_properties(value, schema, context)

            # check allOf, anyOf, and oneOf properties
            self.validate_of_properties(value, schema, context)

            # check known types
            self.validate_types(value, schema, context)

    def matches_schema(self, value: Any, schema: Dict[str, Any], context: ValidationContext) -> bool:
        """Speculatively validate in a fork; True when no new errors appeared."""
        alt_context = context.fork()
        self.check(value, schema, alt_context)
        return not alt_context.new_errors()

    # ---- kind fan-out ---------------------------------------------------

    def validate_types(self, value: Any, schema: Dict[str, Any], context: ValidationContext) -> None:
        """Run every kind-specific checker the runtime value qualifies for.

        The branches are not exclusive: a numeric string goes through both the
        string and the number checks.
        """
        kind = kind_of(value)

        if kind is ValueKind.ARRAY:
            self.collection_checker.check(value, schema, context)

        if kind is ValueKind.OBJECT and any(keyword in schema for keyword in OBJECT_KEYWORDS):
            self.object_checker.check(value, schema, context)

        if kind is ValueKind.STRING:
            self.string_checker.check(value, schema, context)

        if is_numeric(value):
            self.number_checker.check(value, schema, context)

        if 'enum' in schema:
            self.enum_checker.check(value, schema, context)

    # ---- common keywords --------------------------------------------------

    def validate_common_properties(self, value: Any, schema: Dict[str, Any], context: ValidationContext) -> None:
        kind = kind_of(value)

        # if it extends another schema, it must pass that schema as well
        if 'extends' in schema:
            for extended in self._extended_schemas(schema, context):
                self.check(value, extended, context)

        required = schema.get('required')
        if isinstance(required, list):
            # Draft 4 - e.g. "required": ["foo", ...]
            if kind is ValueKind.OBJECT:
                for name in required:
                    if name not in value:
                        context.append_error(f"The property {name} is required")
        elif required is True and value is MISSING:
            # Draft 3 - e.g. "foo": {"type": "string", "required": true}
            context.append_error("Is missing and it is required")

        if value is not MISSING:
            self.type_checker.check(value, schema, context)

        # An absent value cannot match a disallowed type or a negated schema.
        if 'disallow' in schema and value is not MISSING:
            alt_context = context.fork()
            self.type_checker.check(value, {'type': schema['disallow']}, alt_context)

            # if no new errors were raised it must be a disallowed value
            if not alt_context.new_errors():
                context.append_error("Disallowed value was matched")

        if 'not' in schema and value is not MISSING:
            not_schema = schema['not'] if isinstance(schema['not'], dict) else EMPTY_SCHEMA
            if self.matches_schema(value, not_schema, context):
                context.append_error("Matched a schema which it should not")

        if kind is ValueKind.OBJECT:
            if is_number(schema.get('minProperties')) and len(value) < schema['minProperties']:
                context.append_error(f"Must contain a minimum of {schema['minProperties']} properties")
            if is_number(schema.get('maxProperties')) and len(value) > schema['maxProperties']:
                context.append_error(f"Must contain no more than {schema['maxProperties']} properties")

            if isinstance(schema.get('dependencies'), dict):
                self.validate_dependencies(value, schema['dependencies'], context)

    def validate_dependencies(
        self, value: Dict[str, Any], dependencies: Dict[str, Any], context: ValidationContext
    ) -> None:
        for key, dependency in dependencies.items():
            if key not in value:
                continue

            if isinstance(dependency, str):
                # Draft 3 string is allowed - e.g. "dependencies": {"bar": "foo"}
                if dependency not in value:
                    context.append_error(f"{key} depends on {dependency} and {dependency} is missing")
            elif isinstance(dependency, list):
                # Draft 4 must be an array - e.g. "dependencies": {"bar": ["foo"]}
                for name in dependency:
                    if name not in value:
                        context.append_error(f"{key} depends on {name} and {name} is missing")
            elif isinstance(dependency, dict):
                # Schema - e.g. "dependencies": {"bar": {"properties": {"foo": {...}}}}
                self.check(value, dependency, context)

    # ---- combinators ----------------------------------------------------

    def validate_of_properties(self, value: Any, schema: Dict[str, Any], context: ValidationContext) -> None:
        if value is MISSING:
            return

        if isinstance(schema.get('allOf'), list):
            self._check_all_of(value, schema['allOf'], context)

        if isinstance(schema.get('anyOf'), list):
            self._check_any_of(value, schema['anyOf'], context)

        if isinstance(schema.get('oneOf'), list):
            self._check_one_of(value, schema['oneOf'], context)

    def _check_all_of(self, value: Any, schemas: List[Any], context: ValidationContext) -> None:
        is_valid = True
        for sub_schema in schemas:
            before = context.error_count()
            self.check(value, sub_schema if isinstance(sub_schema, dict) else EMPTY_SCHEMA, context)
            is_valid = context.is_clean_since(before) and is_valid

        if not is_valid:
            context.append_error("Failed to match all schemas")

    def _check_any_of(self, value: Any, schemas: List[Any], context: ValidationContext) -> None:
        for index, sub_schema in enumerate(schemas):
            if self.matches_schema(value, sub_schema if isinstance(sub_schema, dict) else EMPTY_SCHEMA, context):
                logger.debug(f"anyOf matched branch {index} at '{context.path}'")
                return

        context.append_error("Failed to match at least one schema")

    def _check_one_of(self, value: Any, schemas: List[Any], context: ValidationContext) -> None:
        cumulating_context = context.fork()
        matched_schemas = 0

        for sub_schema in schemas:
            alt_context = context.fork()
            self.check(value, sub_schema if isinstance(sub_schema, dict) else EMPTY_SCHEMA, alt_context)

            if alt_context.has_same_error_count(context):
                matched_schemas += 1
            else:
                cumulating_context.merge(alt_context)

        if matched_schemas != 1:
            logger.debug(f"oneOf matched {matched_schemas} branches at '{context.path}'")
            context.merge(cumulating_context)
            context.append_error("failed to match exactly one schema")

    # ---- references -----------------------------------------------------

    def _extended_schemas(self, schema: Dict[str, Any], context: ValidationContext) -> List[Dict[str, Any]]:
        extends = schema['extends']
        entries = extends if isinstance(extends, list) else [extends]

        resolved: List[Dict[str, Any]] = []
        for entry in entries:
            if entry is None:
                # Draft 3 does not allow null here; treat it as the empty schema.
                resolved.append(EMPTY_SCHEMA)
            elif isinstance(entry, str):
                target = self._resolve_uri(schema, entry, context)
                if target is not None:
                    resolved.append(target)
            elif isinstance(entry, dict):
                resolved.append(entry)
        return resolved

    def _resolve_uri(self, schema: Dict[str, Any], uri: str, context: ValidationContext) -> Optional[Dict[str, Any]]:
        """Resolve an ``extends`` URI; failures become errors on the current node."""
        base = schema.get('id') if isinstance(schema.get('id'), str) else ''
        target = urljoin(base, uri) if base else uri

        try:
            if self.resolver is None:
                raise UnresolvableReferenceError(target, "no reference resolver configured")
            document = self.resolver.resolve(target)
            if not isinstance(document, dict):
                raise UnresolvableReferenceError(target, "reference does not point to a schema object")
        except UnresolvableReferenceError as exc:
            logger.debug(f"Reference resolution failed at '{context.path}': {exc}")
            context.append_error(str(exc))
            return None

        return document
