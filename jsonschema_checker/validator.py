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

"""Public validation façade."""

import logging
from typing import Any, Dict, List, Optional, Sequence

from .checkers.any_checker import AnyChecker
from .checkers.format_checker import FormatChecker
from .config import ValidatorConfig
from .context import ValidationContext, ValidationError
from .exceptions import RecursionLimitError
from .resolvers.reference_resolver import ReferenceResolver

logger = logging.getLogger(__name__)


class Validator:
    """Validates decoded values against JSON Schema (draft 3/4) documents.

    Both the value and the schema are expected to be already decoded trees
    (the shapes ``json.load`` produces). A validator holds no per-run state,
    so one instance may be shared between threads.
    """

    def __init__(
        self,
        config: Optional[ValidatorConfig] = None,
        resolver: Optional[ReferenceResolver] = None,
        format_checker: Optional[FormatChecker] = None,
    ):
        self.config = config or ValidatorConfig()
        self.resolver = resolver
        self.format_checker = format_checker or FormatChecker()
        self._dispatcher = AnyChecker(self.config, resolver=self.resolver, format_checker=self.format_checker)

    def check(self, value: Any, schema: Dict[str, Any], context: ValidationContext) -> None:
        """Validate into a caller-supplied context."""
        self._dispatcher.check(value, schema, context)

    def validate(self, value: Any, schema: Dict[str, Any]) -> List[ValidationError]:
        """Validate a value and return every constraint failure.

        Raises:
            RecursionLimitError: If the schema nests deeper than ``max_depth``
        """
        if not isinstance(schema, dict):
            raise TypeError(f"Schema must be a mapping/object, got {type(schema).__name__}")

        context = ValidationContext(max_depth=self.config.max_depth)
        try:
            self.check(value, schema, context)
        except RecursionError as exc:
            # The interpreter stack ran out before the depth guard tripped.
            raise RecursionLimitError(self.config.max_depth, context.path) from exc

        errors = context.errors()
        logger.debug(f"Validation finished with {len(errors)} error(s)")
        return errors

    def is_valid(self, value: Any, schema: Dict[str, Any]) -> bool:
        return not self.validate(value, schema)


def validate(
    value: Any,
    schema: Dict[str, Any],
    config: Optional[ValidatorConfig] = None,
    resolver: Optional[ReferenceResolver] = None,
) -> List[ValidationError]:
    """Validate ``value`` against ``schema`` with a one-off validator."""
    return Validator(config=config, resolver=resolver).validate(value, schema)


def has_errors(result: Sequence[ValidationError]) -> bool:
    return len(result) != 0
