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

"""Custom exceptions for the jsonschema_checker engine.

Constraint failures are never raised; they are recorded on the validation
context. The exceptions below cover the engine's own inputs and limits.
"""

from typing import Optional


class SchemaCheckerError(Exception):
    """Base exception for jsonschema_checker related errors."""
    pass


class ConfigurationError(SchemaCheckerError):
    """Exception raised for invalid validator configuration values."""
    pass


class UnresolvableReferenceError(SchemaCheckerError):
    """Exception raised when a schema reference cannot be resolved."""

    def __init__(self, uri: str, reason: str = ""):
        self.uri = uri
        self.reason = reason
        message = f"Unable to resolve reference {uri}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class RecursionLimitError(SchemaCheckerError):
    """Exception raised when schema nesting exceeds the configured depth.

    This is the only fatal condition of a validation run. It usually means the
    schema handed to the validator still contains a cycle after reference
    expansion.
    """

    def __init__(self, max_depth: int, path: Optional[str] = None):
        self.max_depth = max_depth
        self.path = path or ""
        location = f" at '{self.path}'" if self.path else ""
        super().__init__(
            f"Maximum schema nesting depth of {max_depth} exceeded{location}; "
            "the schema is probably self-referential"
        )
