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

"""JSON Schema draft 3/4 constraint engine."""

__version__ = "0.1.0"

from .config import CheckMode, ValidatorConfig
from .context import ValidationContext, ValidationError
from .exceptions import (
    ConfigurationError,
    RecursionLimitError,
    SchemaCheckerError,
    UnresolvableReferenceError,
)
from .resolvers import FileReferenceResolver, MappingReferenceResolver, ReferenceResolver
from .utils.value_kinds import MISSING
from .validator import Validator, has_errors, validate

__all__ = [
    'CheckMode',
    'ConfigurationError',
    'FileReferenceResolver',
    'MISSING',
    'MappingReferenceResolver',
    'RecursionLimitError',
    'ReferenceResolver',
    'SchemaCheckerError',
    'UnresolvableReferenceError',
    'ValidationContext',
    'ValidationError',
    'Validator',
    'ValidatorConfig',
    'has_errors',
    'validate',
]
