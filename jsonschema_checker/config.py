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

"""Configuration for validator instances."""

import os
import sys
import logging
from dataclasses import dataclass
from enum import Enum

from .context import DEFAULT_MAX_DEPTH
from .exceptions import ConfigurationError
from .utils.logging_utils import configure_split_stream_logging

# Python frames one schema level can take, and frames reserved for callers.
FRAMES_PER_LEVEL = 5
STACK_HEADROOM = 200


def max_supported_depth() -> int:
    """Deepest nesting the current interpreter recursion limit can hold."""
    return max(1, (sys.getrecursionlimit() - STACK_HEADROOM) // FRAMES_PER_LEVEL)


class CheckMode(Enum):
    """How strictly value kinds are compared."""

    NORMAL = "normal"
    # Scalar strings may be coerced to numbers/booleans during comparisons.
    TYPE_CAST = "type_cast"

    @classmethod
    def parse(cls, raw: str) -> "CheckMode":
        text = str(raw).strip().lower().replace("-", "_")
        for mode in cls:
            if mode.value == text or mode.name.lower() == text:
                return mode
        raise ConfigurationError(
            f"Invalid check mode '{raw}'. Valid modes: {[m.value for m in cls]}"
        )


@dataclass
class ValidatorConfig:
    """Configuration class for a validator."""
    check_mode: CheckMode = CheckMode.NORMAL
    max_depth: int = DEFAULT_MAX_DEPTH
    log_level: str = "WARNING"
    print_level: str = "ERROR"

    def __post_init__(self):
        if isinstance(self.check_mode, str):
            self.check_mode = CheckMode.parse(self.check_mode)
        if not isinstance(self.max_depth, int) or isinstance(self.max_depth, bool) or self.max_depth < 1:
            raise ConfigurationError(f"max_depth must be a positive integer, got: {self.max_depth!r}")
        if self.max_depth > max_supported_depth():
            raise ConfigurationError(
                f"max_depth {self.max_depth} exceeds {max_supported_depth()}, "
                f"the most the interpreter recursion limit ({sys.getrecursionlimit()}) allows"
            )

    @property
    def type_cast(self) -> bool:
        return self.check_mode is CheckMode.TYPE_CAST

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        raw_depth = os.getenv('JSONSCHEMA_CHECKER_MAX_DEPTH', str(DEFAULT_MAX_DEPTH))
        try:
            max_depth = int(raw_depth)
        except ValueError as exc:
            raise ConfigurationError(
                f"JSONSCHEMA_CHECKER_MAX_DEPTH must be an integer, got: {raw_depth!r}"
            ) from exc
        return cls(
            check_mode=CheckMode.parse(os.getenv('JSONSCHEMA_CHECKER_CHECK_MODE', 'normal')),
            max_depth=max_depth,
            log_level=os.getenv('JSONSCHEMA_CHECKER_LOG_LEVEL', 'WARNING'),
            print_level=os.getenv('JSONSCHEMA_CHECKER_PRINT_LEVEL', 'ERROR'),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.WARNING)
        stderr_level = getattr(logging, self.print_level.upper(), logging.ERROR)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        return configure_split_stream_logging(level=level, stderr_level=stderr_level, formatter=formatter)
