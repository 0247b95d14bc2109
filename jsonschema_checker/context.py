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

"""Validation context: current instance path plus an append-only error log.

Speculative evaluation (``anyOf``, ``oneOf``, ``not``, ``disallow``) works on
forks. A fork does not copy its parent's errors; it remembers the parent and
how many errors the parent had at fork time, and keeps its own new errors.
Because the parent log is append-only, that prefix never changes, so the
fork's view stays valid even if the parent grows afterwards.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Optional, Union

from .exceptions import RecursionLimitError


DEFAULT_MAX_DEPTH = 128

PathSegment = Union[str, int]


@dataclass(frozen=True)
class ValidationError:
    """A single constraint failure at an instance path."""

    path: str
    message: str

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{self.path}: {self.message}"


def append_path(base: str, segment: PathSegment) -> str:
    """Extend a dotted/bracket path: ``a.b[2].c``."""
    if isinstance(segment, int) and not isinstance(segment, bool):
        return f"{base}[{segment}]"
    if segment == "":
        return base
    if base == "":
        return str(segment)
    return f"{base}.{segment}"


class ValidationContext:
    """Path stack and error log for one top-level validation run."""

    def __init__(self, path: str = "", max_depth: int = DEFAULT_MAX_DEPTH):
        self._path = path
        self._own: List[ValidationError] = []
        self._parent: Optional[ValidationContext] = None
        self._snapshot = 0
        self.max_depth = max_depth
        self.depth = 0

    # ---- path -----------------------------------------------------------

    @property
    def path(self) -> str:
        return self._path

    def set_path(self, path: str) -> None:
        self._path = path

    @contextmanager
    def descend(self, segment: PathSegment) -> Iterator[str]:
        """Point the context at a child value, restoring the path on exit."""
        previous = self._path
        self._path = append_path(previous, segment)
        try:
            yield self._path
        finally:
            self._path = previous

    @contextmanager
    def nested(self) -> Iterator[int]:
        """Count one level of schema nesting; trips the recursion guard."""
        if self.depth >= self.max_depth:
            raise RecursionLimitError(self.max_depth, self._path)
        self.depth += 1
        try:
            yield self.depth
        finally:
            self.depth -= 1

    # ---- errors ---------------------------------------------------------

    def append_error(self, message: str) -> None:
        self._own.append(ValidationError(path=self._path, message=message))

    def errors(self) -> List[ValidationError]:
        """All errors visible from this context, in evaluation order."""
        if self._parent is None:
            return list(self._own)
        return self._parent.errors()[: self._snapshot] + self._own

    def new_errors(self) -> List[ValidationError]:
        """Errors added since this context was forked."""
        return list(self._own)

    def error_count(self) -> int:
        return self._snapshot + len(self._own)

    def has_errors(self) -> bool:
        return self.error_count() != 0

    def is_clean_since(self, baseline_count: int) -> bool:
        """True when no error was added after the log held ``baseline_count`` entries."""
        return self.error_count() == baseline_count

    # ---- speculation ----------------------------------------------------

    def fork(self) -> "ValidationContext":
        """Independent snapshot sharing this context's errors-so-far and path."""
        child = ValidationContext(path=self._path, max_depth=self.max_depth)
        child._parent = self
        child._snapshot = self.error_count()
        child.depth = self.depth
        return child

    def merge(self, other: "ValidationContext") -> None:
        """Commit the errors another context added since its snapshot."""
        self._own.extend(other.new_errors())

    def has_same_error_count(self, other: "ValidationContext") -> bool:
        return self.error_count() == other.error_count()

    def has_same_errors(self, other: "ValidationContext") -> bool:
        return self.errors() == other.errors()

    def __repr__(self) -> str:
        return f"ValidationContext(path={self._path!r}, errors={self.error_count()})"
