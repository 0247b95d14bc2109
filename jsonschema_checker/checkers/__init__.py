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

"""Keyword checkers. ``AnyChecker`` is the per-node entry point; the others
each own one family of keywords and expose ``check(value, schema, context)``.
"""

from .any_checker import AnyChecker
from .collection_checker import CollectionChecker
from .enum_checker import EnumChecker
from .format_checker import FormatChecker
from .number_checker import NumberChecker
from .object_checker import ObjectChecker
from .string_checker import StringChecker
from .type_checker import TypeChecker

__all__ = [
    'AnyChecker',
    'CollectionChecker',
    'EnumChecker',
    'FormatChecker',
    'NumberChecker',
    'ObjectChecker',
    'StringChecker',
    'TypeChecker',
]
