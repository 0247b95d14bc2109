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

"""Predicates for the ``format`` keyword.

Unknown format names are ignored so that consumers can use custom formats;
``FormatChecker.register`` adds or overrides entries per checker instance.
Known limitations: ``phone`` only accepts a North-American layout and
``hostname`` is a loose dot-separated pattern rather than full RFC 1123.
"""

from __future__ import annotations

import ipaddress
import json
import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, Tuple
from urllib.parse import urlparse

from ..context import ValidationContext
from ..utils.value_kinds import is_integral

logger = logging.getLogger(__name__)

FormatPredicate = Callable[[Any], bool]


@dataclass(frozen=True)
class FormatRule:
    predicate: FormatPredicate
    # May reference {value}, the JSON rendering of the offending value.
    message: str

    def describe(self, value: Any) -> str:
        try:
            rendered = json.dumps(value)
        except (TypeError, ValueError):
            rendered = repr(value)
        return self.message.format(value=rendered)


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_RE = re.compile(r"^\d{2}:\d{2}:\d{2}$")
_DATE_TIME_VARIANTS: Tuple[Tuple[re.Pattern, str], ...] = (
    (re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$"), "%Y-%m-%dT%H:%M:%SZ"),
    (re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{1,6}Z$"), "%Y-%m-%dT%H:%M:%S.%fZ"),
    (re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2}$"), "%Y-%m-%dT%H:%M:%S%z"),
    (re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{4}$"), "%Y-%m-%dT%H:%M:%S%z"),
)
_EPOCH_RE = re.compile(r"^-?\d+$")

CSS_COLOR_NAMES = frozenset({
    'aqua', 'black', 'blue', 'fuchsia', 'gray', 'green', 'lime', 'maroon',
    'navy', 'olive', 'orange', 'purple', 'red', 'silver', 'teal', 'white', 'yellow',
})
_HEX_COLOR_RE = re.compile(r"^#([a-f0-9]{3}|[a-f0-9]{6})$", re.IGNORECASE)
_STYLE_ENTRY_RE = re.compile(r"^\s*[-a-z]+\s*:\s*.+$", re.IGNORECASE)
_PHONE_RE = re.compile(r"^\+?(\(\d{3}\)|\d{3}) \d{3} \d{4}$")
_HOSTNAME_RE = re.compile(r"^[_a-z0-9-]+(\.[_a-z0-9-]+)+\.?$", re.IGNORECASE)
_EMAIL_RE = re.compile(
    r"^[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@([A-Za-z0-9]([A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+[A-Za-z]{2,63}$"
)
_URI_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*$")
# Schemes that are meaningful without an authority component.
_HOSTLESS_SCHEMES = frozenset({'mailto', 'news', 'file', 'urn', 'tel', 'data'})


def _parses(value: str, fmt: str) -> bool:
    try:
        datetime.strptime(value, fmt)
    except ValueError:
        return False
    return True


def validate_date(value: Any) -> bool:
    return isinstance(value, str) and bool(_DATE_RE.match(value)) and _parses(value, "%Y-%m-%d")


def validate_time(value: Any) -> bool:
    return isinstance(value, str) and bool(_TIME_RE.match(value)) and _parses(value, "%H:%M:%S")


def validate_date_time(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return any(
        pattern.match(value) and _parses(value, fmt)
        for pattern, fmt in _DATE_TIME_VARIANTS
    )


def validate_utc_millisec(value: Any) -> bool:
    if isinstance(value, str):
        return bool(_EPOCH_RE.match(value))
    return is_integral(value)


def validate_regex(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        re.compile(value)
    except re.error:
        return False
    return True


def validate_color(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return value.lower() in CSS_COLOR_NAMES or bool(_HEX_COLOR_RE.match(value))


def validate_style(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    entries = value.rstrip(';').split(';')
    return all(_STYLE_ENTRY_RE.match(entry) for entry in entries)


def validate_phone(value: Any) -> bool:
    return isinstance(value, str) and bool(_PHONE_RE.match(value))


def validate_uri(value: Any) -> bool:
    if not isinstance(value, str) or not value or any(ch.isspace() for ch in value):
        return False
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    if not parsed.scheme or not _URI_SCHEME_RE.match(parsed.scheme):
        return False
    if parsed.netloc:
        return True
    return parsed.scheme.lower() in _HOSTLESS_SCHEMES and bool(parsed.path or parsed.query)


def validate_email(value: Any) -> bool:
    if not isinstance(value, str) or len(value) > 254:
        return False
    if not _EMAIL_RE.match(value):
        return False
    local, _, _domain = value.rpartition('@')
    return len(local) <= 64


def validate_ipv4(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        ipaddress.IPv4Address(value)
    except ValueError:
        return False
    return True


def validate_ipv6(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        ipaddress.IPv6Address(value)
    except ValueError:
        return False
    return True


def validate_hostname(value: Any) -> bool:
    return isinstance(value, str) and len(value) <= 255 and bool(_HOSTNAME_RE.match(value))


_DEFAULT_RULES: Dict[str, FormatRule] = {
    'date': FormatRule(validate_date, 'Invalid date {value}, expected format YYYY-MM-DD'),
    'time': FormatRule(validate_time, 'Invalid time {value}, expected format hh:mm:ss'),
    'date-time': FormatRule(
        validate_date_time,
        'Invalid date-time {value}, expected format YYYY-MM-DDThh:mm:ssZ or YYYY-MM-DDThh:mm:ss+hh:mm',
    ),
    'utc-millisec': FormatRule(
        validate_utc_millisec, 'Invalid time {value}, expected integer of milliseconds since Epoch'
    ),
    'regex': FormatRule(validate_regex, 'Invalid regex format {value}'),
    'color': FormatRule(validate_color, 'Invalid color'),
    'style': FormatRule(validate_style, 'Invalid style'),
    'phone': FormatRule(validate_phone, 'Invalid phone number'),
    'uri': FormatRule(validate_uri, 'Invalid URL format'),
    'email': FormatRule(validate_email, 'Invalid email'),
    'ip-address': FormatRule(validate_ipv4, 'Invalid IP address'),
    'ipv4': FormatRule(validate_ipv4, 'Invalid IP address'),
    'ipv6': FormatRule(validate_ipv6, 'Invalid IP address'),
    'host-name': FormatRule(validate_hostname, 'Invalid hostname'),
    'hostname': FormatRule(validate_hostname, 'Invalid hostname'),
}


class FormatChecker:
    """Checker for the ``format`` keyword."""

    def __init__(self):
        self._rules: Dict[str, FormatRule] = dict(_DEFAULT_RULES)

    @property
    def formats(self) -> Iterable[str]:
        return sorted(self._rules)

    def register(self, name: str, predicate: FormatPredicate, message: str = "") -> None:
        """Add or replace a format rule on this checker instance.

        Args:
            name: Format name as used in schemas
            predicate: Callable returning True when the value conforms
            message: Error message; ``{value}`` is replaced by the JSON value
        """
        if not callable(predicate):
            raise TypeError(f"Format predicate for '{name}' must be callable")
        self._rules[name] = FormatRule(predicate, message or f"Invalid {name} {{value}}")
        logger.debug(f"Registered format '{name}'")

    def conforms(self, value: Any, name: str) -> bool:
        rule = self._rules.get(name)
        return rule is None or bool(rule.predicate(value))

    def check(self, value: Any, schema: Dict[str, Any], context: ValidationContext) -> None:
        if 'format' not in schema:
            return

        name = schema['format']
        rule = self._rules.get(name) if isinstance(name, str) else None
        if rule is None:
            return

        if not rule.predicate(value):
            context.append_error(rule.describe(value))
