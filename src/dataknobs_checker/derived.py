"""String checkers with a built-in format.

Each one copies the caller's options with its own pattern in the regex slot
and builds a string checker from them; the caller's options are never
modified. ``siret`` and ``ipv6`` add a check through :func:`extend`.
"""

from __future__ import annotations

import ipaddress
import re
from collections.abc import Mapping
from typing import Any

from .checkers import StringChecker
from .extension import ExtendedChecker, extend
from .options import CheckerOptions
from .registry import checker_registry
from .result import CheckContext

# a0:b1:c2:d3:e4:f5
MAC_PATTERN = re.compile(r"^([0-9a-f]{2}[:]){5}([0-9a-f]{2})$")

# 192.168.0.22
_OCTET = r"(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
IPV4_PATTERN = re.compile(rf"^{_OCTET}\.{_OCTET}\.{_OCTET}\.{_OCTET}$")

# FE80:0000:0000:0000:0202:B3FF:FE1E:8329, full syntax checked by ipaddress
IPV6_PATTERN = re.compile(r"^[0-9A-Fa-f:.]{2,45}$")

# 53f4b9031cf6455b326f4c7a
OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")

# main@jokester.fr
EMAIL_PATTERN = re.compile(
    r'^(([^<>()\[\]\\.,;:\s@"]+(\.[^<>()\[\]\\.,;:\s@"]+)*)|(".+"))'
    r"@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))$"
)

# 532 685 104 00012 or 53268510400012
SIRET_PATTERN = re.compile(r"^[0-9]{3} ?[0-9]{3} ?[0-9]{3} ?[0-9]{5}$")

OptionsLike = CheckerOptions | Mapping[str, Any] | None


def _with_pattern(options: OptionsLike, pattern: re.Pattern[str], **kwargs: Any) -> CheckerOptions:
    return CheckerOptions.coerce(options, **kwargs).with_changes(regex=pattern)


def mac(options: OptionsLike = None, **kwargs: Any) -> StringChecker:
    """Build a checker for lowercase colon-separated MAC addresses."""
    return StringChecker(_with_pattern(options, MAC_PATTERN, **kwargs))


def ipv4(options: OptionsLike = None, **kwargs: Any) -> StringChecker:
    """Build a checker for dotted-quad IPv4 addresses."""
    return StringChecker(_with_pattern(options, IPV4_PATTERN, **kwargs))


def ipv6(options: OptionsLike = None, **kwargs: Any) -> ExtendedChecker:
    """Build a checker for IPv6 addresses."""
    return extend(_with_pattern(options, IPV6_PATTERN, **kwargs), kind="string", check=_ipv6_check)


def object_id(options: OptionsLike = None, **kwargs: Any) -> StringChecker:
    """Build a checker for MongoDB ObjectId hex strings."""
    return StringChecker(_with_pattern(options, OBJECT_ID_PATTERN, **kwargs))


def email(options: OptionsLike = None, **kwargs: Any) -> StringChecker:
    """Build a checker for email addresses."""
    return StringChecker(_with_pattern(options, EMAIL_PATTERN, **kwargs))


def siret(options: OptionsLike = None, **kwargs: Any) -> ExtendedChecker:
    """Build a checker for French SIRET establishment numbers.

    Accepts 14 digits, grouped 3-3-3-5 by single spaces or not grouped at
    all, whose Luhn checksum is valid. When sanitizing, the value is
    rewritten in its grouped form (``"532 685 104 00012"``).
    """
    return extend(_with_pattern(options, SIRET_PATTERN, **kwargs), {"type": "string", "check": _siret_check})


def luhn_valid(digits: str) -> bool:
    """Check the Luhn mod-10 checksum of a string of digits.

    Every second digit from the right is doubled, and doubled values over 9
    are reduced by 9.
    """
    total = 0
    for position, char in enumerate(reversed(digits)):
        n = int(char)
        if position % 2:
            n *= 2
            if n > 9:
                n -= 9
        total += n
    return total % 10 == 0


def format_siret(digits: str) -> str:
    """Group 14 SIRET digits as ``"ddd ddd ddd ddddd"``."""
    return f"{digits[:3]} {digits[3:6]} {digits[6:9]} {digits[9:]}"


def _siret_check(value: str, context: CheckContext) -> str | bool | None:
    digits = "".join(value.split())
    if not luhn_valid(digits):
        return False
    if context.sanitize:
        return format_siret(digits)
    return None


def _ipv6_check(value: str, context: CheckContext) -> bool:
    try:
        ipaddress.IPv6Address(value)
    except ValueError:
        return False
    return True


checker_registry.register_kind("mac", mac)
checker_registry.register_kind("ipv4", ipv4, "ip")
checker_registry.register_kind("ipv6", ipv6)
checker_registry.register_kind("objectId", object_id, "objectID")
checker_registry.register_kind("email", email)
checker_registry.register_kind("siret", siret)
