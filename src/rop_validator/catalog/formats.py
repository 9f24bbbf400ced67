"""
Address format predicates — IP addresses and e-mail.

IP parsing is delegated to the standard ``ipaddress`` module; e-mail uses a
fixed pattern for the common dot-atom form (no quoted local parts, no
address literals, at least one dot in the domain).
"""

from __future__ import annotations

import ipaddress
import re
from typing import Any

from railway.result import Result, Success
from railway.result_failures import ResultFailures

from rop_validator.messages import report, value_to_string

_EMAIL = re.compile(
    r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+[A-Za-z]{2,63}"
)

__all__ = ["ip", "ipv4", "ipv6", "email"]


def _parses(value: Any, factory: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        factory(value)
    except ValueError:
        return False
    return True


def ip(value: Any, message: str = "") -> Result:
    """An IPv4 or IPv6 address in text form."""
    if not _parses(value, ipaddress.ip_address):
        return ResultFailures.format_error(
            report(message, "Value %s is not a valid IP.", value_to_string(value))
        )
    return Success.of(value)


def ipv4(value: Any, message: str = "") -> Result:
    if not _parses(value, ipaddress.IPv4Address):
        return ResultFailures.format_error(
            report(message, "Value %s is not a valid IPv4.", value_to_string(value))
        )
    return Success.of(value)


def ipv6(value: Any, message: str = "") -> Result:
    if not _parses(value, ipaddress.IPv6Address):
        return ResultFailures.format_error(
            report(message, "Value %s is not a valid IPv6.", value_to_string(value))
        )
    return Success.of(value)


def email(value: Any, message: str = "") -> Result:
    if not (isinstance(value, str) and len(value) <= 254 and _EMAIL.fullmatch(value)):
        return ResultFailures.format_error(
            report(message, "Value %s is not a valid e-mail address.", value_to_string(value))
        )
    return Success.of(value)
