"""
Type predicates — is the value of the expected kind?

Every predicate has the catalog shape ``(value, message='') -> Result`` and
passes the value through unchanged on success.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sized
from typing import Any

from railway.result import Result, Success
from railway.result_failures import ResultFailures

from rop_validator.messages import report, type_to_string, value_to_string

# numeric strings: optional sign, decimal or exponent form, surrounding blanks allowed
_NUMERIC_STRING = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$")

__all__ = [
    "string",
    "string_not_empty",
    "integer",
    "integerish",
    "positive_integer",
    "natural",
    "float_",
    "numeric",
    "boolean",
    "scalar",
    "is_callable",
    "is_iterable",
    "is_countable",
    "is_none",
    "not_none",
]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return _is_int(value) or isinstance(value, float)


def string(value: Any, message: str = "") -> Result:
    """
    Pass when ``value`` is a ``str``.

    >>> string(123).message()
    'Expected a string. Got: integer'
    """
    if not isinstance(value, str):
        return ResultFailures.type_error(
            report(message, "Expected a string. Got: %s", type_to_string(value))
        )
    return Success.of(value)


def string_not_empty(value: Any, message: str = "") -> Result:
    """A ``str`` other than the empty string."""
    if not isinstance(value, str):
        return string(value, message)
    if value == "":
        return ResultFailures.value_error(
            report(message, "Expected a different value than %2$s.", value_to_string(value), '""')
        )
    return Success.of(value)


def integer(value: Any, message: str = "") -> Result:
    """An ``int``; ``bool`` does not count."""
    if not _is_int(value):
        return ResultFailures.type_error(
            report(message, "Expected an integer. Got: %s", type_to_string(value))
        )
    return Success.of(value)


def integerish(value: Any, message: str = "") -> Result:
    """A number, or numeric string, with no fractional part."""
    try:
        ok = numeric(value).is_success() and float(value) == int(float(value))
    except (OverflowError, ValueError):
        ok = False
    if not ok:
        return ResultFailures.type_error(
            report(message, "Expected an integerish value. Got: %s", type_to_string(value))
        )
    return Success.of(value)


def positive_integer(value: Any, message: str = "") -> Result:
    if not (_is_int(value) and value > 0):
        return ResultFailures.type_error(
            report(message, "Expected a positive integer. Got: %s", value_to_string(value))
        )
    return Success.of(value)


def natural(value: Any, message: str = "") -> Result:
    """A non-negative ``int``."""
    if not (_is_int(value) and value >= 0):
        return ResultFailures.type_error(
            report(message, "Expected a non-negative integer. Got: %s", value_to_string(value))
        )
    return Success.of(value)


def float_(value: Any, message: str = "") -> Result:
    """A ``float``. Registered as ``float``."""
    if not isinstance(value, float):
        return ResultFailures.type_error(
            report(message, "Expected a float. Got: %s", type_to_string(value))
        )
    return Success.of(value)


def numeric(value: Any, message: str = "") -> Result:
    """An ``int`` or ``float`` (not ``bool``), or a string spelling a decimal number."""
    if not (_is_number(value) or isinstance(value, str) and _NUMERIC_STRING.match(value)):
        return ResultFailures.type_error(
            report(message, "Expected a numeric. Got: %s", type_to_string(value))
        )
    return Success.of(value)


def boolean(value: Any, message: str = "") -> Result:
    if not isinstance(value, bool):
        return ResultFailures.type_error(
            report(message, "Expected a boolean. Got: %s", type_to_string(value))
        )
    return Success.of(value)


def scalar(value: Any, message: str = "") -> Result:
    """A string, number or boolean."""
    if not isinstance(value, (str, int, float, bool)):
        return ResultFailures.type_error(
            report(message, "Expected a scalar. Got: %s", type_to_string(value))
        )
    return Success.of(value)


def is_callable(value: Any, message: str = "") -> Result:
    if not callable(value):
        return ResultFailures.type_error(
            report(message, "Expected a callable. Got: %s", type_to_string(value))
        )
    return Success.of(value)


def is_iterable(value: Any, message: str = "") -> Result:
    if not isinstance(value, Iterable):
        return ResultFailures.type_error(
            report(message, "Expected an iterable. Got: %s", type_to_string(value))
        )
    return Success.of(value)


def is_countable(value: Any, message: str = "") -> Result:
    """Anything ``len()`` accepts."""
    if not isinstance(value, Sized):
        return ResultFailures.type_error(
            report(message, "Expected a countable. Got: %s", type_to_string(value))
        )
    return Success.of(value)


def is_none(value: Any, message: str = "") -> Result:
    if value is not None:
        return ResultFailures.value_error(
            report(message, "Expected null. Got: %s", value_to_string(value))
        )
    return Success.of(value)


def not_none(value: Any, message: str = "") -> Result:
    if value is None:
        return ResultFailures.value_error(
            report(message, "Expected a value other than null.", value_to_string(value))
        )
    return Success.of(value)
