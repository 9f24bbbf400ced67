"""
Comparison predicates — truthiness, equality, identity, ordering, membership.

Two flavours of equality:
  - loose (eq, not_eq): Python ``==``, so ``1 == 1.0 == True``
  - strict (same, not_same, in_array, one_of): equal *and* of the same type

Ordering checks treat values that cannot be compared with the bound
(``"a" > 1``) as failing the check, never as an error.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable

from railway.result import Result, Success
from railway.result_failures import ResultFailures

from rop_validator.messages import report, value_to_string, values_to_string

__all__ = [
    "true",
    "false",
    "not_false",
    "not_empty",
    "is_empty",
    "eq",
    "not_eq",
    "same",
    "not_same",
    "greater_than",
    "greater_than_eq",
    "less_than",
    "less_than_eq",
    "range_",
    "in_array",
    "one_of",
    "not_in_array",
]


def is_same(a: Any, b: Any) -> bool:
    """Strict comparison: the same object, or equal values of the same type."""
    return a is b or (type(a) is type(b) and a == b)


def _holds(compare: Callable[[Any, Any], bool], value: Any, bound: Any) -> bool:
    try:
        return bool(compare(value, bound))
    except TypeError:
        return False


def true(value: Any, message: str = "") -> Result:
    if value is not True:
        return ResultFailures.value_error(
            report(message, "Expected a value to be true. Got: %s", value_to_string(value))
        )
    return Success.of(value)


def false(value: Any, message: str = "") -> Result:
    if value is not False:
        return ResultFailures.value_error(
            report(message, "Expected a value to be false. Got: %s", value_to_string(value))
        )
    return Success.of(value)


def not_false(value: Any, message: str = "") -> Result:
    if value is False:
        return ResultFailures.value_error(
            report(message, "Expected a value other than false.", value_to_string(value))
        )
    return Success.of(value)


def not_empty(value: Any, message: str = "") -> Result:
    """Pass when ``value`` is truthy."""
    if not value:
        return ResultFailures.value_error(
            report(message, "Expected a non-empty value. Got: %s", value_to_string(value))
        )
    return Success.of(value)


def is_empty(value: Any, message: str = "") -> Result:
    """Pass when ``value`` is falsy: None, False, 0, "", empty containers."""
    if value:
        return ResultFailures.value_error(
            report(message, "Expected an empty value. Got: %s", value_to_string(value))
        )
    return Success.of(value)


def eq(value: Any, expect: Any, message: str = "") -> Result:
    if value != expect:
        return ResultFailures.value_error(
            report(
                message,
                "Expected a value equal to %2$s. Got: %s",
                value_to_string(value),
                value_to_string(expect),
            )
        )
    return Success.of(value)


def not_eq(value: Any, expect: Any, message: str = "") -> Result:
    if value == expect:
        return ResultFailures.value_error(
            report(
                message,
                "Expected a different value than %2$s.",
                value_to_string(value),
                value_to_string(expect),
            )
        )
    return Success.of(value)


def same(value: Any, expect: Any, message: str = "") -> Result:
    if not is_same(value, expect):
        return ResultFailures.value_error(
            report(
                message,
                "Expected a value identical to %2$s. Got: %s",
                value_to_string(value),
                value_to_string(expect),
            )
        )
    return Success.of(value)


def not_same(value: Any, expect: Any, message: str = "") -> Result:
    if is_same(value, expect):
        return ResultFailures.value_error(
            report(
                message,
                "Expected a value not identical to %2$s.",
                value_to_string(value),
                value_to_string(expect),
            )
        )
    return Success.of(value)


def greater_than(value: Any, limit: Any, message: str = "") -> Result:
    if not _holds(operator.gt, value, limit):
        return ResultFailures.range_error(
            report(
                message,
                "Expected a value greater than %2$s. Got: %s",
                value_to_string(value),
                value_to_string(limit),
            )
        )
    return Success.of(value)


def greater_than_eq(value: Any, limit: Any, message: str = "") -> Result:
    if not _holds(operator.ge, value, limit):
        return ResultFailures.range_error(
            report(
                message,
                "Expected a value greater than or equal to %2$s. Got: %s",
                value_to_string(value),
                value_to_string(limit),
            )
        )
    return Success.of(value)


def less_than(value: Any, limit: Any, message: str = "") -> Result:
    if not _holds(operator.lt, value, limit):
        return ResultFailures.range_error(
            report(
                message,
                "Expected a value less than %2$s. Got: %s",
                value_to_string(value),
                value_to_string(limit),
            )
        )
    return Success.of(value)


def less_than_eq(value: Any, limit: Any, message: str = "") -> Result:
    if not _holds(operator.le, value, limit):
        return ResultFailures.range_error(
            report(
                message,
                "Expected a value less than or equal to %2$s. Got: %s",
                value_to_string(value),
                value_to_string(limit),
            )
        )
    return Success.of(value)


def range_(value: Any, minimum: Any, maximum: Any, message: str = "") -> Result:
    """
    Inclusive on both ends. Registered as ``range``.

    >>> range_(11, 1, 10).message()
    'Expected a value between 1 and 10. Got: 11'
    """
    if not (_holds(operator.ge, value, minimum) and _holds(operator.le, value, maximum)):
        return ResultFailures.range_error(
            report(
                message,
                "Expected a value between %2$s and %3$s. Got: %s",
                value_to_string(value),
                value_to_string(minimum),
                value_to_string(maximum),
            )
        )
    return Success.of(value)


def in_array(value: Any, values: Iterable[Any], message: str = "") -> Result:
    """
    Strict membership: ``in_array("3", [1, 2, 3])`` fails.

    >>> in_array(3, [1, 2, 3])
    Success(3)
    """
    values = list(values)
    if not any(is_same(value, candidate) for candidate in values):
        return ResultFailures.value_error(
            report(
                message,
                "Expected one of: %2$s. Got: %s",
                value_to_string(value),
                values_to_string(values),
            )
        )
    return Success.of(value)


def one_of(value: Any, values: Iterable[Any], message: str = "") -> Result:
    return in_array(value, values, message)


def not_in_array(value: Any, values: Iterable[Any], message: str = "") -> Result:
    values = list(values)
    if any(is_same(value, candidate) for candidate in values):
        return ResultFailures.value_error(
            report(
                message,
                "%2$s was not expected to contain a value. Got: %s",
                value_to_string(value),
                values_to_string(values),
            )
        )
    return Success.of(value)
