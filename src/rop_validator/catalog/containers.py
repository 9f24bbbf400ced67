"""
Collection predicates — element counts, shape, keys and uniqueness.

"List" and "map" are the two shapes a collection can have:
  - list: a ``list``, or a mapping whose keys are exactly 0..n-1 in order
  - map:  a mapping whose keys are all strings

The count checks take collections, not text: a ``str`` or ``bytes`` value
fails with TYPE_ERROR like any other non-countable, as in ``unique_values``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sized
from typing import Any, Callable

from railway.result import Result, Success
from railway.result_failures import ResultFailures

from rop_validator.catalog.types import is_countable
from rop_validator.messages import report, type_to_string, value_to_string

__all__ = [
    "count",
    "min_count",
    "max_count",
    "count_between",
    "is_list",
    "is_non_empty_list",
    "is_map",
    "is_non_empty_map",
    "unique_values",
    "key_exists",
    "key_not_exists",
    "valid_array_key",
]


def _count_check(
    value: Any,
    message: str,
    check: Callable[[int], bool],
    default: str,
    *params: Any,
) -> Result:
    """Require a sized non-text value, then apply ``check`` to its length."""
    if isinstance(value, (str, bytes)):
        return ResultFailures.type_error(
            report(message, "Expected a countable. Got: %s", type_to_string(value))
        )
    return is_countable(value, message).flat_map(
        lambda sized: Success.of(sized)
        if check(len(sized))
        else ResultFailures.collection_error(report(message, default, len(sized), *params))
    )


def count(value: Any, number: int, message: str = "") -> Result:
    return _count_check(
        value, message, lambda n: n == number,
        "Expected a collection to contain %2$d elements. Got: %d.", number,
    )


def min_count(value: Any, minimum: int, message: str = "") -> Result:
    return _count_check(
        value, message, lambda n: n >= minimum,
        "Expected a collection to contain at least %2$d elements. Got: %d", minimum,
    )


def max_count(value: Any, maximum: int, message: str = "") -> Result:
    return _count_check(
        value, message, lambda n: n <= maximum,
        "Expected a collection to contain at most %2$d elements. Got: %d", maximum,
    )


def count_between(value: Any, minimum: int, maximum: int, message: str = "") -> Result:
    """Inclusive on both ends."""
    return _count_check(
        value, message, lambda n: minimum <= n <= maximum,
        "Expected a collection to contain between %2$d and %3$d elements. Got: %d", minimum, maximum,
    )


def _is_list(value: Any) -> bool:
    if isinstance(value, list):
        return True
    return isinstance(value, Mapping) and list(value.keys()) == list(range(len(value)))


def _is_map(value: Any) -> bool:
    return isinstance(value, Mapping) and all(isinstance(key, str) for key in value)


def is_list(value: Any, message: str = "") -> Result:
    """
    A ``list``, or a mapping keyed 0..n-1 in insertion order.

    >>> is_list({0: "a", 1: "b"}).is_success()
    True
    >>> is_list({1: "a"}).is_success()
    False
    """
    if not _is_list(value):
        return ResultFailures.collection_error(
            report(message, "Expected a list. Got: %s", type_to_string(value))
        )
    return Success.of(value)


def is_non_empty_list(value: Any, message: str = "") -> Result:
    if not (_is_list(value) and len(value) > 0):
        return ResultFailures.collection_error(
            report(message, "Expected a non-empty list. Got: %s", type_to_string(value))
        )
    return Success.of(value)


def is_map(value: Any, message: str = "") -> Result:
    """A mapping with string keys only; an empty mapping counts."""
    if not _is_map(value):
        return ResultFailures.collection_error(
            report(message, "Expected a map with string keys. Got: %s", type_to_string(value))
        )
    return Success.of(value)


def is_non_empty_map(value: Any, message: str = "") -> Result:
    if not (_is_map(value) and len(value) > 0):
        return ResultFailures.collection_error(
            report(message, "Expected a non-empty map with string keys. Got: %s", type_to_string(value))
        )
    return Success.of(value)


def unique_values(value: Any, message: str = "") -> Result:
    """
    No two elements compare equal with ``==`` (so ``1`` and ``1.0`` clash).

    Mappings are checked on their values. Elements need not be hashable.
    """
    if isinstance(value, (str, bytes)) or not isinstance(value, Sized):
        return ResultFailures.type_error(
            report(message, "Expected a collection. Got: %s", type_to_string(value))
        )
    elements = list(value.values()) if isinstance(value, Mapping) else list(value)
    distinct: list[Any] = []
    for element in elements:
        if not any(element == seen for seen in distinct):
            distinct.append(element)
    duplicates = len(elements) - len(distinct)
    if duplicates:
        return ResultFailures.collection_error(
            report(
                message,
                "Expected a collection of unique values, but %s of them %s duplicated",
                duplicates,
                "is" if duplicates == 1 else "are",
            )
        )
    return Success.of(value)


def key_exists(value: Any, key: Any, message: str = "") -> Result:
    if not (isinstance(value, Mapping) and key in value):
        return ResultFailures.collection_error(
            report(message, "Expected the key %s to exist.", value_to_string(key))
        )
    return Success.of(value)


def key_not_exists(value: Any, key: Any, message: str = "") -> Result:
    """A non-mapping has no keys, so it passes."""
    if isinstance(value, Mapping) and key in value:
        return ResultFailures.collection_error(
            report(message, "Expected the key %s to not exist.", value_to_string(key))
        )
    return Success.of(value)


def valid_array_key(value: Any, message: str = "") -> Result:
    """A ``str`` or ``int`` (``bool`` excluded), the types list and map keys may have."""
    if not (isinstance(value, str) or isinstance(value, int) and not isinstance(value, bool)):
        return ResultFailures.type_error(
            report(message, "Expected string or integer. Got: %s", type_to_string(value))
        )
    return Success.of(value)
