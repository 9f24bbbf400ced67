"""
Higher-order wrappers — null-skipping and per-element application.

Each takes a predicate and returns a predicate of the same calling shape
``(value, *params, message) -> Result``, so the result can be bound,
composed or wrapped again like any catalog function:

    bind(null_or(string))                 # None or a string
    bind3(for_all(range_), 1, 10)         # every element within 1..10

Two readings of "for all":
  - for_all:   every element passes; the first failing element's Failure
               is returned, otherwise Success of the whole input
  - for_first: only the first element is checked and its Result returned
               (a "for all" that answers for its first element)

Both return Success of the input for an empty iterable. Strings and bytes
are not treated as iterables of characters.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping
from functools import wraps
from typing import Any, Callable

from railway.result import Result, Success
from railway.result_failures import ResultFailures

from rop_validator.messages import type_to_string

Predicate = Callable[..., Result]


def null_or(predicate: Predicate) -> Predicate:
    """``None`` passes untouched; anything else goes to ``predicate``."""

    @wraps(predicate)
    def check(value: Any, *args: Any, **kwargs: Any) -> Result:
        if value is None:
            return Success.of(None)
        return predicate(value, *args, **kwargs)

    return check


def _elements(value: Any) -> tuple[Any, list[Any]] | None:
    """Return (value to pass through, elements to check), or None for a non-iterable."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        return None
    if isinstance(value, Mapping):
        return value, list(value.values())
    if isinstance(value, Collection):
        return value, list(value)
    # one-shot iterators are materialised so the Success value can be reused
    items = list(value)
    return items, items


def _not_iterable(value: Any) -> Result:
    return ResultFailures.type_error(f"Expected an iterable. Got: {type_to_string(value)}")


def for_all(predicate: Predicate) -> Predicate:
    """Apply ``predicate`` to every element, stopping at the first Failure."""

    @wraps(predicate)
    def check(value: Any, *args: Any, **kwargs: Any) -> Result:
        unpacked = _elements(value)
        if unpacked is None:
            return _not_iterable(value)
        whole, items = unpacked
        return Result.all_of(predicate(item, *args, **kwargs) for item in items).map(lambda _: whole)

    return check


def for_first(predicate: Predicate) -> Predicate:
    """Apply ``predicate`` to the first element only and return its Result."""

    @wraps(predicate)
    def check(value: Any, *args: Any, **kwargs: Any) -> Result:
        unpacked = _elements(value)
        if unpacked is None:
            return _not_iterable(value)
        whole, items = unpacked
        if not items:
            return Success.of(whole)
        return predicate(items[0], *args, **kwargs)

    return check
