"""
Registry — the static name → predicate table.

Built once at import from the ``__all__`` of every catalog module. Lookups
accept the snake_case name (``min_length``) or its camelCase spelling
(``minLength``); a trailing underscore that only avoids a builtin name is
dropped (``range_`` registers as ``range``).
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, Callable, Mapping

from rop_validator.catalog import (
    comparison,
    containers,
    errors,
    filesystem,
    formats,
    reflection,
    strings,
)
from rop_validator.catalog import types as type_checks

Predicate = Callable[..., Any]

_CATALOG_MODULES = (type_checks, comparison, strings, containers, formats, filesystem, reflection, errors)

_ALIASES = {
    "null": "is_none",
    "not_null": "not_none",
    "callable": "is_callable",
    "iterable": "is_iterable",
    "countable": "is_countable",
}

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


class UnknownPredicateError(AttributeError):
    """Raised for a predicate name (or dispatch prefix) the catalog does not know."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No such predicate: {name!r}")
        self.name = name


def normalize(name: str) -> str:
    """
    Map a camelCase or snake_case predicate name to its registry key.

    >>> normalize("minLength")
    'min_length'
    >>> normalize("isAOf")
    'is_a_of'
    """
    return _CAMEL_BOUNDARY.sub("_", name).lower().rstrip("_")


def _build() -> Mapping[str, Predicate]:
    table: dict[str, Predicate] = {}
    for module in _CATALOG_MODULES:
        for attr in module.__all__:
            table[attr.rstrip("_")] = getattr(module, attr)
    for alias, target in _ALIASES.items():
        table[alias] = table[target]
    return MappingProxyType(table)


PREDICATES: Mapping[str, Predicate] = _build()


def is_registered(name: str) -> bool:
    return normalize(name) in PREDICATES


def resolve(name: str) -> Predicate:
    """Look a predicate up by name. Raises UnknownPredicateError."""
    try:
        return PREDICATES[normalize(name)]
    except KeyError:
        raise UnknownPredicateError(name) from None


def names() -> list[str]:
    return sorted(PREDICATES)
