"""
Message rendering — how values and types appear in failure messages.

Every predicate formats its message the same way: a printf-style template
(the caller's, or the predicate's default) filled with rendered values.
The rendered value under test always comes first; check parameters follow.
Templates may address arguments by position (``%2$s``) and may use fewer
placeholders than there are arguments, so a caller's message can mention
only what it needs, or nothing at all.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

# printf conversion specifiers with an optional "N$" argument position;
# %% is matched too so it can be skipped when collecting arguments
_SPECIFIER = re.compile(
    r"%(?:(?P<position>\d+)\$)?(?:\([^)]*\))?[#0\- +]*(?:\*|\d+)?(?:\.(?:\*|\d+))?[hlL]?[diouxXeEfFgGcrsa%]"
)
_POSITION = re.compile(r"%\d+\$")

_TYPE_NAMES: dict[type, str] = {
    bool: "boolean",
    int: "integer",
    float: "float",
    str: "string",
    type(None): "NULL",
}


def type_to_string(value: Any) -> str:
    """
    Name the type of ``value`` for a message.

    >>> type_to_string(123)
    'integer'
    >>> type_to_string([1, 2])
    'list'
    """
    name = _TYPE_NAMES.get(type(value))
    if name is not None:
        return name
    return type(value).__name__


def value_to_string(value: Any) -> str:
    """
    Render ``value`` for a message.

    >>> value_to_string("abc")
    '"abc"'
    >>> value_to_string(None)
    'null'
    >>> value_to_string(True)
    'true'
    """
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, type):
        return value.__qualname__
    if isinstance(value, (list, tuple, set, frozenset, Mapping)):
        return type(value).__name__
    if callable(value):
        return "callable"
    return type(value).__name__


def values_to_string(values: Any) -> str:
    """Render each element with value_to_string, comma separated."""
    return ", ".join(value_to_string(v) for v in values)


def format_message(template: str, *args: Any) -> str:
    """
    Fill a printf-style ``template`` from ``args``.

    Plain placeholders consume arguments in order; ``%N$s`` picks the N-th
    argument without consuming. Surplus arguments are ignored. A template
    that cannot be filled (a stray ``%``, too few arguments, a type
    mismatch) is returned verbatim rather than raising.

    >>> format_message("Expected a string. Got: %s", "integer")
    'Expected a string. Got: integer'
    >>> format_message("Expected a value equal to %2$s. Got: %s", "1", "2")
    'Expected a value equal to 2. Got: 1'
    >>> format_message("Name must be text", "integer")
    'Name must be text'
    """
    ordered: list[Any] = []
    consumed = 0
    try:
        for match in _SPECIFIER.finditer(template):
            if match.group() == "%%":
                continue
            position = match.group("position")
            if position is not None:
                ordered.append(args[int(position) - 1])
            else:
                ordered.append(args[consumed])
                consumed += 1
        return _POSITION.sub("%", template) % tuple(ordered)
    except (IndexError, TypeError, ValueError, KeyError):
        return template


def report(message: str, default: str, *args: Any) -> str:
    """Format the caller's ``message`` if given, else ``default``, with ``args``."""
    return format_message(message or default, *args)
