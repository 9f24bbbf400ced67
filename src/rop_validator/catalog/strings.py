"""
String predicates — substrings, patterns, character classes, length, UUIDs.

All of them first require a ``str``; a non-string fails with the ``string``
check's message (or the caller's message). Length is counted in code
points, which for a Python ``str`` is the number of characters.

Character classes (alpha, digits, alnum, lower, upper) follow the
``str.is*`` methods and are therefore Unicode-aware.
"""

from __future__ import annotations

import re
from typing import Any, Callable

from railway.result import Result, Success
from railway.result_failures import ResultFailures

from rop_validator.catalog.types import string
from rop_validator.messages import report, value_to_string

_NIL_UUID = "00000000-0000-0000-0000-000000000000"
_UUID = re.compile(r"[0-9A-Fa-f]{8}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{12}")
_UNICODE_LETTERS = re.compile(r"[^\W\d_]+")

__all__ = [
    "contains",
    "not_contains",
    "not_whitespace_only",
    "starts_with",
    "not_starts_with",
    "starts_with_letter",
    "ends_with",
    "not_ends_with",
    "regex",
    "not_regex",
    "unicode_letters",
    "alpha",
    "digits",
    "alnum",
    "lower",
    "upper",
    "length",
    "min_length",
    "max_length",
    "length_between",
    "uuid",
]


def _text_check(
    value: Any,
    message: str,
    check: Callable[[str], bool],
    default: str,
    *params: Any,
    failure: Callable[[str], Result] = ResultFailures.format_error,
) -> Result:
    """Require a string, then apply ``check``; ``params`` fill the template after the value."""
    return string(value, message).flat_map(
        lambda text: Success.of(text)
        if check(text)
        else failure(report(message, default, value_to_string(text), *params))
    )


def contains(value: Any, sub_string: str, message: str = "") -> Result:
    return _text_check(
        value, message, lambda text: sub_string in text,
        "Expected a value to contain %2$s. Got: %s", value_to_string(sub_string),
    )


def not_contains(value: Any, sub_string: str, message: str = "") -> Result:
    return _text_check(
        value, message, lambda text: sub_string not in text,
        "%2$s was not expected to be contained in a value. Got: %s", value_to_string(sub_string),
    )


def not_whitespace_only(value: Any, message: str = "") -> Result:
    return _text_check(
        value, message, lambda text: text.strip() != "",
        "Expected a non-whitespace string. Got: %s",
    )


def starts_with(value: Any, prefix: str, message: str = "") -> Result:
    return _text_check(
        value, message, lambda text: text.startswith(prefix),
        "Expected a value to start with %2$s. Got: %s", value_to_string(prefix),
    )


def not_starts_with(value: Any, prefix: str, message: str = "") -> Result:
    return _text_check(
        value, message, lambda text: not text.startswith(prefix),
        "Expected a value not to start with %2$s. Got: %s", value_to_string(prefix),
    )


def starts_with_letter(value: Any, message: str = "") -> Result:
    return _text_check(
        value, message, lambda text: text[:1].isalpha(),
        "Expected a value to start with a letter. Got: %s",
    )


def ends_with(value: Any, suffix: str, message: str = "") -> Result:
    return _text_check(
        value, message, lambda text: text.endswith(suffix),
        "Expected a value to end with %2$s. Got: %s", value_to_string(suffix),
    )


def not_ends_with(value: Any, suffix: str, message: str = "") -> Result:
    return _text_check(
        value, message, lambda text: not text.endswith(suffix),
        "Expected a value not to end with %2$s. Got: %s", value_to_string(suffix),
    )


def regex(value: Any, pattern: str | re.Pattern[str], message: str = "") -> Result:
    """Pass when ``pattern`` matches anywhere in the value (``re.search``)."""
    return _text_check(
        value, message, lambda text: re.search(pattern, text) is not None,
        "The value %s does not match the expected pattern.",
    )


def not_regex(value: Any, pattern: str | re.Pattern[str], message: str = "") -> Result:
    def check(text: str) -> Result:
        match = re.search(pattern, text)
        if match is None:
            return Success.of(text)
        return ResultFailures.format_error(
            report(
                message,
                "The value %s matches the pattern %s (at offset %d).",
                value_to_string(text),
                value_to_string(getattr(pattern, "pattern", pattern)),
                match.start(),
            )
        )

    return string(value, message).flat_map(check)


def unicode_letters(value: Any, message: str = "") -> Result:
    return _text_check(
        value, message, lambda text: _UNICODE_LETTERS.fullmatch(text) is not None,
        "Expected a value to contain only Unicode letters. Got: %s",
    )


def alpha(value: Any, message: str = "") -> Result:
    return _text_check(
        value, message, str.isalpha,
        "Expected a value to contain only letters. Got: %s",
    )


def digits(value: Any, message: str = "") -> Result:
    return _text_check(
        value, message, str.isdecimal,
        "Expected a value to contain digits only. Got: %s",
    )


def alnum(value: Any, message: str = "") -> Result:
    return _text_check(
        value, message, str.isalnum,
        "Expected a value to contain letters and digits only. Got: %s",
    )


def lower(value: Any, message: str = "") -> Result:
    """Letters only, all of them lowercase."""
    return _text_check(
        value, message, lambda text: text.isalpha() and text.islower(),
        "Expected a value to contain lowercase characters only. Got: %s",
    )


def upper(value: Any, message: str = "") -> Result:
    """Letters only, all of them uppercase."""
    return _text_check(
        value, message, lambda text: text.isalpha() and text.isupper(),
        "Expected a value to contain uppercase characters only. Got: %s",
    )


def length(value: Any, expected: int, message: str = "") -> Result:
    return _text_check(
        value, message, lambda text: len(text) == expected,
        "Expected a value to contain %2$s characters. Got: %s", expected,
        failure=ResultFailures.length_error,
    )


def min_length(value: Any, minimum: int, message: str = "") -> Result:
    return _text_check(
        value, message, lambda text: len(text) >= minimum,
        "Expected a value to contain at least %2$s characters. Got: %s", minimum,
        failure=ResultFailures.length_error,
    )


def max_length(value: Any, maximum: int, message: str = "") -> Result:
    return _text_check(
        value, message, lambda text: len(text) <= maximum,
        "Expected a value to contain at most %2$s characters. Got: %s", maximum,
        failure=ResultFailures.length_error,
    )


def length_between(value: Any, minimum: int, maximum: int, message: str = "") -> Result:
    """Inclusive on both ends."""
    return _text_check(
        value, message, lambda text: minimum <= len(text) <= maximum,
        "Expected a value to contain between %2$s and %3$s characters. Got: %s", minimum, maximum,
        failure=ResultFailures.length_error,
    )


def _is_uuid(text: str) -> bool:
    for token in ("urn:", "uuid:", "{", "}"):
        text = text.replace(token, "")
    return text == _NIL_UUID or _UUID.fullmatch(text) is not None


def uuid(value: Any, message: str = "") -> Result:
    """
    A UUID in canonical 8-4-4-4-12 hex form.

    ``urn:``/``uuid:`` prefixes and surrounding braces are tolerated; the
    nil UUID passes. The original string is passed through.

    >>> uuid("00000000-0000-0000-0000-000000000000").is_success()
    True
    """
    return _text_check(
        value, message, _is_uuid,
        "Value %s is not a valid UUID.",
    )
