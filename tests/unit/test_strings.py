"""
Unit tests for the string predicates.

Every string predicate first requires a ``str``: a non-string fails with the
type check's TYPE_ERROR before the actual check runs.
"""

from __future__ import annotations

import re

import pytest
from railway import ErrorCode, ResultAssertions

from rop_validator.catalog.strings import (
    alnum,
    alpha,
    contains,
    digits,
    ends_with,
    length,
    length_between,
    lower,
    max_length,
    min_length,
    not_contains,
    not_ends_with,
    not_regex,
    not_starts_with,
    not_whitespace_only,
    regex,
    starts_with,
    starts_with_letter,
    unicode_letters,
    upper,
    uuid,
)


class TestNonStringInput:
    @pytest.mark.parametrize(
        "check",
        [
            lambda v: contains(v, "a"),
            lambda v: starts_with(v, "a"),
            lambda v: regex(v, "a"),
            lambda v: length(v, 1),
            lambda v: uuid(v),
            lambda v: alpha(v),
        ],
    )
    def test_type_error_first(self, check):
        result = check(123)
        ResultAssertions.assert_failure(result, ErrorCode.TYPE_ERROR)
        ResultAssertions.assert_failure_message_equals(result, "Expected a string. Got: integer")

    def test_custom_message_applies_to_type_failure_too(self):
        result = min_length(None, 3, "Too short or missing")
        ResultAssertions.assert_failure_message_equals(result, "Too short or missing")


class TestSubstrings:
    def test_contains(self):
        assert contains("abcd", "bc").is_success()
        result = contains("abcd", "x")
        ResultAssertions.assert_failure(result, ErrorCode.FORMAT_ERROR)
        ResultAssertions.assert_failure_message_equals(result, 'Expected a value to contain "x". Got: "abcd"')

    def test_not_contains(self):
        assert not_contains("abcd", "x").is_success()
        assert not_contains("abcd", "b").is_failure()

    def test_not_whitespace_only(self):
        assert not_whitespace_only(" a ").is_success()
        assert not_whitespace_only(" \t\n").is_failure()
        assert not_whitespace_only("").is_failure()

    def test_prefix_and_suffix(self):
        assert starts_with("railway", "rail").is_success()
        assert not_starts_with("railway", "way").is_success()
        assert ends_with("railway", "way").is_success()
        assert not_ends_with("railway", "way").is_failure()
        ResultAssertions.assert_failure_message_equals(
            starts_with("abc", "x"), 'Expected a value to start with "x". Got: "abc"'
        )

    def test_starts_with_letter(self):
        assert starts_with_letter("a1").is_success()
        assert starts_with_letter("1a").is_failure()
        assert starts_with_letter("").is_failure()


class TestPatterns:
    def test_regex_searches_anywhere(self):
        assert regex("abc123", r"\d+").is_success()

    def test_regex_accepts_compiled_pattern(self):
        assert regex("abc", re.compile(r"^a")).is_success()

    def test_regex_failure_message(self):
        result = regex("abc", r"\d")
        ResultAssertions.assert_failure(result, ErrorCode.FORMAT_ERROR)
        ResultAssertions.assert_failure_message_equals(result, 'The value "abc" does not match the expected pattern.')

    def test_not_regex_reports_offset(self):
        assert not_regex("abc", r"\d").is_success()
        result = not_regex("ab1", r"\d")
        ResultAssertions.assert_failure_message_equals(result, 'The value "ab1" matches the pattern "\\d" (at offset 2).')


class TestCharacterClasses:
    def test_unicode_letters(self):
        assert unicode_letters("Ñandú").is_success()
        assert unicode_letters("abc1").is_failure()
        assert unicode_letters("abc\n").is_failure()
        assert unicode_letters("").is_failure()

    def test_alpha_digits_alnum(self):
        assert alpha("abc").is_success()
        assert alpha("ab1").is_failure()
        assert digits("0123").is_success()
        assert digits("1.5").is_failure()
        assert alnum("ab12").is_success()
        assert alnum("ab-12").is_failure()

    def test_lower_upper(self):
        assert lower("abc").is_success()
        assert lower("abc1").is_failure()
        assert lower("aBc").is_failure()
        assert upper("ABC").is_success()
        assert upper("AB C").is_failure()


class TestLength:
    def test_length_counts_characters(self):
        assert length("héllo", 5).is_success()

    def test_length_failure(self):
        result = length("abc", 2)
        ResultAssertions.assert_failure(result, ErrorCode.LENGTH_ERROR)
        ResultAssertions.assert_failure_message_equals(result, 'Expected a value to contain 2 characters. Got: "abc"')

    def test_min_max(self):
        assert min_length("abc", 3).is_success()
        assert min_length("ab", 3).is_failure()
        assert max_length("abc", 3).is_success()
        assert max_length("abcd", 3).is_failure()

    @pytest.mark.parametrize(("value", "ok"), [("ab", True), ("abcd", True), ("a", False), ("abcde", False)])
    def test_length_between_inclusive(self, value, ok):
        assert length_between(value, 2, 4).is_success() is ok


class TestUuid:
    @pytest.mark.parametrize(
        "value",
        [
            "00000000-0000-0000-0000-000000000000",
            "ff6f8cb0-c57d-11e1-9b21-0800200c9a66",
            "FF6F8CB0-C57D-11E1-9B21-0800200C9A66",
            "{ff6f8cb0-c57d-11e1-9b21-0800200c9a66}",
            "urn:uuid:ff6f8cb0-c57d-11e1-9b21-0800200c9a66",
        ],
    )
    def test_valid(self, value):
        ResultAssertions.assert_success_value(uuid(value), value)

    @pytest.mark.parametrize(
        "value",
        [
            "not-a-uuid",
            "ff6f8cb0c57d11e19b210800200c9a66",
            "ff6f8cb0-c57d-11e1-9b21-0800200c9a66\n",
            "gf6f8cb0-c57d-11e1-9b21-0800200c9a66",
        ],
    )
    def test_invalid(self, value):
        ResultAssertions.assert_failure(uuid(value), ErrorCode.FORMAT_ERROR)

    def test_message(self):
        ResultAssertions.assert_failure_message_equals(uuid("nope"), 'Value "nope" is not a valid UUID.')
