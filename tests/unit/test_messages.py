"""Unit tests for message rendering: type/value names and tolerant printf formatting."""

from __future__ import annotations

import pytest

from rop_validator.messages import (
    format_message,
    report,
    type_to_string,
    value_to_string,
    values_to_string,
)


class _Thing:
    pass


class TestTypeToString:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("abc", "string"),
            (123, "integer"),
            (1.5, "float"),
            (True, "boolean"),
            (None, "NULL"),
            ([1], "list"),
            ({"a": 1}, "dict"),
            (_Thing(), "_Thing"),
        ],
    )
    def test_names(self, value, expected):
        assert type_to_string(value) == expected


class TestValueToString:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("abc", '"abc"'),
            (None, "null"),
            (True, "true"),
            (False, "false"),
            (42, "42"),
            (2.5, "2.5"),
            ([1, 2], "list"),
            ({"a": 1}, "dict"),
            (_Thing, "_Thing"),
            (_Thing(), "_Thing"),
            (len, "callable"),
        ],
    )
    def test_rendering(self, value, expected):
        assert value_to_string(value) == expected

    def test_values_to_string_joins(self):
        assert values_to_string([1, "2", None]) == '1, "2", null'


class TestFormatMessage:
    def test_sequential_placeholders(self):
        assert format_message("Got: %s and %s", "a", "b") == "Got: a and b"

    def test_positional_placeholders(self):
        """
        GIVEN a template addressing its second argument first
        WHEN formatted
        THEN %2$s takes the second argument and %s the first.
        """
        template = "Expected a value equal to %2$s. Got: %s"
        assert format_message(template, '"a"', '"b"') == 'Expected a value equal to "b". Got: "a"'

    def test_surplus_arguments_are_ignored(self):
        assert format_message("Name must be text", "integer") == "Name must be text"
        assert format_message("Got: %s", "a", "b", "c") == "Got: a"

    def test_percent_literal(self):
        assert format_message("100%% sure, got %s", "x") == "100% sure, got x"

    def test_numeric_specifiers(self):
        assert format_message("Got: %d.", 3) == "Got: 3."

    def test_too_few_arguments_returns_template(self):
        assert format_message("%s and %s", "only one") == "%s and %s"

    def test_type_mismatch_returns_template(self):
        assert format_message("Count: %d", "not a number") == "Count: %d"


class TestReport:
    def test_default_used_when_message_empty(self):
        assert report("", "Expected a string. Got: %s", "integer") == "Expected a string. Got: integer"

    def test_custom_message_gets_same_arguments(self):
        assert report("Is not a string: %s", "Expected a string. Got: %s", "integer") == (
            "Is not a string: integer"
        )
