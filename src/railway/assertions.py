"""
Assert helpers for validation Results.

Every helper raises AssertionError naming the variant, code and message
it actually saw, so a failing check reads without a debugger:

    ResultAssertions.assert_failure(string(42), ErrorCode.TYPE_ERROR)
    ResultAssertions.assert_failure_message_equals(string(42), "Expected a string. Got: integer")
    ResultAssertions.assert_success_value(string("Alice"), "Alice")
    ResultAssertions.assert_passthrough(earlier, bind(string)(earlier))
"""

from __future__ import annotations

from typing import Any, TypeVar

from railway.failure import ErrorCode, FailureDescription
from railway.result import Failure, Result, Success

T = TypeVar("T")


def _show(result: Result[Any]) -> str:
    match result:
        case Success(value):
            return f"Success({value!r})"
        case Failure(error):
            return f"Failure({error.code.value}: {error.message!r})"
    return repr(result)


def _suffix(note: str) -> str:
    return f" ({note})" if note else ""


class ResultAssertions:
    """Static assert helpers for Success/Failure values."""

    @staticmethod
    def assert_success(result: Result[T], message: str = "") -> T:
        """Return the payload of a Success; ``message`` is appended on error."""
        assert result.is_success(), f"Expected Success but got {_show(result)}{_suffix(message)}"
        return result.value()

    @staticmethod
    def assert_failure(
        result: Result[T],
        expected_code: ErrorCode | None = None,
        message: str = "",
    ) -> FailureDescription:
        """
        Return the FailureDescription of a Failure.

        With ``expected_code`` the code must match as well:

            error = ResultAssertions.assert_failure(result, ErrorCode.RANGE_ERROR)
            assert "between" in error.message
        """
        assert result.is_failure(), f"Expected Failure but got {_show(result)}{_suffix(message)}"
        error = result.error()
        if expected_code is not None and error.code != expected_code:
            raise AssertionError(
                f"Expected error code {expected_code.value} instead of {_show(result)}{_suffix(message)}"
            )
        return error

    @staticmethod
    def assert_failure_message_contains(result: Result[T], substring: str) -> None:
        """Substring check, ignoring case."""
        text = ResultAssertions.assert_failure(result).message
        assert substring.lower() in text.lower(), (
            f"Expected failure message to contain {substring!r}, message is {text!r}"
        )

    @staticmethod
    def assert_failure_message_equals(result: Result[T], expected_message: str) -> None:
        text = ResultAssertions.assert_failure(result).message
        assert text == expected_message, f"Expected failure message {expected_message!r}, message is {text!r}"

    @staticmethod
    def assert_success_value(result: Result[T], expected_value: Any) -> None:
        value = ResultAssertions.assert_success(result)
        assert value == expected_value, f"Expected success value {expected_value!r} instead of {value!r}"

    @staticmethod
    def assert_passthrough(before: Result[T], after: Result[Any]) -> None:
        """
        A Failure handed to a step must come back as the identical object.

        Equality is not enough, since Failures compare on code and message only.
        """
        assert before.is_failure(), f"Expected a Failure input but got {_show(before)}"
        assert after is before, f"Expected {_show(before)} to pass through unchanged, got {_show(after)}"
