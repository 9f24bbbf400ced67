"""
Convenience factory methods for the failure categories of the catalog.

Usage:
    from railway.result_failures import ResultFailures

    # Instead of:
    Failure(FailureDescription(ErrorCode.TYPE_ERROR, "Expected a string. Got: integer"))

    # Write:
    ResultFailures.type_error("Expected a string. Got: integer")
"""

from __future__ import annotations

from railway.failure import ErrorCode, FailureDescription
from railway.result import Failure, Result


class ResultFailures:
    """Factory methods, one per ErrorCode the predicate catalog produces."""

    @staticmethod
    def validation_error(message: str) -> Result:
        return Failure(FailureDescription(ErrorCode.VALIDATION_ERROR, message))

    @staticmethod
    def type_error(message: str) -> Result:
        """Value is not of the expected type."""
        return Failure(FailureDescription(ErrorCode.TYPE_ERROR, message))

    @staticmethod
    def value_error(message: str) -> Result:
        """Equality, identity, truthiness or membership mismatch."""
        return Failure(FailureDescription(ErrorCode.VALUE_ERROR, message))

    @staticmethod
    def range_error(message: str) -> Result:
        """Ordering or range violation."""
        return Failure(FailureDescription(ErrorCode.RANGE_ERROR, message))

    @staticmethod
    def length_error(message: str) -> Result:
        return Failure(FailureDescription(ErrorCode.LENGTH_ERROR, message))

    @staticmethod
    def format_error(message: str) -> Result:
        """Pattern, character class or address format mismatch."""
        return Failure(FailureDescription(ErrorCode.FORMAT_ERROR, message))

    @staticmethod
    def collection_error(message: str) -> Result:
        """Count, shape, key or uniqueness violation."""
        return Failure(FailureDescription(ErrorCode.COLLECTION_ERROR, message))

    @staticmethod
    def filesystem_error(message: str) -> Result:
        return Failure(FailureDescription(ErrorCode.FILESYSTEM_ERROR, message))

    @staticmethod
    def reflection_error(message: str) -> Result:
        return Failure(FailureDescription(ErrorCode.REFLECTION_ERROR, message))

    @staticmethod
    def exception_error(message: str, exception: BaseException | None = None) -> Result:
        """
        A probed callable raised the wrong exception, or none at all.

        The unexpected exception, when there is one, rides along on the
        FailureDescription so full_stack_trace() can show it.
        """
        return Failure(FailureDescription(ErrorCode.EXCEPTION_ERROR, message, exception))
