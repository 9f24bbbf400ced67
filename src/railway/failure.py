"""
Failure description — structured error information for the failure track.

A validation failure is data, not an exception: it carries the formatted
message produced where the check failed, plus a category code so callers
can branch on the kind of violation without parsing text.

Enum + frozen dataclass gives us __eq__, __hash__ and __repr__ for free,
and Enum members are singleton-comparable with `is`.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum, unique
from typing import Optional


@unique
class ErrorCode(Enum):
    """
    Failure categories produced by the predicate catalog.

    One code per predicate family, plus a generic VALIDATION_ERROR used
    when a Failure is built from a bare message.
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    """Generic failed check; default for Failure(message)."""

    TYPE_ERROR = "TYPE_ERROR"
    """Value is not of the expected type (string, integer, iterable...)."""

    VALUE_ERROR = "VALUE_ERROR"
    """Equality, identity, truthiness or membership check failed."""

    RANGE_ERROR = "RANGE_ERROR"
    """Numeric ordering or range check failed."""

    LENGTH_ERROR = "LENGTH_ERROR"
    """String length check failed."""

    FORMAT_ERROR = "FORMAT_ERROR"
    """Pattern, character-class or address format check failed."""

    COLLECTION_ERROR = "COLLECTION_ERROR"
    """Count, shape, key or uniqueness check on a collection failed."""

    FILESYSTEM_ERROR = "FILESYSTEM_ERROR"
    """Path existence or permission check failed."""

    REFLECTION_ERROR = "REFLECTION_ERROR"
    """Class, instance, attribute or method relationship check failed."""

    EXCEPTION_ERROR = "EXCEPTION_ERROR"
    """A callable did not raise the expected exception."""


@dataclass(frozen=True, slots=True)
class FailureDescription:
    """
    Immutable failure descriptor carrying error code, message, optional exception, and timestamp.

    >>> desc = FailureDescription(ErrorCode.TYPE_ERROR, "Expected a string. Got: integer")
    >>> desc.code
    <ErrorCode.TYPE_ERROR: 'TYPE_ERROR'>
    >>> desc.message
    'Expected a string. Got: integer'
    """

    code: ErrorCode
    message: str
    exception: Optional[BaseException] = field(default=None, repr=False)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    @staticmethod
    def create(
        code: ErrorCode,
        message: str,
        exception: Optional[BaseException] = None,
    ) -> FailureDescription:
        return FailureDescription(code=code, message=message, exception=exception)

    @staticmethod
    def of(message: str) -> FailureDescription:
        """Describe a generic validation failure from a bare message."""
        return FailureDescription(code=ErrorCode.VALIDATION_ERROR, message=message)

    def full_stack_trace(self) -> str:
        """Message followed by the formatted exception chain, if any."""
        if self.exception is None:
            return self.message
        tb = "".join(traceback.format_exception(type(self.exception), self.exception, self.exception.__traceback__))
        return f"{self.message}\n{tb}"
