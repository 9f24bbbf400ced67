"""
Result — the two-track outcome type every validation step returns.

A Result[T] is either Success(value: T) or Failure(error: FailureDescription).
Predicates return Result, never raise. Once a value leaves the success
track it stays off it: every transformation called on a Failure hands back
that very Failure object, unchanged.

    ┌───────────┐   flat_map    ┌───────────┐   flat_map    ┌──────────┐
    │  string   │──Success──────│ min_length│──Success──────│  regex   │──→ Result[T]
    │           │               │           │               │          │
    └─────┬─────┘               └─────┬─────┘               └─────┬────┘
          │ Failure                   │ Failure                   │ Failure
          └───────────────────────────┴───────────────────────────┴──→ same Failure

Design choices:
  - frozen dataclasses for the two variants, match/case for dispatch
  - Success accepts any value, None included (null-skipping checks need it)
  - Failure accepts a bare message or a full FailureDescription
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    List,
    TypeVar,
)

from railway.failure import ErrorCode, FailureDescription

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


class Result(Generic[T]):
    """
    Railway-Oriented Programming Result.

    Two possible states:
      - Success(value: T)  — the happy path
      - Failure(error: FailureDescription) — the error track

    Usage:
        >>> Success.of("abc").value()
        'abc'

        >>> result = Failure("Expected a string. Got: integer")
        >>> result.map(str.upper) is result
        True
    """

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def value(self) -> T:
        """
        Extract the success value. Raises ValueError if called on a Failure.

        Prefer .either() or match/case for safe access.
        """
        match self:
            case Success(v):
                return v
            case Failure(err):
                raise ValueError(f"Cannot get value from a Failure: {err.message}")
        raise TypeError("unreachable")  # pragma: no cover

    def error(self) -> FailureDescription:
        """Extract the failure description. Raises ValueError if called on a Success."""
        match self:
            case Failure(err):
                return err
            case Success(v):
                raise ValueError(f"Cannot get error from a Success: {v!r}")
        raise TypeError("unreachable")  # pragma: no cover

    def message(self) -> str:
        """Extract the failure message. Raises ValueError if called on a Success."""
        return self.error().message

    # ──────────────────────── Core Transformations ────────────────────────

    def either(
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[FailureDescription], R],
    ) -> R:
        """
        Apply one of two functions depending on the state.

            result.either(
                on_success=lambda name: f"Hello {name}",
                on_failure=lambda err: f"Error: {err.message}",
            )
        """
        match self:
            case Success(v):
                return on_success(v)
            case Failure(err):
                return on_failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def map(self, mapper: Callable[[T], U]) -> Result[U]:
        """
        Transform the success value. A Failure is returned as is.

            Success.of(" abc ").map(str.strip)  # → Success('abc')
        """
        match self:
            case Success(v):
                return Success(mapper(v))
        return self  # type: ignore[return-value]

    def flat_map(self, mapper: Callable[[T], Result[U]]) -> Result[U]:
        """
        Chain a Result-returning function. A Failure is returned as is.

        This is the bind of the railway; railway.binding builds its
        Result -> Result steps on top of it.

            Success.of("abc").flat_map(string)   # → Success('abc')
            Success.of(123).flat_map(string)     # → Failure(TYPE_ERROR: ...)
        """
        match self:
            case Success(v):
                return mapper(v)
        return self  # type: ignore[return-value]

    def ensure(
        self,
        predicate: Callable[[T], bool],
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
    ) -> Result[T]:
        """
        Validate the success value against a boolean condition.

            Success.of(10).ensure(lambda x: x > 0, "Must be positive")
        """
        return self.flat_map(
            lambda v: self if predicate(v) else Failure(FailureDescription(code, message))
        )

    # ──────────────────────── Side Effects ────────────────────────

    def peek(self, action: Callable[[T], Any]) -> Result[T]:
        """Run a side effect on the success value, return self unchanged."""
        match self:
            case Success(v):
                action(v)
        return self

    def peek_failure(self, action: Callable[[FailureDescription], Any]) -> Result[T]:
        """Run a side effect on the failure description, return self unchanged."""
        match self:
            case Failure(err):
                action(err)
        return self

    def get_or_else(self, default: T) -> T:
        match self:
            case Success(v):
                return v
            case _:
                return default

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def success(value: T) -> Result[T]:
        return Success(value)

    @staticmethod
    def failure(message: str, code: ErrorCode = ErrorCode.VALIDATION_ERROR) -> Result[T]:
        """
        Create a failed Result from a message and an optional category.

            Result.failure("Expected a string. Got: integer", ErrorCode.TYPE_ERROR)
        """
        return Failure(FailureDescription(code=code, message=message))

    @staticmethod
    def failure_from(error: FailureDescription) -> Result[T]:
        return Failure(error)

    @staticmethod
    def all_of(results: Iterable[Result[T]]) -> Result[List[T]]:
        """
        Collect Results into a Result of list.

        Consumes the iterable lazily and stops at the first Failure, which
        is returned as is. Otherwise Success with all values in order.
        """
        values: list[T] = []
        for r in results:
            match r:
                case Success(v):
                    values.append(v)
                case Failure(_):
                    return r  # type: ignore[return-value]
        return Success(values)

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Truthy only on Success, so `if result:` reads naturally."""
        return self.is_success()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        match (self, other):
            case (Success(a), Success(b)):
                return a == b
            case (Failure(a), Failure(b)):
                return a.code == b.code and a.message == b.message
            case _:
                return False


@dataclass(frozen=True, slots=True)
class Success(Result[T]):
    """The success track — wraps a value of type T."""

    _value: T

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", value)

    @classmethod
    def of(cls, value: T) -> Success[T]:
        """Lift a raw value onto the success track. Never fails."""
        return cls(value)

    def __repr__(self) -> str:
        return f"Success({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Success):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Success", self._value))


# Enable structural pattern matching: case Success(value)
Success.__match_args__ = ("_value",)


@dataclass(frozen=True, slots=True)
class Failure(Result[T]):
    """The failure track — wraps a FailureDescription."""

    _error: FailureDescription

    def __init__(self, error: FailureDescription | str) -> None:
        if error is None:
            raise TypeError("Failure error must not be None")
        if isinstance(error, str):
            error = FailureDescription.of(error)
        object.__setattr__(self, "_error", error)

    def __repr__(self) -> str:
        return f"Failure({self._error.code.value}: {self._error.message!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Failure):
            return self._error.code == other._error.code and self._error.message == other._error.message
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Failure", self._error.code, self._error.message))


# Enable structural pattern matching: case Failure(error)
Failure.__match_args__ = ("_error",)
