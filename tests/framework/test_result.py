"""
Tests for the Result type.

Tests cover:
  - Success/Failure creation and introspection
  - map, flat_map, ensure and the Failure identity rule
  - Side effects (peek, peek_failure) and get_or_else
  - all_of
  - Pattern matching (match/case)
  - Equality and repr
"""

from __future__ import annotations

import pytest

from railway import ErrorCode, FailureDescription, Result, Success, Failure


# ═══════════════════════════════════════════════════════════════
# 1. Creation & Introspection
# ═══════════════════════════════════════════════════════════════


class TestSuccessCreation:
    def test_of_wraps_value(self):
        result = Success.of(42)
        assert result.is_success()
        assert not result.is_failure()
        assert result.value() == 42

    def test_of_accepts_none(self):
        result = Success.of(None)
        assert result.is_success()
        assert result.value() is None

    def test_result_success_factory(self):
        assert Result.success("hello").value() == "hello"

    def test_success_is_truthy(self):
        assert Success.of(0)
        assert bool(Success.of(""))

    def test_success_is_immutable(self):
        result = Success.of([1, 2])
        with pytest.raises(AttributeError):
            result._value = [3]  # type: ignore[misc]


class TestFailureCreation:
    def test_failure_from_message(self):
        result = Failure("Expected a string. Got: integer")
        assert result.is_failure()
        assert not result.is_success()
        assert result.message() == "Expected a string. Got: integer"
        assert result.error().code == ErrorCode.VALIDATION_ERROR

    def test_failure_from_description(self):
        desc = FailureDescription(ErrorCode.RANGE_ERROR, "too big")
        result = Failure(desc)
        assert result.error() is desc
        assert result.message() == "too big"

    def test_result_failure_factory_with_code(self):
        result = Result.failure("bad type", ErrorCode.TYPE_ERROR)
        assert result.error().code == ErrorCode.TYPE_ERROR

    def test_failure_rejects_none(self):
        with pytest.raises(TypeError, match="must not be None"):
            Failure(None)  # type: ignore[arg-type]

    def test_failure_is_falsy(self):
        assert not Failure("bad")


class TestValueExtraction:
    def test_value_on_failure_raises(self):
        with pytest.raises(ValueError, match="Cannot get value from a Failure"):
            Failure("missing").value()

    def test_error_on_success_raises(self):
        with pytest.raises(ValueError, match="Cannot get error from a Success"):
            Success.of(42).error()

    def test_message_on_success_raises(self):
        with pytest.raises(ValueError):
            Success.of(42).message()


# ═══════════════════════════════════════════════════════════════
# 2. Transformations
# ═══════════════════════════════════════════════════════════════


class TestMap:
    def test_map_transforms_success_value(self):
        assert Success.of(5).map(lambda x: x * 2).value() == 10

    def test_map_returns_same_failure(self):
        failure = Failure("bad")
        assert failure.map(lambda x: x * 2) is failure

    def test_map_chain(self):
        result = Success.of(3).map(lambda x: x + 1).map(lambda x: x * 2).map(str)
        assert result.value() == "8"


class TestFlatMap:
    def test_flat_map_chains_success(self):
        def double_if_positive(x: int) -> Result[int]:
            if x > 0:
                return Success.of(x * 2)
            return Failure("Must be positive")

        assert Success.of(5).flat_map(double_if_positive).value() == 10

    def test_flat_map_short_circuits_on_first_failure(self):
        calls: list[str] = []

        def step_a(x: int) -> Result[int]:
            calls.append("a")
            return Failure("fail at a")

        def step_b(x: int) -> Result[int]:
            calls.append("b")
            return Success.of(x + 1)

        result = Success.of(1).flat_map(step_a).flat_map(step_b)
        assert result.message() == "fail at a"
        assert calls == ["a"]

    def test_flat_map_returns_same_failure(self):
        failure = Failure("original")
        assert failure.flat_map(lambda v: Success.of(v)) is failure


class TestEnsure:
    def test_ensure_passes_when_predicate_true(self):
        assert Success.of(10).ensure(lambda x: x > 0, "Must be positive").value() == 10

    def test_ensure_fails_when_predicate_false(self):
        result = Success.of(-1).ensure(lambda x: x > 0, "Must be positive", ErrorCode.RANGE_ERROR)
        assert result.message() == "Must be positive"
        assert result.error().code == ErrorCode.RANGE_ERROR

    def test_ensure_keeps_existing_failure(self):
        failure = Failure("earlier")
        assert failure.ensure(lambda x: True, "unused") is failure


# ═══════════════════════════════════════════════════════════════
# 3. Either / Pattern Matching
# ═══════════════════════════════════════════════════════════════


class TestEither:
    def test_either_on_success(self):
        msg = Success.of("Alice").either(
            on_success=lambda name: f"Hello, {name}!",
            on_failure=lambda err: f"Error: {err.message}",
        )
        assert msg == "Hello, Alice!"

    def test_either_on_failure(self):
        msg = Failure("not a string").either(
            on_success=lambda v: f"Got: {v}",
            on_failure=lambda err: f"Error: {err.message}",
        )
        assert msg == "Error: not a string"


class TestPatternMatching:
    def test_match_success(self):
        match Success.of(42):
            case Success(v):
                assert v == 42
            case Failure(_):
                pytest.fail("Should be Success")

    def test_match_failure(self):
        match Failure(FailureDescription(ErrorCode.TYPE_ERROR, "bad")):
            case Success(_):
                pytest.fail("Should be Failure")
            case Failure(err):
                assert err.code == ErrorCode.TYPE_ERROR


# ═══════════════════════════════════════════════════════════════
# 4. Side Effects
# ═══════════════════════════════════════════════════════════════


class TestPeek:
    def test_peek_runs_on_success(self):
        seen: list[int] = []
        result = Success.of(42).peek(seen.append)
        assert seen == [42]
        assert result.value() == 42

    def test_peek_skipped_on_failure(self):
        seen: list[int] = []
        Failure("bad").peek(seen.append)
        assert seen == []

    def test_peek_failure_runs_on_failure(self):
        seen: list[str] = []
        failure = Failure("bad")
        assert failure.peek_failure(lambda e: seen.append(e.message)) is failure
        assert seen == ["bad"]

    def test_get_or_else(self):
        assert Success.of(1).get_or_else(0) == 1
        assert Failure("bad").get_or_else(0) == 0


# ═══════════════════════════════════════════════════════════════
# 5. all_of
# ═══════════════════════════════════════════════════════════════


class TestAllOf:
    def test_all_successes(self):
        combined = Result.all_of([Success.of(i) for i in range(5)])
        assert combined.value() == [0, 1, 2, 3, 4]

    def test_first_failure_is_returned_as_is(self):
        second = Failure("second fails")
        combined = Result.all_of([Success.of(1), second, Failure("third fails")])
        assert combined is second

    def test_stops_consuming_after_failure(self):
        produced: list[int] = []

        def results():
            for i in range(3):
                produced.append(i)
                yield Failure("stop") if i == 1 else Success.of(i)

        Result.all_of(results())
        assert produced == [0, 1]

    def test_empty_list(self):
        assert Result.all_of([]).value() == []


# ═══════════════════════════════════════════════════════════════
# 6. Equality & Repr
# ═══════════════════════════════════════════════════════════════


class TestEqualityAndRepr:
    def test_success_equality(self):
        assert Success.of(42) == Success.of(42)
        assert Success.of(42) != Success.of(99)

    def test_failure_equality_by_code_and_message(self):
        a = Result.failure("x", ErrorCode.TYPE_ERROR)
        b = Result.failure("x", ErrorCode.TYPE_ERROR)
        c = Result.failure("x", ErrorCode.VALUE_ERROR)
        assert a == b
        assert a != c

    def test_success_not_equal_to_failure(self):
        assert Success.of(42) != Failure("x")

    def test_repr_success(self):
        assert repr(Success.of("abc")) == "Success('abc')"

    def test_repr_failure(self):
        r = repr(Result.failure("gone", ErrorCode.COLLECTION_ERROR))
        assert "COLLECTION_ERROR" in r
        assert "gone" in r
