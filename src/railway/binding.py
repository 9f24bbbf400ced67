"""
Railway combinators — lift plain validation functions onto the two tracks.

A predicate has the shape ``(value, *params, message='') -> Result``. It
knows nothing about Result inputs. ``bind`` turns it into a step of shape
``Result -> Result`` that:

  - returns a Failure input as is (same object, predicate never called)
  - calls the predicate with the unwrapped value of a Success input

``compose`` threads an input through any number of such steps, left to
right. The first Failure rides the failure track to the end untouched.

    pipeline = compose(
        bind(string, "Name must be text"),
        bind2(min_length, 3),
        bind3(length_between, 3, 40),
    )
    pipeline(Success.of("Alice"))   # → Success('Alice')
    pipeline(Success.of(42))        # → Failure(TYPE_ERROR: 'Name must be text')
"""

from __future__ import annotations

import copy
from collections.abc import Iterator
from enum import Enum
from typing import Any, Callable, TypeVar

from railway.result import Result, Success

T = TypeVar("T")

Step = Callable[[Result[Any]], Result[Any]]

_IMMUTABLE_SCALARS = (str, bytes, int, float, complex, bool, type(None), frozenset)


class CopyPolicy(str, Enum):
    """
    How compose isolates an object payload from the caller before the first step.

      - NONE:    steps see the caller's object itself
      - SHALLOW: steps see copy.copy(payload); nested objects stay shared
      - DEEP:    steps see copy.deepcopy(payload); nothing is shared
    """

    NONE = "none"
    SHALLOW = "shallow"
    DEEP = "deep"


def _require_result(param: Any) -> Result[Any]:
    if not isinstance(param, Result):
        raise TypeError(
            f"A bound step expects a Result, got {type(param).__name__}; "
            f"lift raw values with Success.of() or use compose()"
        )
    return param


def bind_n(predicate: Callable[..., Result[Any]], *args: Any, message: str = "") -> Step:
    """
    Bind a predicate taking any number of fixed arguments after the value.

    The extra arguments are passed through unchanged, between the unwrapped
    value and the message: ``predicate(value, *args, message)``.
    """

    def step(param: Result[Any]) -> Result[Any]:
        return _require_result(param).flat_map(lambda value: predicate(value, *args, message))

    step.__name__ = f"bound_{getattr(predicate, '__name__', 'predicate')}"
    step.__doc__ = predicate.__doc__
    return step


def bind(predicate: Callable[..., Result[Any]], message: str = "") -> Step:
    """
    Lift ``predicate(value, message)`` into a ``Result -> Result`` step.

        step = bind(string, "Expected text, got %s")
        step(Success.of("abc"))             # → Success('abc')
        failure = Failure("earlier problem")
        step(failure) is failure            # → True
    """
    return bind_n(predicate, message=message)


def bind2(predicate: Callable[..., Result[Any]], arg: Any, message: str = "") -> Step:
    """Lift ``predicate(value, arg, message)``; ``arg`` is fixed at bind time."""
    return bind_n(predicate, arg, message=message)


def bind3(predicate: Callable[..., Result[Any]], arg1: Any, arg2: Any, message: str = "") -> Step:
    """Lift ``predicate(value, arg1, arg2, message)``; both extra arguments are fixed at bind time."""
    return bind_n(predicate, arg1, arg2, message=message)


def isolate(payload: T, policy: CopyPolicy) -> T:
    """
    Copy ``payload`` according to ``policy``.

    Immutable scalars and iterators are returned as is, and so is any
    object the copy module refuses (locks, sockets, open files).
    """
    if policy is CopyPolicy.NONE or isinstance(payload, (*_IMMUTABLE_SCALARS, Iterator)):
        return payload
    try:
        if policy is CopyPolicy.DEEP:
            return copy.deepcopy(payload)
        return copy.copy(payload)
    except (TypeError, copy.Error):
        return payload


def lift(value: Any, policy: CopyPolicy = CopyPolicy.SHALLOW) -> Result[Any]:
    """
    Put a compose input on the railway.

    A raw value becomes Success.of(copy); a Success gets its payload copied;
    a Failure is returned as is.
    """
    match value:
        case Success(payload):
            isolated = isolate(payload, policy)
            return value if isolated is payload else Success.of(isolated)
        case Result():
            return value
    return Success.of(isolate(value, policy))


def compose(*steps: Step, copy_policy: CopyPolicy = CopyPolicy.SHALLOW) -> Step:
    """
    Sequence steps into a single ``Result -> Result`` pipeline.

    Execution order is declaration order:
    ``compose(s1, s2, s3)(x) == s3(s2(s1(x)))``.

    The input may be raw or already lifted; see ``lift`` for how it is put
    on the railway and ``CopyPolicy`` for what is copied.
    """

    def pipeline(param: Any) -> Result[Any]:
        result = lift(param, copy_policy)
        for step in steps:
            result = step(result)
        return result

    return pipeline
