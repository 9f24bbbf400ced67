"""
Railway-Oriented Programming (ROP) core for value validation.

Validation failures are data, never exceptions. Checks are plain
functions returning Result; the combinators here lift them onto the
railway and chain them.

    from railway import Success, bind, bind3, compose

    pipeline = compose(
        bind(string),
        bind3(length_between, 3, 40),
    )
    pipeline(Success.of("Alice"))   # → Success('Alice')
"""

from railway.result import Result, Success, Failure
from railway.failure import ErrorCode, FailureDescription
from railway.binding import (
    CopyPolicy,
    Step,
    bind,
    bind2,
    bind3,
    bind_n,
    compose,
    lift,
)
from railway.result_failures import ResultFailures
from railway.assertions import ResultAssertions

__all__ = [
    "Result",
    "Success",
    "Failure",
    "ErrorCode",
    "FailureDescription",
    "CopyPolicy",
    "Step",
    "bind",
    "bind2",
    "bind3",
    "bind_n",
    "compose",
    "lift",
    "ResultFailures",
    "ResultAssertions",
]

__version__ = "1.0.0"
