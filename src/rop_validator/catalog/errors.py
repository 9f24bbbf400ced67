"""
Exception predicate — does a callable raise what it should?

``throws`` runs the zero-argument callable under test. Raising the expected
exception class, or a subclass, is the success; raising something else or
returning normally is a Failure. An unexpected exception that is not an
``Exception`` (KeyboardInterrupt, SystemExit, ...) is re-raised untouched
unless it is exactly what was asked for.
"""

from __future__ import annotations

from typing import Any, Callable

from railway.result import Result, Success
from railway.result_failures import ResultFailures

from rop_validator.catalog.types import is_callable
from rop_validator.messages import report

__all__ = ["throws"]


def throws(
    value: Callable[[], Any],
    error_class: type[BaseException] | str = Exception,
    message: str = "",
) -> Result:
    """
    Pass when calling ``value()`` raises ``error_class``.

    A string in the ``error_class`` slot is the message, and any
    ``Exception`` is expected. That is the shape a bound step calls with,
    so ``create("throws")`` and ``create("throws", msg)`` both work.

    >>> throws(lambda: int("x"), ValueError).is_success()
    True
    >>> throws(lambda: 42, ValueError).message()
    'Expected to throw "ValueError".'
    >>> throws(lambda: 42, "must raise %s").message()
    'must raise Exception'
    """
    if isinstance(error_class, str):
        error_class, message = Exception, error_class
    if not (isinstance(error_class, type) and issubclass(error_class, BaseException)):
        raise TypeError(f"throws expects an exception class, got {error_class!r}")
    return is_callable(value, message).flat_map(lambda fn: _run(fn, error_class, message))


def _run(fn: Callable[[], Any], error_class: type[BaseException], message: str) -> Result:
    expected = error_class.__name__
    try:
        fn()
    except BaseException as e:
        if isinstance(e, error_class):
            return Success.of(fn)
        if not isinstance(e, Exception):
            raise
        return ResultFailures.exception_error(
            report(message, 'Expected to throw "%s", got "%s"', expected, type(e).__name__),
            e,
        )
    return ResultFailures.exception_error(report(message, 'Expected to throw "%s".', expected, "none"))