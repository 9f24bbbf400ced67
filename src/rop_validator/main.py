"""
Demonstration entry point — wires settings, logging and a Validator and
runs a few pipelines, logging each outcome.

    python -m rop_validator
    ROP_VALIDATOR_LOG_LEVEL=DEBUG ROP_VALIDATOR_LOG_FAILURES=true rop-validator-demo

Responsibilities:
  1. Load and validate settings from the environment
  2. Configure structlog (the library itself never configures logging)
  3. Build the Validator and the demonstration pipelines
  4. Run them and log the results
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from railway.binding import Step
from railway.result import Result, Success

from rop_validator.config import ValidatorSettings
from rop_validator.validator import Validator


def configure_structlog(log_level: str = "INFO") -> None:
    """
    Configure structlog for human-readable console output.

    Unknown level names fall back to INFO.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def demo_pipelines(validator: Validator) -> list[tuple[str, Step, Any]]:
    """
    The demonstration cases as (label, pipeline, input) triples.

    The first three are the classic railway cases: a type check that
    fails, a check that passes, and a failure that the next stage passes
    through untouched.
    """
    v = validator
    username = v.compose(
        v.create("string", "Username must be text, got %s"),
        v.create3("length_between", 3, 16),
        v.create2("regex", r"^[a-z][a-z0-9_]*$", "Username %s has invalid characters"),
    )
    return [
        ("invalid string", v.compose(v.create_string()), Success.of(123)),
        ("string not empty", v.compose(v.create("string_not_empty", "String must not be empty")), Success.of("abc")),
        (
            "string not empty and not string",
            v.compose(v.create_string(), v.create("string_not_empty", "Dude, what were you thinking?")),
            Success.of(123),
        ),
        ("username ok", username, "ada_lovelace"),
        ("username too short", username, "al"),
        ("ports in range", v.compose(v.create3("all_range", 1, 65535)), [22, 80, 70000]),
        ("optional uuid", v.compose(v.create("null_or_uuid")), None),
    ]


def run_demo(validator: Validator) -> list[tuple[str, Result]]:
    log = structlog.get_logger()
    outcomes: list[tuple[str, Result]] = []
    for label, pipeline, value in demo_pipelines(validator):
        result = pipeline(value)
        result.either(
            lambda ok, label=label: log.info("demo.success", case=label, value=ok),
            lambda err, label=label: log.info("demo.failure", case=label, code=err.code.value, message=err.message),
        )
        outcomes.append((label, result))
    return outcomes


def main() -> None:
    """Load settings, configure logging and run the demonstration pipelines."""
    try:
        settings = ValidatorSettings()
    except Exception as e:
        print(f"FATAL: Configuration error — {e}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    configure_structlog(settings.log_level)
    log = structlog.get_logger()
    log.info(
        "demo.starting",
        copy_policy=settings.copy_policy.value,
        all_mode=settings.all_mode,
        log_failures=settings.log_failures,
    )

    outcomes = run_demo(Validator(settings))
    failures = sum(1 for _, result in outcomes if result.is_failure())
    log.info("demo.finished", cases=len(outcomes), failures=failures)


if __name__ == "__main__":
    main()
