"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings so a deployment can decide, without code changes:
  - how much compose isolates object inputs (copy policy)
  - which reading of the all_* prefix dispatch applies
  - whether Validator steps log every Failure they produce
  - the log level of the demonstration entry point

Environment variables carry the ROP_VALIDATOR_ prefix:
ROP_VALIDATOR_COPY_POLICY=deep, ROP_VALIDATOR_ALL_MODE=first, ...
Invalid values fail at construction, not at validation time.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from railway.binding import CopyPolicy

# Resolve the .env file relative to the project root (two levels above this file),
# so settings load correctly regardless of the working directory at runtime.
_ENV_FILE = Path(__file__).parent.parent.parent / ".env"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ValidatorSettings(BaseSettings):
    """
    Settings of a Validator facade.

    Load order (highest priority first):
      1. Constructor arguments
      2. Environment variables
      3. .env file
      4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="ROP_VALIDATOR_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    copy_policy: CopyPolicy = Field(
        default=CopyPolicy.SHALLOW,
        description="How compose copies an object input before the first step: none, shallow or deep",
    )
    all_mode: Literal["every", "first"] = Field(
        default="every",
        description="all_* dispatch: check every element, or only the first one",
    )
    log_failures: bool = Field(
        default=False,
        description="Emit a validator.failure debug event for each Failure a predicate returns",
    )
    log_level: str = Field(default="INFO", description="Log level of the demonstration entry point")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept the standard logging level names, case-insensitively."""
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}")
        return level

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)
