"""
Shared test fixtures for the rop-validator test suite.

Provides a Validator built from explicit settings (so a developer's
environment or .env file cannot change test outcomes) and a small file
tree for the file-system predicates.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from rop_validator.config import ValidatorSettings
from rop_validator.validator import Validator


def make_settings(**overrides) -> ValidatorSettings:
    """Settings independent of ROP_VALIDATOR_* variables and .env files."""
    return ValidatorSettings(_env_file=None, **overrides)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every ROP_VALIDATOR_* variable for the duration of a test."""
    for key in list(os.environ):
        if key.startswith("ROP_VALIDATOR_"):
            monkeypatch.delenv(key)


@pytest.fixture()
def validator(clean_env: None) -> Validator:
    return Validator(make_settings())


@pytest.fixture()
def file_tree(tmp_path: Path) -> dict[str, Path]:
    """A regular file, a directory and a path that does not exist."""
    regular = tmp_path / "data.txt"
    regular.write_text("hello", encoding="utf-8")
    folder = tmp_path / "folder"
    folder.mkdir()
    return {"file": regular, "dir": folder, "missing": tmp_path / "nope.txt"}
