"""
File-system predicates — thin wrappers over the FileSystemProbe port.

Each takes the probe as a keyword-only ``probe`` argument, defaulting to the
local file system. The Validator facade injects its own probe.
"""

from __future__ import annotations

import os
from typing import Any

from railway.result import Result, Success
from railway.result_failures import ResultFailures

from rop_validator.adapters.filesystem import LocalFileSystemProbe
from rop_validator.domain.ports import FileSystemProbe
from rop_validator.messages import report, value_to_string

_LOCAL = LocalFileSystemProbe()

__all__ = ["file_exists", "file", "directory", "readable", "writable"]


def _path(value: Any) -> str:
    if isinstance(value, os.PathLike):
        return value_to_string(os.fspath(value))
    return value_to_string(value)


def file_exists(value: Any, message: str = "", *, probe: FileSystemProbe = _LOCAL) -> Result:
    """The path exists, whether file, directory or anything else."""
    if not probe.exists(value):
        return ResultFailures.filesystem_error(
            report(message, "The file %s does not exist.", _path(value))
        )
    return Success.of(value)


def file(value: Any, message: str = "", *, probe: FileSystemProbe = _LOCAL) -> Result:
    """The path exists and is a regular file."""
    return file_exists(value, message, probe=probe).flat_map(
        lambda path: Success.of(path)
        if probe.is_file(path)
        else ResultFailures.filesystem_error(report(message, "The path %s is not a file.", _path(path)))
    )


def directory(value: Any, message: str = "", *, probe: FileSystemProbe = _LOCAL) -> Result:
    return file_exists(value, message, probe=probe).flat_map(
        lambda path: Success.of(path)
        if probe.is_dir(path)
        else ResultFailures.filesystem_error(report(message, "The path %s is no directory.", _path(path)))
    )


def readable(value: Any, message: str = "", *, probe: FileSystemProbe = _LOCAL) -> Result:
    if not probe.is_readable(value):
        return ResultFailures.filesystem_error(
            report(message, "The path %s is not readable.", _path(value))
        )
    return Success.of(value)


def writable(value: Any, message: str = "", *, probe: FileSystemProbe = _LOCAL) -> Result:
    if not probe.is_writable(value):
        return ResultFailures.filesystem_error(
            report(message, "The path %s is not writable.", _path(value))
        )
    return Success.of(value)
