"""
File-system adapter — implements the FileSystemProbe port with pathlib and os.access.

Accepts str, bytes and os.PathLike paths. Anything else, or a path the OS
refuses to stat, is reported as "does not exist" rather than raised: the
catalog turns a False answer into a Failure, so OSError never reaches
the railway.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import structlog

log = structlog.get_logger()


class LocalFileSystemProbe:
    """Implements the FileSystemProbe port against the local file system."""

    def exists(self, path: Any) -> bool:
        return self._check(path, Path.exists)

    def is_file(self, path: Any) -> bool:
        return self._check(path, Path.is_file)

    def is_dir(self, path: Any) -> bool:
        return self._check(path, Path.is_dir)

    def is_readable(self, path: Any) -> bool:
        return self._check(path, lambda p: os.access(p, os.R_OK))

    def is_writable(self, path: Any) -> bool:
        return self._check(path, lambda p: os.access(p, os.W_OK))

    @staticmethod
    def _check(path: Any, probe: Any) -> bool:
        if isinstance(path, bytes):
            path = os.fsdecode(path)
        if not isinstance(path, (str, os.PathLike)) or path == "":
            return False
        try:
            return bool(probe(Path(path)))
        except (OSError, ValueError) as e:
            log.debug("filesystem.probe_failed", path=str(path), error=str(e))
            return False
