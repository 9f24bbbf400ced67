"""
Unit tests for the file-system predicates.

Real paths come from the ``file_tree`` fixture (tmp_path); the probe port
is replaced by a MagicMock where the answer matters more than the disk.
"""

from __future__ import annotations

import os
from unittest.mock import MagicMock

import pytest
from railway import ErrorCode, ResultAssertions

from rop_validator.catalog.filesystem import directory, file, file_exists, readable, writable


def _make_probe(**answers: bool) -> MagicMock:
    """Create a mock FileSystemProbe; unspecified questions answer True."""
    probe = MagicMock()
    for method in ("exists", "is_file", "is_dir", "is_readable", "is_writable"):
        getattr(probe, method).return_value = answers.get(method, True)
    return probe


class TestLocalPaths:
    def test_file_exists_for_file_and_directory(self, file_tree):
        assert file_exists(file_tree["file"]).is_success()
        assert file_exists(str(file_tree["dir"])).is_success()

    def test_missing_path(self, file_tree):
        result = file_exists(file_tree["missing"])
        ResultAssertions.assert_failure(result, ErrorCode.FILESYSTEM_ERROR)
        ResultAssertions.assert_failure_message_equals(
            result, f'The file "{os.fspath(file_tree["missing"])}" does not exist.'
        )

    def test_file(self, file_tree):
        ResultAssertions.assert_success_value(file(file_tree["file"]), file_tree["file"])
        ResultAssertions.assert_failure_message_contains(file(file_tree["dir"]), "is not a file")

    def test_file_on_missing_path_reports_missing(self, file_tree):
        ResultAssertions.assert_failure_message_contains(file(file_tree["missing"]), "does not exist")

    def test_directory(self, file_tree):
        assert directory(file_tree["dir"]).is_success()
        ResultAssertions.assert_failure_message_contains(directory(file_tree["file"]), "is no directory")

    def test_readable_and_writable(self, file_tree):
        assert readable(file_tree["file"]).is_success()
        assert writable(file_tree["dir"]).is_success()
        assert readable(file_tree["missing"]).is_failure()

    @pytest.mark.parametrize("value", [None, 42, ""])
    def test_non_paths_fail(self, value):
        ResultAssertions.assert_failure(file_exists(value), ErrorCode.FILESYSTEM_ERROR)


class TestInjectedProbe:
    def test_probe_is_consulted(self):
        probe = _make_probe(is_writable=False)
        result = writable("/srv/data", probe=probe)
        ResultAssertions.assert_failure_message_equals(result, 'The path "/srv/data" is not writable.')
        probe.is_writable.assert_called_once_with("/srv/data")

    def test_directory_checks_existence_first(self):
        """
        GIVEN a probe reporting the path missing
        WHEN directory is checked
        THEN the existence failure is returned and is_dir is never asked.
        """
        probe = _make_probe(exists=False)
        result = directory("/nowhere", probe=probe)
        ResultAssertions.assert_failure_message_equals(result, 'The file "/nowhere" does not exist.')
        probe.is_dir.assert_not_called()

    def test_custom_message(self):
        probe = _make_probe(is_readable=False)
        result = readable("/etc/shadow", "Cannot read %s", probe=probe)
        ResultAssertions.assert_failure_message_equals(result, 'Cannot read "/etc/shadow"')
