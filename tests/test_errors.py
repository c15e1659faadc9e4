# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import errno
from pathlib import PurePosixPath

import pytest

from realparent import PathAccessError, RealPathError, SymlinkCycleError
from realparent.errors import path_context


def test_access_error_wraps_os_error():
    cause = FileNotFoundError(errno.ENOENT, "No such file or directory", "a/b")
    err = PathAccessError(cause, PurePosixPath("a/b"))

    assert isinstance(err, OSError)
    assert isinstance(err, RealPathError)
    assert err.errno == errno.ENOENT
    assert err.filename == "a/b"
    assert err.error is cause
    assert str(err) == f"{cause} on a/b"


def test_cycle_error():
    err = SymlinkCycleError(PurePosixPath("A/a1"))

    assert isinstance(err, OSError)
    assert not isinstance(err, PathAccessError)
    assert err.errno == errno.ELOOP
    assert err.path == PurePosixPath("A/a1")
    assert str(err) == "symlink cycle detected at A/a1"


def test_path_context_annotates_os_errors():
    with pytest.raises(PathAccessError) as excinfo:
        with path_context("some/where"):
            raise PermissionError(errno.EACCES, "Permission denied")
    assert excinfo.value.path == "some/where"
    assert excinfo.value.errno == errno.EACCES
    assert isinstance(excinfo.value.__cause__, PermissionError)


def test_path_context_keeps_existing_context():
    original = SymlinkCycleError("inner")
    with pytest.raises(SymlinkCycleError) as excinfo:
        with path_context("outer"):
            raise original
    assert excinfo.value is original


def test_path_context_ignores_other_exceptions():
    with pytest.raises(ValueError):
        with path_context("anywhere"):
            raise ValueError("not a filesystem problem")
