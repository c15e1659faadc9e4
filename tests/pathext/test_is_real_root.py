# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import errno
import os

import pytest

from realparent import PathAccessError, is_real_root

pytestmark = pytest.mark.skipif(os.name != "posix", reason="requires POSIX OS")


def test_root_is_root():
    assert is_real_root("/")
    assert is_real_root("//")
    assert is_real_root("/..")
    assert is_real_root("/../..")


def test_empty_path_is_current_directory(monkeypatch):
    monkeypatch.chdir("/")
    assert is_real_root("")
    assert is_real_root(".")


def test_relative_path_to_root(link_farm, monkeypatch):
    monkeypatch.chdir(link_farm.root)
    depth = len(link_farm.root.resolve().parts) - 1

    assert not is_real_root("")
    assert not is_real_root("/".join([".."] * (depth - 1)))
    assert is_real_root("/".join([".."] * depth))
    assert is_real_root("/".join([".."] * (depth + 3)))


def test_symlinks_to_root(link_farm, monkeypatch):
    link_farm.dir("A").symlink_rel("_root", "/").symlink_rel("A/_root", "../_root")
    monkeypatch.chdir(link_farm.root)

    assert is_real_root("_root")
    assert is_real_root("A/_root")
    assert not is_real_root("A")
    assert not is_real_root(link_farm.absolute("A"))


def test_missing_path(link_farm):
    with pytest.raises(PathAccessError) as excinfo:
        is_real_root(link_farm.absolute("missing"))
    assert excinfo.value.errno == errno.ENOENT


def test_symlink_loop_is_an_access_error(link_farm):
    link_farm.symlink_rel("l1", "l2").symlink_rel("l2", "l1")

    with pytest.raises(PathAccessError) as excinfo:
        is_real_root(link_farm.absolute("l1"))
    assert excinfo.value.errno == errno.ELOOP
