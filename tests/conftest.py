# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
# pylint: disable=redefined-outer-name
import os
from pathlib import Path

import pytest

from realparent import InMemoryMetadataProvider, real_parent

# Naming for files and directories in the link farms is as follows:
# - directories are capitalised
# - files are lower-cased
# - symlinks have an underscore prefix


class LinkFarm:
    """A tree of files, directories and symlinks under a temporary directory."""

    def __init__(self, root: Path):
        self.root = root

    def absolute(self, path) -> Path:
        return self.root / path

    def contains(self, path) -> bool:
        path = Path(path)
        return path == self.root or self.root in path.parents

    def dir(self, path) -> "LinkFarm":
        self.absolute(path).mkdir()
        return self

    def file(self, path) -> "LinkFarm":
        self.absolute(path).write_text(str(path))
        return self

    # note the order of parameters is link first, like Path.symlink_to
    def symlink_rel(self, link, original) -> "LinkFarm":
        link = self.absolute(link)
        link.symlink_to(original, target_is_directory=(link.parent / original).is_dir())
        return self

    def symlink_abs(self, link, original) -> "LinkFarm":
        original = self.absolute(original)
        self.absolute(link).symlink_to(original, target_is_directory=original.is_dir())
        return self


@pytest.fixture
def link_farm(tmp_path):
    farm_dir = tmp_path / "farm"
    farm_dir.mkdir()
    return LinkFarm(farm_dir)


@pytest.fixture
def check_real_parent(monkeypatch, tmp_path):
    """Check real_parent() both with a relative path from inside the farm and with an
    absolute path from some other directory."""
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()

    def check(farm: LinkFarm, path, expected):
        monkeypatch.chdir(farm.root)
        actual = real_parent(path)
        assert actual == Path(expected), f"logical paths for {path!r}"
        assert os.path.realpath(actual) == os.path.realpath(expected), f"canonical paths for {path!r}"

        monkeypatch.chdir(elsewhere)
        abs_path = farm.absolute(path)
        abs_expected = farm.absolute(expected)
        actual = real_parent(abs_path)
        # once we ascend out of the farm the logical path isn't easy to predict,
        # so only the canonical version is compared
        if farm.contains(actual):
            assert actual == abs_expected, f"logical paths for {abs_path}"
        assert os.path.realpath(actual) == os.path.realpath(abs_expected), (
            f"canonical paths for {abs_path}"
        )

    return check


@pytest.fixture
def memfs():
    """The standard relative-symlink farm, simulated, with /farm as the current directory."""
    fs = InMemoryMetadataProvider()
    fs.add_dir("/farm").chdir("/farm")
    (
        fs.add_file("x")
        .add_dir("A")
        .add_dir("A/B")
        .add_dir("A/B/C")
        .add_dir("A/C")
        .add_file("A/a")
        .add_file("A/B/b")
        .add_symlink("_x", "x")
        .add_symlink("_B", "A/B")
        .add_symlink("A/_A", "..")
        .add_symlink("A/B/_A", "..")
        .add_symlink("A/B/_B", ".")
        .add_symlink("A/B/_b", "b")
        .add_symlink("A/B/_a", "../a")
        .add_symlink("A/B/C/_a", "../../a")
        .add_symlink("A/B/_C", "/farm/A/C")
    )
    return fs
