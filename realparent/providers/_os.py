# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import os
import pathlib
import stat

from realparent.classify import PathKind

from ._base import MetadataProvider


class OsMetadataProvider(MetadataProvider):
    """Metadata provider backed by the live filesystem of the running host."""

    path_type = pathlib.Path

    def symlink_kind(self, path: pathlib.PurePath) -> PathKind:
        # lstat() does not follow symbolic links
        fstats = os.lstat(path)
        if stat.S_ISLNK(fstats.st_mode):
            return PathKind.SYMLINK
        if stat.S_ISDIR(fstats.st_mode):
            return PathKind.DIRECTORY
        return PathKind.FILE

    def read_link(self, path: pathlib.PurePath) -> pathlib.PurePath:
        return self.path_type(os.readlink(path))

    def canonicalize(self, path: pathlib.PurePath) -> pathlib.PurePath:
        # strict mode raises instead of inventing the missing tail, and reports loops as ELOOP
        return self.path_type(os.path.realpath(path, strict=True))
