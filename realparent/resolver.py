# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import os
import pathlib
from typing import Optional, Set

from loguru import logger

from realparent.classify import PathKind, classify
from realparent.errors import PathArg, SymlinkCycleError, path_context
from realparent.providers import MetadataProvider, OsMetadataProvider

DOT = "."
DOTDOT = ".."


class RealPath:
    """Symlink-aware path arithmetic for a single top-level call.

    Symlinks are only dereferenced when the answer depends on them, so as much as possible
    of the relative and symlinked nature of the input survives in the result. Each
    dereferenced symlink is remembered, and meeting it again during the same call means
    the links form a cycle.

    A RealPath instance is not meant to be reused across calls or shared between threads;
    the public functions in realparent.pathext create a fresh one every time.

    Attributes:
        provider (MetadataProvider): Source of filesystem metadata.
        symlinks_visited (Set[pathlib.PurePath]): Symlinks dereferenced so far.
    """

    def __init__(self, provider: Optional[MetadataProvider] = None) -> None:
        self.provider = provider if provider is not None else OsMetadataProvider()
        self.symlinks_visited: Set[pathlib.PurePath] = set()

    def parent(self, path: PathArg) -> pathlib.PurePath:
        """Return the logical parent of path.

        Unlike ``PurePath.parent``:
          - the parent of ``..`` is ``../..``, not ``.``
          - the parent of a symlink is the parent of whatever it points to
          - the parent of the root is the root

        Raises:
            PathAccessError: If an entry on the way cannot be inspected.
            SymlinkCycleError: If the symlinks involved form a loop.
        """
        if os.fspath(path) == "":
            return self.provider.as_path(DOTDOT)

        path = self.provider.as_path(path)
        kind = classify(path, self.provider)
        # the parent of a symlink is the parent of whatever it ends up at
        while kind is PathKind.SYMLINK:
            path = self._dereference(path)
            kind = classify(path, self.provider)

        if kind is PathKind.DIRECTORY:
            return self._dir_parent(path)
        return self._file_parent(path)

    def _dereference(self, path: pathlib.PurePath) -> pathlib.PurePath:
        # twisty little symlinks, all alike
        if path in self.symlinks_visited:
            logger.debug("Symlink cycle detected at {}", path)
            raise SymlinkCycleError(path)
        self.symlinks_visited.add(path)

        with path_context(path):
            target = self.provider.read_link(path)
        logger.debug(
            "{} → {} ({})", path, target, "absolute" if target.anchor else "relative"
        )

        # a relative target only needs the directory containing the symlink
        return self.join(path.parent, target)

    def _dir_parent(self, path: pathlib.PurePath) -> pathlib.PurePath:
        if path.name not in ("", DOTDOT):
            return path.parent
        if not path.parts:
            # the current directory
            return self.provider.as_path(DOTDOT)
        if path.parts[-1] == DOTDOT:
            # dotdot in the base path is never folded away
            return path / DOTDOT
        # nothing but an anchor: the root is its own parent
        return path

    def _file_parent(self, path: pathlib.PurePath) -> pathlib.PurePath:
        return path.parent

    def join(self, base: PathArg, other: PathArg) -> pathlib.PurePath:
        """Append other to base, resolving each ``..`` in other with parent().

        An absolute other discards base and starts from its own anchor.
        """
        other = self.provider.as_path(other)
        if other.anchor:
            resolving = self.provider.as_path(other.anchor)
            relative = other.parts[1:]
        else:
            resolving = self.provider.as_path(base)
            relative = other.parts

        for part in relative:
            if part == DOT:
                continue
            assert not self.provider.as_path(part).anchor, (
                f"impossible absolute component {part!r} in relative part of path {other}"
            )
            if part == DOTDOT:
                resolving = self.parent(resolving)
            else:
                resolving = resolving / part
        return resolving

    def clean(self, path: PathArg) -> pathlib.PurePath:
        """Fold away ``..`` in path wherever the filesystem allows it."""
        return self.join("", path)
