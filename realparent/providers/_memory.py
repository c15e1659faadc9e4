# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import errno
import os
import pathlib
import posixpath
from collections import deque
from typing import Any

import networkx as nx
from loguru import logger

from realparent.classify import PathKind
from realparent.errors import PathArg

from ._base import MetadataProvider

# Linux MAXSYMLINKS
MAX_SYMLINK_HOPS = 40

ROOT = "/"


def _oserror(code: int, path: Any) -> OSError:
    # OSError() picks the matching subclass (FileNotFoundError, NotADirectoryError, ...)
    return OSError(code, os.strerror(code), str(path))


class InMemoryMetadataProvider(MetadataProvider):
    """A simulated POSIX directory tree, for exercising the resolver without touching disk.

    Entries live in a NetworkX DiGraph. Each node is keyed by its absolute path and carries
    a ``kind`` (PathKind), a ``path`` attribute with the path as it was created, and for
    symlinks the stored ``target``. Edges run from a directory to each of its children.

    Lookups walk the graph the way a kernel does: symlinks in intermediate components are
    followed, ``..`` steps to the physical parent of wherever the walk currently is, and a
    walk that follows more than MAX_SYMLINK_HOPS links fails with ELOOP.

    Attributes:
        graph (nx.DiGraph): The simulated filesystem.
        cwd (pathlib.PurePosixPath): Directory that relative paths are looked up from.
        case_sensitive (bool): When False, names match regardless of case (like the default
            filesystems on Windows and macOS); the case used at creation is preserved.

    Example:
        >>> fs = InMemoryMetadataProvider().add_dir("A").add_file("A/a").add_symlink("_A", "A")
        >>> fs.canonicalize(fs.as_path("_A/a"))
        PurePosixPath('/A/a')
    """

    path_type = pathlib.PurePosixPath

    def __init__(self, case_sensitive: bool = True) -> None:
        self.case_sensitive = case_sensitive
        self.graph = nx.DiGraph()
        self.graph.add_node(self._key(ROOT), path=ROOT, kind=PathKind.DIRECTORY)
        self.cwd = self.path_type(ROOT)

    def _key(self, path: str) -> str:
        return path if self.case_sensitive else path.casefold()

    def _lookup(self, path: PathArg, follow_last: bool) -> str:
        """Walk path through the graph and return the key of the node it names."""
        path = self.as_path(path)
        pending = deque(path.parts)
        if path.anchor:
            pending.popleft()
            current = self._key(ROOT)
        else:
            current = self._key(str(self.cwd))

        hops = 0
        while pending:
            if self.graph.nodes[current]["kind"] is not PathKind.DIRECTORY:
                raise _oserror(errno.ENOTDIR, path)

            name = pending.popleft()
            if name == "..":
                # the root has no predecessor and is its own parent
                current = next(iter(self.graph.predecessors(current)), current)
                continue

            child = self._key(posixpath.join(self.graph.nodes[current]["path"], name))
            if child not in self.graph:
                raise _oserror(errno.ENOENT, path)

            node = self.graph.nodes[child]
            if node["kind"] is PathKind.SYMLINK and (pending or follow_last):
                hops += 1
                if hops > MAX_SYMLINK_HOPS:
                    raise _oserror(errno.ELOOP, path)
                target = self.path_type(node["target"])
                if target.anchor:
                    current = self._key(ROOT)
                    pending.extendleft(reversed(target.parts[1:]))
                else:
                    pending.extendleft(reversed(target.parts))
                continue

            current = child
        return current

    def symlink_kind(self, path: pathlib.PurePath) -> PathKind:
        return self.graph.nodes[self._lookup(path, follow_last=False)]["kind"]

    def read_link(self, path: pathlib.PurePath) -> pathlib.PurePath:
        node = self.graph.nodes[self._lookup(path, follow_last=False)]
        if node["kind"] is not PathKind.SYMLINK:
            raise _oserror(errno.EINVAL, path)
        return self.path_type(node["target"])

    def canonicalize(self, path: pathlib.PurePath) -> pathlib.PurePath:
        return self.path_type(self.graph.nodes[self._lookup(path, follow_last=True)]["path"])

    def _create(self, path: PathArg, kind: PathKind, **attrs: Any) -> "InMemoryMetadataProvider":
        path = self.as_path(path)
        if path.name in ("", ".."):
            raise ValueError(f"Cannot create an entry at {path}")

        parent = self._lookup(path.parent, follow_last=True)
        if self.graph.nodes[parent]["kind"] is not PathKind.DIRECTORY:
            raise _oserror(errno.ENOTDIR, path)

        display = posixpath.join(self.graph.nodes[parent]["path"], path.name)
        key = self._key(display)
        if key in self.graph:
            raise _oserror(errno.EEXIST, path)

        self.graph.add_node(key, path=display, kind=kind, **attrs)
        self.graph.add_edge(parent, key)
        logger.trace("Created {} {}", kind.name.lower(), display)
        return self

    def add_dir(self, path: PathArg) -> "InMemoryMetadataProvider":
        """Create a directory. Its parent must already exist."""
        return self._create(path, PathKind.DIRECTORY)

    def add_file(self, path: PathArg) -> "InMemoryMetadataProvider":
        """Create a plain file. Its parent must already exist."""
        return self._create(path, PathKind.FILE)

    def add_symlink(self, link: PathArg, target: PathArg) -> "InMemoryMetadataProvider":
        """Create a symlink at link storing target verbatim; target need not exist."""
        return self._create(link, PathKind.SYMLINK, target=os.fspath(target))

    def chdir(self, path: PathArg) -> "InMemoryMetadataProvider":
        """Change the directory relative paths are looked up from."""
        node = self.graph.nodes[self._lookup(path, follow_last=True)]
        if node["kind"] is not PathKind.DIRECTORY:
            raise _oserror(errno.ENOTDIR, path)
        self.cwd = self.path_type(node["path"])
        return self
