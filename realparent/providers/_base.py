# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import pathlib
from abc import ABC, abstractmethod
from typing import Type

from realparent.classify import PathKind
from realparent.errors import PathArg


class MetadataProvider(ABC):
    """Abstract source of the filesystem facts the resolver needs.

    Implementations raise OSError (or a subclass) for any failed lookup; the resolver
    takes care of attaching path context.

    Attributes:
        path_type (Type[pathlib.PurePath]): Flavour of path values produced and accepted.
    """

    path_type: Type[pathlib.PurePath] = pathlib.PurePath

    def as_path(self, path: PathArg) -> pathlib.PurePath:
        """Convert a string or path-like value into this provider's path type."""
        return self.path_type(path)

    @abstractmethod
    def symlink_kind(self, path: pathlib.PurePath) -> PathKind:
        """Kind of the entry at path, not following a final symlink (like lstat)."""

    @abstractmethod
    def read_link(self, path: pathlib.PurePath) -> pathlib.PurePath:
        """Stored target of the symlink at path."""

    @abstractmethod
    def canonicalize(self, path: pathlib.PurePath) -> pathlib.PurePath:
        """Absolute path with every symlink resolved. The path must exist."""
