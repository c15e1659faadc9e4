# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import pathlib
from typing import Optional

from realparent.errors import PathArg
from realparent.providers import MetadataProvider, OsMetadataProvider
from realparent.resolver import RealPath
from realparent.root import is_root
from realparent.utils.paths import empty_to_dot


def real_parent(path: PathArg, provider: Optional[MetadataProvider] = None) -> pathlib.PurePath:
    """As per ``PurePath.parent``, except that the filesystem is consulted so that the
    result is correct in the presence of symlinks.

    Symlink expansion is minimal: as much as possible of the relative and symlinked
    nature of path is preserved. No attempt is made to fold away ``..``.

    Differences from ``PurePath.parent``:
        - ``PurePath("..").parent == "."``, which is wrong; ``real_parent("..") == "../.."``
        - ``real_parent("")`` is ``".."``, the parent of the current directory
        - the parent of the absolute root is the root itself

    Args:
        path: Relative or absolute path; it must exist.
        provider (Optional[MetadataProvider]): Filesystem to consult. Defaults to the host.

    Returns:
        pathlib.PurePath: The logical parent, never empty.

    Raises:
        PathAccessError: If an entry on the way is missing or inaccessible.
        SymlinkCycleError: If the symlinks involved form a loop.
    """
    resolver = RealPath(provider)
    return resolver.provider.as_path(empty_to_dot(resolver.parent(path)))


def real_clean(path: PathArg, provider: Optional[MetadataProvider] = None) -> pathlib.PurePath:
    """Return path with ``..`` folded away as far as possible, expanding symlinks only where
    that is required for correctness. Leading ``..`` that cannot be folded is kept.

    Raises:
        PathAccessError: If an entry on the way is missing or inaccessible.
        SymlinkCycleError: If the symlinks involved form a loop.
    """
    resolver = RealPath(provider)
    return resolver.provider.as_path(empty_to_dot(resolver.clean(path)))


def is_real_root(path: PathArg, provider: Optional[MetadataProvider] = None) -> bool:
    """Return whether path is the root directory, whether or not it is relative or
    contains symlinks. The empty path is treated as ``.``.

    Raises:
        PathAccessError: If the path cannot be canonicalized.
    """
    return is_root(path, provider if provider is not None else OsMetadataProvider())
