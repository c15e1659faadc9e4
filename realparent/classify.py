# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from __future__ import annotations

import pathlib
from enum import Enum, auto
from typing import TYPE_CHECKING

from loguru import logger

from realparent.errors import PathArg, path_context

if TYPE_CHECKING:
    from realparent.providers import MetadataProvider


class PathKind(Enum):
    FILE = auto()
    DIRECTORY = auto()
    SYMLINK = auto()


def classify(path: PathArg, provider: MetadataProvider) -> PathKind:
    """Report what kind of entry a path names, without following a final symlink.

    The path is rebuilt through the provider's path type first, which drops ``.``
    components and trailing separators (but keeps ``..``). Otherwise ``A/.`` would be
    looked up as a directory even when ``A`` itself is a symlink.

    Args:
        path: Path of the entry to inspect.
        provider (MetadataProvider): Source of filesystem metadata.

    Returns:
        PathKind: The kind of the entry itself.

    Raises:
        PathAccessError: If the entry does not exist or cannot be inspected.
    """
    entry: pathlib.PurePath = provider.as_path(path)
    with path_context(entry):
        kind = provider.symlink_kind(entry)
    logger.trace("Classified {} as {}", entry, kind.name)
    return kind
