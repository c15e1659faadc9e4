# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from loguru import logger

from realparent.errors import PathArg, path_context
from realparent.providers import MetadataProvider
from realparent.utils.paths import empty_to_dot, is_root_only


def is_root(path: PathArg, provider: MetadataProvider) -> bool:
    """Determine whether path denotes the filesystem root once fully resolved.

    This is the one place that canonicalizes the whole path: the answer is a yes/no
    about the endpoint, so there is no logical path to preserve. Symlink loops are left
    to the provider's canonicalization, which reports them as an OSError.

    Args:
        path: Path to test. An empty path means the current directory.
        provider (MetadataProvider): Source of filesystem metadata.

    Returns:
        bool: True if the canonical path is the root directory.

    Raises:
        PathAccessError: If the path cannot be canonicalized.
    """
    path = provider.as_path(empty_to_dot(path))
    with path_context(path):
        canonical = provider.canonicalize(path)
    logger.trace("{} canonicalizes to {}", path, canonical)
    return is_root_only(canonical)
