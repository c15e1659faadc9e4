# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from loguru import logger

from .classify import PathKind, classify
from .configmanager import ConfigManager
from .errors import PathAccessError, RealPathError, SymlinkCycleError
from .pathext import is_real_root, real_clean, real_parent
from .providers import InMemoryMetadataProvider, MetadataProvider, OsMetadataProvider
from .resolver import RealPath
from .utils.log_config import configure_logging

__version__ = "0.1.0"

# silent unless the application asks for output, see configure_logging()
logger.disable(__name__)

__all__ = [
    "real_parent",
    "real_clean",
    "is_real_root",
    "RealPath",
    "PathKind",
    "classify",
    "RealPathError",
    "PathAccessError",
    "SymlinkCycleError",
    "MetadataProvider",
    "OsMetadataProvider",
    "InMemoryMetadataProvider",
    "ConfigManager",
    "configure_logging",
]
