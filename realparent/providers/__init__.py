# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from ._base import MetadataProvider
from ._memory import InMemoryMetadataProvider
from ._os import OsMetadataProvider

__all__ = [
    "MetadataProvider",
    "OsMetadataProvider",
    "InMemoryMetadataProvider",
]
