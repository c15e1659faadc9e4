# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import os
import pathlib
from typing import Union


def empty_to_dot(path: Union[str, "os.PathLike[str]"]) -> Union[str, "os.PathLike[str]"]:
    """
    Replace an empty path with ".", so every value handed back is a usable path.

    PurePath objects already render an empty path as "."; plain strings do not.
    """
    if os.fspath(path) == "":
        return "."
    return path


def is_root_only(path: pathlib.PurePath) -> bool:
    """
    True if path is nothing but an anchor with a root separator, e.g. '/' or 'C:\\'.
    A bare drive such as 'C:' is relative to that drive's current directory, so it is not.
    """
    return bool(path.root) and path.parts == (path.anchor,)
