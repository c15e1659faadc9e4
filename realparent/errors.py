# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import errno
import os
from contextlib import contextmanager
from typing import Iterator, Union

PathArg = Union[str, "os.PathLike[str]"]


class RealPathError(OSError):
    """Base class for failures raised while resolving a logical path.

    Subclassing OSError lets callers that only care about "the filesystem said no"
    catch everything with a single ``except OSError``.
    """


class PathAccessError(RealPathError):
    """A filesystem lookup failed (not found, permission denied, I/O error, ...).

    Attributes:
        error (OSError): The underlying error raised by the lookup.
        path: The sub-path that was being inspected when the failure occurred.
    """

    def __init__(self, error: OSError, path: PathArg) -> None:
        super().__init__(error.errno, error.strerror, os.fspath(path))
        self.error = error
        self.path = path

    def __str__(self) -> str:
        return f"{self.error} on {os.fspath(self.path)}"


class SymlinkCycleError(RealPathError):
    """A symlink was dereferenced twice while resolving a single path.

    Attributes:
        path: The symlink that closed the loop.
    """

    def __init__(self, path: PathArg) -> None:
        super().__init__(errno.ELOOP, "symlink cycle detected", os.fspath(path))
        self.path = path

    def __str__(self) -> str:
        return f"symlink cycle detected at {os.fspath(self.path)}"


@contextmanager
def path_context(path: PathArg) -> Iterator[None]:
    """Annotate any OSError raised in the block with the path being inspected."""
    try:
        yield
    except RealPathError:
        raise
    except OSError as e:
        raise PathAccessError(e, path) from e
