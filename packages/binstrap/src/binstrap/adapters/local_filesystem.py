"""Local filesystem adapter.

Implements FileSystemPort over ``os`` primitives so the permission mode
is applied at creation time.
"""

from __future__ import annotations

import os
import stat
import uuid
from contextlib import contextmanager, suppress
from pathlib import Path
from typing import IO, Iterator

from binstrap.adapters.ports import EXECUTABLE_MODE, FileSystemPort
from binstrap.domain.exceptions import FileIOError


def _staging_path(path: Path) -> Path:
    """Return a unique hidden sibling of path to write into."""
    return path.with_name(f".{path.name}.{uuid.uuid4().hex[:12]}.tmp")


class LocalFileSystem:
    """FileSystemPort implementation for the local disk."""

    def __init__(self, mode: int = EXECUTABLE_MODE) -> None:
        """Initialize the filesystem adapter.

        Args:
            mode: Permission bits for newly created files (subject to umask).
        """
        self._mode = mode

    def is_regular_file(self, path: Path) -> bool:
        """Check whether path is a plain file, without following symlinks.

        Returns:
            True if lstat succeeds and reports a regular file. Any error,
            including a missing path, yields False.
        """
        try:
            info = os.lstat(path)
        except (OSError, ValueError):
            return False
        return stat.S_ISREG(info.st_mode)

    @contextmanager
    def open_executable(self, path: Path) -> Iterator[IO[bytes]]:
        """Open path for writing, creating it with executable permissions.

        Content goes to a staging file in the same directory, which
        replaces path only when the block exits cleanly. If the block
        raises, the staging file is removed and whatever was at path
        before is left untouched.

        Raises:
            FileIOError: If the file cannot be opened, a write fails, or
                the finished file cannot be moved into place.
        """
        staging = _staging_path(path)
        try:
            fd = os.open(staging, os.O_WRONLY | os.O_CREAT | os.O_EXCL, self._mode)
        except OSError as e:
            raise FileIOError(
                f"Could not open {path} for writing: {e}", path=path, original_error=e
            ) from e

        try:
            try:
                with os.fdopen(fd, "wb") as f:
                    yield f
            except OSError as e:
                raise FileIOError(
                    f"Could not write {path}: {e}", path=path, original_error=e
                ) from e

            try:
                os.replace(staging, path)
            except OSError as e:
                raise FileIOError(
                    f"Could not move {staging} to {path}: {e}",
                    path=path,
                    original_error=e,
                ) from e
        except BaseException:
            with suppress(OSError):
                os.unlink(staging)
            raise


# Runtime protocol check
assert isinstance(LocalFileSystem(), FileSystemPort)
