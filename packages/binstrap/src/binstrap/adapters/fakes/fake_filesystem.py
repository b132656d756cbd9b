"""Fake filesystem for testing.

Provides a test double for FileSystemPort that keeps files in memory.
"""

from __future__ import annotations

import io
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from binstrap.adapters.ports import EXECUTABLE_MODE


class _FakeFile(io.BytesIO):
    """Writable buffer that can be told to fail on write."""

    def __init__(self, write_exception: BaseException | None) -> None:
        super().__init__()
        self._write_exception = write_exception

    def write(self, data: bytes) -> int:  # type: ignore[override]
        if self._write_exception is not None:
            raise self._write_exception
        return super().write(data)


class FakeFileSystem:
    """Fake implementation of FileSystemPort for testing.

    Files live in the ``files`` mapping. Content written through
    open_executable() is stored only when the block exits without raising;
    a failed block leaves any existing entry untouched.

    Example:
        >>> from pathlib import Path
        >>> fs = FakeFileSystem()
        >>> fs.is_regular_file(Path("/bin/tool"))
        False
        >>> with fs.open_executable(Path("/bin/tool")) as f:
        ...     _ = f.write(b"data")
        >>> fs.files[Path("/bin/tool")]
        b'data'
    """

    def __init__(self) -> None:
        self.files: dict[Path, bytes] = {}
        self.modes: dict[Path, int] = {}
        self._non_regular: set[Path] = set()
        self._open_exception: BaseException | None = None
        self._write_exception: BaseException | None = None
        self._open_calls: list[Path] = []
        self._handles: list[_FakeFile] = []

    @property
    def open_calls(self) -> list[Path]:
        """Return the paths passed to open_executable(), in call order."""
        return self._open_calls

    @property
    def all_closed(self) -> bool:
        """Return True if every handle handed out has been closed."""
        return all(handle.closed for handle in self._handles)

    def add_file(self, path: Path, content: bytes = b"") -> None:
        """Place a regular file at path."""
        self.files[path] = content
        self.modes[path] = EXECUTABLE_MODE

    def add_non_regular(self, path: Path) -> None:
        """Place a directory, symlink or other non-regular entry at path."""
        self._non_regular.add(path)

    def set_open_exception(self, exception: BaseException | None) -> None:
        self._open_exception = exception

    def set_write_exception(self, exception: BaseException | None) -> None:
        self._write_exception = exception

    def is_regular_file(self, path: Path) -> bool:
        return path in self.files and path not in self._non_regular

    @contextmanager
    def open_executable(self, path: Path) -> Iterator[io.BytesIO]:
        """Yield an in-memory file, stored under path on clean exit."""
        self._open_calls.append(path)

        if self._open_exception is not None:
            raise self._open_exception

        handle = _FakeFile(self._write_exception)
        self._handles.append(handle)
        try:
            yield handle
            self.files[path] = handle.getvalue()
            self.modes[path] = EXECUTABLE_MODE
        finally:
            handle.close()
