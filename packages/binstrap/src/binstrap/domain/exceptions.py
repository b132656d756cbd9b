"""Domain exceptions.

Exception hierarchy:
- BinaryError: Base exception for everything raised by binstrap.
  - BinaryConfigError: Invalid descriptor or platform values.
  - FetchError: Network or transport failure while fetching a binary.
  - FileIOError: Local filesystem failure while materializing a binary.
  - ProcessError: The binary could not be started or exited with failure.
"""

from __future__ import annotations

from pathlib import Path


class BinaryError(Exception):
    """Base exception for all binstrap errors."""

    pass


class BinaryConfigError(BinaryError):
    """Raised when a binary descriptor or platform is invalid.

    Raised by domain value objects (e.g., BinaryDescriptor, Platform)
    from ``__post_init__`` validation.
    """

    pass


class FetchError(BinaryError):
    """Raised when fetching a binary over HTTP fails.

    Attributes:
        message: Human-readable error description.
        url: The URL that failed to download (optional).
        status_code: HTTP status code when the failure is a rejected
            response rather than a transport error (optional).
        original_error: The underlying exception that caused the failure (optional).
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        """Initialize FetchError.

        Args:
            message: Human-readable error description.
            url: The URL that failed to download.
            status_code: HTTP status code of a rejected response.
            original_error: The underlying exception that caused the failure.
        """
        super().__init__(message)
        self.message = message
        self.url = url
        self.status_code = status_code
        self.original_error = original_error


class FileIOError(BinaryError):
    """Raised when the executable file cannot be opened or written.

    Attributes:
        message: Human-readable error description.
        path: The file path involved (optional).
        original_error: The underlying exception that caused the failure (optional).
    """

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.original_error = original_error


class ProcessError(BinaryError):
    """Raised when the executable cannot be started or exits with failure.

    Attributes:
        message: Human-readable error description.
        path: The executable that was launched (optional).
        exit_code: Exit status of the child, None if it never started
            or was killed before reporting one.
        original_error: The underlying exception that caused the failure (optional).
    """

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        exit_code: int | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.exit_code = exit_code
        self.original_error = original_error
