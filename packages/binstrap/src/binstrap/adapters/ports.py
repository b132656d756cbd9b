"""Port interfaces for the binstrap core package.

Ports define the contracts that adapters must implement.
These are Protocol classes (structural subtyping) for flexible testing.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from pathlib import Path
from typing import IO, TYPE_CHECKING, Iterator, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from binstrap.domain.binary import Platform


EXECUTABLE_MODE = 0o755


@runtime_checkable
class EnvironmentPort(Protocol):
    """Port interface for the ambient process environment.

    Implementations supply the platform identifiers and environment
    variables consulted when expanding URL templates, and the environment
    handed to child processes. Injecting this port keeps URL expansion
    deterministic under test.

    Contract:
        - platform() returns the Platform of the running host
        - lookup(name) returns the variable's value, or "" when unset
        - environ() returns a copy of the full environment mapping
    """

    def platform(self) -> Platform:
        """Return the current platform."""
        ...

    def lookup(self, name: str) -> str:
        """Return the value of an environment variable.

        Args:
            name: Variable name.

        Returns:
            The value, or an empty string if the variable is unset.
        """
        ...

    def environ(self) -> dict[str, str]:
        """Return a copy of the full environment."""
        ...


@runtime_checkable
class FetchResponse(Protocol):
    """An open HTTP response whose body can be streamed."""

    @property
    def status_code(self) -> int:
        ...

    def iter_bytes(self) -> Iterator[bytes]:
        """Yield the response body in chunks."""
        ...


@runtime_checkable
class FetcherPort(Protocol):
    """Port interface for HTTP GET requests.

    Implementations open a GET request against an arbitrary URL and yield
    a streaming response. The response is released when the context
    manager exits, on success and on error.

    Contract:
        - open(url) returns a context manager yielding a FetchResponse
        - Transport failures raise FetchError
        - Whether non-success statuses raise FetchError is adapter policy
    """

    def open(
        self, url: str, timeout: float | None = None
    ) -> AbstractContextManager[FetchResponse]:
        """Open a GET request.

        Args:
            url: URL to fetch.
            timeout: Optional timeout in seconds, None to block indefinitely.

        Returns:
            Context manager yielding the streaming response.

        Raises:
            FetchError: On transport failure or a rejected response.
        """
        ...


@runtime_checkable
class FileSystemPort(Protocol):
    """Port interface for the local filesystem.

    Contract:
        - is_regular_file(path) never raises; any stat error means False
        - open_executable(path) yields a writable binary stream, closed on
          exit; the file at path holds the written content with mode 0755
          only if the block exits without raising
        - a block that raises leaves path as it was before the call
        - open_executable raises FileIOError if the file cannot be opened
    """

    def is_regular_file(self, path: Path) -> bool:
        """Check whether path is a regular file, without following symlinks.

        Args:
            path: Path to check.

        Returns:
            True only if the entry exists and is a plain file.
        """
        ...

    def open_executable(self, path: Path) -> AbstractContextManager[IO[bytes]]:
        """Open path for writing, creating it with executable permissions.

        Args:
            path: Path of the file to open.

        Returns:
            Context manager yielding a writable binary stream.

        Raises:
            FileIOError: If the file cannot be opened or created.
        """
        ...


@runtime_checkable
class ProcessRunnerPort(Protocol):
    """Port interface for launching child processes.

    Implementations run an executable with the standard streams connected
    to the caller's own and block until the child exits.

    Contract:
        - run() returns the child's exit code
        - Spawn failures raise ProcessError
        - A timeout kills the child and raises ProcessError
    """

    def run(
        self,
        executable: Path,
        args: Sequence[str],
        env: dict[str, str],
        timeout: float | None = None,
    ) -> int:
        """Run the executable and wait for it.

        Args:
            executable: Path to the program.
            args: Arguments passed after the program name.
            env: Environment for the child.
            timeout: Optional timeout in seconds, None to wait indefinitely.

        Returns:
            The exit code of the child.

        Raises:
            ProcessError: If the child cannot be started or times out.
        """
        ...
