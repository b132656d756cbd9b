"""Factory functions for creating managed binaries.

Wires the production adapters into a ManagedBinary so hosts do not have
to assemble the ports themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from binstrap.adapters.httpx_fetcher import HttpxFetcher
from binstrap.adapters.local_filesystem import LocalFileSystem
from binstrap.adapters.os_environment import OsEnvironment
from binstrap.adapters.subprocess_runner import SubprocessRunner
from binstrap.usecases.managed_binary import ManagedBinary

if TYPE_CHECKING:
    import httpx

    from binstrap.adapters.ports import EnvironmentPort
    from binstrap.domain.binary import BinaryDescriptor


def create_managed_binary(
    descriptor: BinaryDescriptor,
    *,
    client: httpx.Client | None = None,
    raise_for_status: bool = True,
    environment: EnvironmentPort | None = None,
) -> ManagedBinary:
    """Create a ManagedBinary backed by the real network, disk and OS.

    Args:
        descriptor: The binary to manage.
        client: Optional httpx.Client to reuse for downloads.
        raise_for_status: Treat non-success HTTP statuses as FetchError.
            Pass False to use the body of any response.
        environment: Optional environment provider; defaults to the
            running process (os.environ and the detected platform).

    Returns:
        A ManagedBinary ready for prepare() and run().

    Example:
        >>> descriptor = BinaryDescriptor(
        ...     name="tool",
        ...     download_path=".bin",
        ...     url_template="https://example.com/$GOOS/$GOARCH/tool-v$VERSION",
        ...     default_version="1.2.3",
        ... )
        >>> binary = create_managed_binary(descriptor)
        >>> result = binary.prepare_and_run(["--help"])
    """
    return ManagedBinary(
        descriptor=descriptor,
        environment=environment or OsEnvironment(),
        fetcher=HttpxFetcher(client=client, raise_for_status=raise_for_status),
        filesystem=LocalFileSystem(),
        process_runner=SubprocessRunner(),
    )
