"""binstrap-py: Fetch, materialize and run external binaries."""

__version__ = "0.1.0"

from binstrap.domain.binary import BinaryDescriptor, Platform
from binstrap.domain.exceptions import (
    BinaryConfigError,
    BinaryError,
    FetchError,
    FileIOError,
    ProcessError,
)
from binstrap.factories import create_managed_binary
from binstrap.usecases.managed_binary import (
    ManagedBinary,
    PrepareAndRunResult,
    ProvisionOutcome,
)

__all__ = [
    "BinaryDescriptor",
    "Platform",
    "BinaryError",
    "BinaryConfigError",
    "FetchError",
    "FileIOError",
    "ProcessError",
    "ManagedBinary",
    "PrepareAndRunResult",
    "ProvisionOutcome",
    "create_managed_binary",
]
