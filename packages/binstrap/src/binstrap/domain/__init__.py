"""Domain layer: value objects and exceptions with no I/O."""

from binstrap.domain.binary import BinaryDescriptor, Platform
from binstrap.domain.exceptions import (
    BinaryConfigError,
    BinaryError,
    FetchError,
    FileIOError,
    ProcessError,
)

__all__ = [
    "BinaryDescriptor",
    "Platform",
    "BinaryError",
    "BinaryConfigError",
    "FetchError",
    "FileIOError",
    "ProcessError",
]
