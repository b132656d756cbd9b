"""Binary-related domain value objects.

This module contains value objects describing an external executable
managed by binstrap: the target platform and the descriptor that says
where the binary comes from and where it is materialized.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from binstrap.domain.exceptions import BinaryConfigError

# Go-style identifiers, as used in release asset names
KNOWN_OS = (
    "linux",
    "darwin",
    "windows",
    "freebsd",
    "openbsd",
    "netbsd",
    "dragonfly",
    "solaris",
    "illumos",
    "aix",
)

KNOWN_ARCH = (
    "amd64",
    "arm64",
    "386",
    "arm",
    "ppc64",
    "ppc64le",
    "s390x",
    "riscv64",
    "mips",
    "mipsle",
    "mips64",
    "mips64le",
    "loong64",
)


@dataclass(frozen=True)
class Platform:
    """Platform value object representing OS and architecture.

    Immutable value object holding the identifiers substituted for
    ``$GOOS`` and ``$GOARCH`` in a download URL template.

    Attributes:
        os: Operating system identifier (e.g., 'linux', 'darwin', 'windows').
        arch: Architecture identifier (e.g., 'amd64', 'arm64').
    """

    os: str
    arch: str

    def __post_init__(self) -> None:
        """Validate platform configuration."""
        self._validate_os()
        self._validate_arch()

    def _validate_os(self) -> None:
        """Validate os is a known identifier."""
        if self.os not in KNOWN_OS:
            raise BinaryConfigError(f"os must be one of {KNOWN_OS}, got: {self.os!r}")

    def _validate_arch(self) -> None:
        """Validate arch is a known identifier."""
        if self.arch not in KNOWN_ARCH:
            raise BinaryConfigError(
                f"arch must be one of {KNOWN_ARCH}, got: {self.arch!r}"
            )

    def __str__(self) -> str:
        return f"{self.os}/{self.arch}"


@dataclass(frozen=True)
class BinaryDescriptor:
    """Descriptor of one external binary dependency.

    Immutable value object identifying a binary: its file name, the
    directory it is materialized into, the URL template it is fetched
    from and, optionally, a base64 payload of the binary embedded by the
    host so no network fetch is needed.

    Attributes:
        name: Identifier of the binary, also the file name written to disk.
        download_path: Directory (relative or absolute) for the executable.
        url_template: Download URL. May reference $GOOS, $GOARCH, $VERSION
            and any environment variable.
        default_version: Value substituted for $VERSION.
        embedded_data: Base64-encoded binary, empty when not embedded.
    """

    name: str
    download_path: str | Path
    url_template: str
    default_version: str = ""
    embedded_data: str = ""

    def __post_init__(self) -> None:
        """Validate descriptor configuration."""
        self._validate_name()

    def _validate_name(self) -> None:
        """Validate name is a usable file name."""
        if not self.name:
            raise BinaryConfigError("name cannot be empty")

        if not self.name.strip():
            raise BinaryConfigError("name cannot be whitespace-only")

        if "\x00" in self.name:
            raise BinaryConfigError(f"name cannot contain null bytes, got: {self.name!r}")

    @property
    def has_embedded_data(self) -> bool:
        """Return True if the descriptor carries an embedded payload."""
        return self.embedded_data != ""

    def executable_path(self) -> Path:
        """Return the path the executable is materialized at.

        Joins download_path and name and makes the result absolute. If the
        absolute path cannot be computed (e.g., the working directory was
        removed), the relative join is returned instead. Never raises.

        Returns:
            Absolute path to the executable, or the relative join on failure.
        """
        rel = os.path.join(os.fspath(self.download_path), self.name)
        try:
            return Path(os.path.abspath(rel))
        except (OSError, ValueError):
            return Path(rel)
