"""Platform detector adapter for detecting current OS and architecture.

Maps Python's ``platform`` module values onto the Go-style identifiers
used in release asset names.
"""

from __future__ import annotations

import platform

from binstrap.domain.binary import Platform
from binstrap.domain.exceptions import BinaryConfigError


class OsPlatformDetector:
    """Detects the current platform using the platform module.

    Machine type mappings:
        - x86_64, AMD64 -> amd64
        - aarch64, arm64 -> arm64
        - i386, i686, x86 -> 386
        - i86pc (Solaris on x86) -> amd64
        - armv5tel, armv6l, armv7l, armv8l -> arm
        - mips, mipsel, mips64, mips64el -> mips, mipsle, mips64, mips64le
    """

    _OS_MAP: dict[str, str] = {
        "linux": "linux",
        "darwin": "darwin",
        "windows": "windows",
        "freebsd": "freebsd",
        "openbsd": "openbsd",
        "netbsd": "netbsd",
        "dragonfly": "dragonfly",
        "sunos": "solaris",
        "aix": "aix",
    }

    _ARCH_MAP: dict[str, str] = {
        "x86_64": "amd64",
        "amd64": "amd64",
        "aarch64": "arm64",
        "arm64": "arm64",
        "i386": "386",
        "i686": "386",
        "x86": "386",
        "i86pc": "amd64",
        "armv5tel": "arm",
        "armv6l": "arm",
        "armv7l": "arm",
        "armv8l": "arm",
        "mips": "mips",
        "mipsel": "mipsle",
        "mips64": "mips64",
        "mips64el": "mips64le",
        "loongarch64": "loong64",
        "ppc64": "ppc64",
        "ppc64le": "ppc64le",
        "s390x": "s390x",
        "riscv64": "riscv64",
    }

    def detect(self) -> Platform:
        """Detect the current platform.

        Returns:
            Platform value object with os and arch fields.

        Raises:
            BinaryConfigError: If the current OS or architecture is not supported.
        """
        return Platform(os=self._detect_os(), arch=self._detect_arch())

    def _detect_os(self) -> str:
        system = platform.system().lower()
        if system not in self._OS_MAP:
            raise BinaryConfigError(
                f"Unsupported operating system: {platform.system()!r}"
            )
        return self._OS_MAP[system]

    def _detect_arch(self) -> str:
        machine = platform.machine().lower()
        if machine not in self._ARCH_MAP:
            raise BinaryConfigError(
                f"Unsupported architecture: {platform.machine()!r}"
            )
        return self._ARCH_MAP[machine]
