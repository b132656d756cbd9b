"""Environment adapter backed by the running process.

Implements EnvironmentPort over ``os.environ`` and OsPlatformDetector.
"""

from __future__ import annotations

import os

from binstrap.adapters.platform_detector import OsPlatformDetector
from binstrap.domain.binary import Platform


class OsEnvironment:
    """EnvironmentPort implementation reading the real process state.

    The platform is detected once, on first use, and cached for the
    lifetime of the adapter. Variables are read on every lookup.
    """

    def __init__(self, detector: OsPlatformDetector | None = None) -> None:
        """Initialize the environment adapter.

        Args:
            detector: Optional platform detector, for dependency injection.
        """
        self._detector = detector or OsPlatformDetector()
        self._platform: Platform | None = None

    def platform(self) -> Platform:
        """Return the detected platform.

        Raises:
            BinaryConfigError: If the current OS or architecture is not supported.
        """
        if self._platform is None:
            self._platform = self._detector.detect()
        return self._platform

    def lookup(self, name: str) -> str:
        """Return the environment variable's value, or "" if unset."""
        return os.environ.get(name, "")

    def environ(self) -> dict[str, str]:
        """Return a copy of os.environ."""
        return dict(os.environ)
