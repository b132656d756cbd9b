"""Unit tests for OsPlatformDetector adapter."""

from unittest.mock import patch

import pytest

from binstrap.adapters.platform_detector import OsPlatformDetector
from binstrap.domain.binary import Platform
from binstrap.domain.exceptions import BinaryConfigError


@pytest.mark.tier(1)
@pytest.mark.unit
@pytest.mark.tra("Adapter.OsPlatformDetector")
class TestOsPlatformDetector:
    """Test OsPlatformDetector implementation."""

    def test_consistent_results_across_calls(self) -> None:
        """Test that detect() returns consistent results across multiple calls."""
        detector = OsPlatformDetector()
        assert detector.detect() == detector.detect()

    @pytest.mark.parametrize(
        ("system", "machine", "expected"),
        [
            ("Linux", "x86_64", Platform(os="linux", arch="amd64")),
            ("Linux", "aarch64", Platform(os="linux", arch="arm64")),
            ("Linux", "armv7l", Platform(os="linux", arch="arm")),
            ("Darwin", "arm64", Platform(os="darwin", arch="arm64")),
            ("Windows", "AMD64", Platform(os="windows", arch="amd64")),
            ("Windows", "x86", Platform(os="windows", arch="386")),
            ("FreeBSD", "amd64", Platform(os="freebsd", arch="amd64")),
            ("SunOS", "x86_64", Platform(os="solaris", arch="amd64")),
            ("SunOS", "i86pc", Platform(os="solaris", arch="amd64")),
            ("Linux", "armv8l", Platform(os="linux", arch="arm")),
            ("Linux", "mips", Platform(os="linux", arch="mips")),
            ("Linux", "mips64el", Platform(os="linux", arch="mips64le")),
            ("Linux", "loongarch64", Platform(os="linux", arch="loong64")),
        ],
    )
    def test_maps_to_go_identifiers(
        self, system: str, machine: str, expected: Platform
    ) -> None:
        with patch("platform.system", return_value=system), patch(
            "platform.machine", return_value=machine
        ):
            assert OsPlatformDetector().detect() == expected

    def test_unsupported_os_raises(self) -> None:
        with patch("platform.system", return_value="Plan9"), patch(
            "platform.machine", return_value="x86_64"
        ):
            with pytest.raises(BinaryConfigError, match="Unsupported operating system"):
                OsPlatformDetector().detect()

    def test_unsupported_arch_raises(self) -> None:
        with patch("platform.system", return_value="Linux"), patch(
            "platform.machine", return_value="sparc"
        ):
            with pytest.raises(BinaryConfigError, match="Unsupported architecture"):
                OsPlatformDetector().detect()
