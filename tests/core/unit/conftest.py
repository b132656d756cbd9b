"""Shared fixtures for binstrap core unit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from binstrap.adapters.fakes import (
    FakeEnvironment,
    FakeFetcher,
    FakeFileSystem,
    FakeProcessRunner,
)
from binstrap.domain.binary import BinaryDescriptor, Platform
from binstrap.usecases.managed_binary import ManagedBinary

BINARY_CONTENT = b"\x7fELF\x02\x01\x01\x00fake binary content\xff\xfe"


@pytest.fixture
def binary_content() -> bytes:
    """Bytes served by the fake fetcher, including non-UTF-8 bytes."""
    return BINARY_CONTENT


@pytest.fixture
def descriptor() -> BinaryDescriptor:
    """Descriptor without embedded data, using an absolute download path."""
    return BinaryDescriptor(
        name="tool",
        download_path=Path("/opt/bin"),
        url_template="https://example.com/$GOOS/$GOARCH/v$VERSION",
        default_version="1.2.3",
    )


@pytest.fixture
def environment() -> FakeEnvironment:
    return FakeEnvironment(platform=Platform(os="linux", arch="amd64"))


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher(body=BINARY_CONTENT)


@pytest.fixture
def filesystem() -> FakeFileSystem:
    return FakeFileSystem()


@pytest.fixture
def process_runner() -> FakeProcessRunner:
    return FakeProcessRunner()


@pytest.fixture
def make_binary(
    environment: FakeEnvironment,
    fetcher: FakeFetcher,
    filesystem: FakeFileSystem,
    process_runner: FakeProcessRunner,
):
    """Build a ManagedBinary for a descriptor, wired to the fake ports."""

    def _make(descriptor: BinaryDescriptor) -> ManagedBinary:
        return ManagedBinary(
            descriptor=descriptor,
            environment=environment,
            fetcher=fetcher,
            filesystem=filesystem,
            process_runner=process_runner,
        )

    return _make


@pytest.fixture
def binary(make_binary, descriptor: BinaryDescriptor) -> ManagedBinary:
    return make_binary(descriptor)
