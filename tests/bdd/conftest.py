"""Shared fixtures for BDD tests."""

import pytest

from binstrap.adapters.fakes import (
    FakeEnvironment,
    FakeFetcher,
    FakeFileSystem,
    FakeProcessRunner,
)


@pytest.fixture
def context() -> dict:
    """Shared context for passing state between steps."""
    return {}


@pytest.fixture
def environment() -> FakeEnvironment:
    return FakeEnvironment()


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher(body=b"#!/bin/sh\necho tool\n")


@pytest.fixture
def filesystem() -> FakeFileSystem:
    return FakeFileSystem()


@pytest.fixture
def process_runner() -> FakeProcessRunner:
    return FakeProcessRunner()
