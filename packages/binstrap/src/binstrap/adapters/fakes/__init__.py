"""Fake adapters for testing.

This module provides test doubles for port interfaces, enabling
deterministic testing without real I/O operations.
"""

from binstrap.adapters.fakes.fake_environment import FakeEnvironment
from binstrap.adapters.fakes.fake_fetcher import FakeFetcher, FakeFetchResponse
from binstrap.adapters.fakes.fake_filesystem import FakeFileSystem
from binstrap.adapters.fakes.fake_process_runner import FakeProcessRunner, RunCall

__all__ = [
    "FakeEnvironment",
    "FakeFetcher",
    "FakeFetchResponse",
    "FakeFileSystem",
    "FakeProcessRunner",
    "RunCall",
]
