"""Interface adapters: HTTP, filesystem, subprocess and environment access."""

from binstrap.adapters.ports import (
    EnvironmentPort,
    FetcherPort,
    FetchResponse,
    FileSystemPort,
    ProcessRunnerPort,
)
from binstrap.adapters.httpx_fetcher import HttpxFetcher
from binstrap.adapters.local_filesystem import LocalFileSystem
from binstrap.adapters.os_environment import OsEnvironment
from binstrap.adapters.platform_detector import OsPlatformDetector
from binstrap.adapters.subprocess_runner import SubprocessRunner

__all__ = [
    "EnvironmentPort",
    "FetcherPort",
    "FetchResponse",
    "FileSystemPort",
    "ProcessRunnerPort",
    "HttpxFetcher",
    "LocalFileSystem",
    "OsEnvironment",
    "OsPlatformDetector",
    "SubprocessRunner",
]
