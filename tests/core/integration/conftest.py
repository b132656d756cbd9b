"""Fixtures for binstrap integration tests.

Integration tests use the real filesystem and real child processes.
HTTP is served by an httpx.MockTransport so no network access is needed.
"""

from __future__ import annotations

import httpx
import pytest

# A POSIX shell script stands in for a downloaded binary
TOOL_SCRIPT = b"""#!/bin/sh
if [ "$1" = "fail" ]; then
    exit 4
fi
echo "tool ran with: $*"
"""


@pytest.fixture
def tool_script() -> bytes:
    return TOOL_SCRIPT


@pytest.fixture
def served_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def release_client(served_requests: list[httpx.Request]) -> httpx.Client:
    """httpx client serving the tool script for /releases/..., 404 otherwise."""

    def handler(request: httpx.Request) -> httpx.Response:
        served_requests.append(request)
        if request.url.path.startswith("/releases/"):
            return httpx.Response(200, content=TOOL_SCRIPT)
        return httpx.Response(404, content=b"Not Found")

    return httpx.Client(transport=httpx.MockTransport(handler))
