"""Fake fetcher for testing.

Provides a test double for FetcherPort that serves preconfigured bodies
without network operations.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator


class FakeFetchResponse:
    """In-memory response yielded by FakeFetcher.

    Attributes:
        status_code: HTTP status code to report.
        closed: True once the response has been released.
    """

    def __init__(
        self,
        body: bytes,
        status_code: int = 200,
        chunk_size: int = 4,
        stream_exception: BaseException | None = None,
    ) -> None:
        self._body = body
        self._chunk_size = chunk_size
        self._stream_exception = stream_exception
        self.status_code = status_code
        self.closed = False

    def iter_bytes(self) -> Iterator[bytes]:
        """Yield the body in chunks, raising the stream exception midway if set."""
        for start in range(0, len(self._body), self._chunk_size):
            yield self._body[start : start + self._chunk_size]
            if self._stream_exception is not None:
                raise self._stream_exception
        if self._stream_exception is not None:
            raise self._stream_exception


class FakeFetcher:
    """Fake implementation of FetcherPort for testing.

    Serves a configured body for every URL (or per-URL bodies), records
    all calls, and keeps every response it handed out so tests can check
    they were released.

    Example:
        >>> fetcher = FakeFetcher(body=b"binary")
        >>> with fetcher.open("https://example.com/tool") as response:
        ...     b"".join(response.iter_bytes())
        b'binary'
        >>> fetcher.calls
        [('https://example.com/tool', None)]
    """

    def __init__(self, body: bytes = b"", status_code: int = 200) -> None:
        """Initialize with a default response body.

        Args:
            body: Body served for URLs without a specific response.
            status_code: Status code reported with the default body.
        """
        self._body = body
        self._status_code = status_code
        self._bodies: dict[str, bytes] = {}
        self._exception: BaseException | None = None
        self._stream_exception: BaseException | None = None
        self._calls: list[tuple[str, float | None]] = []
        self._responses: list[FakeFetchResponse] = []

    @property
    def calls(self) -> list[tuple[str, float | None]]:
        """Return list of (url, timeout) tuples from open() calls."""
        return self._calls

    @property
    def responses(self) -> list[FakeFetchResponse]:
        """Return every response handed out, in call order."""
        return self._responses

    def set_response(self, body: bytes, status_code: int = 200) -> None:
        self._body = body
        self._status_code = status_code

    def set_response_for(self, url: str, body: bytes) -> None:
        """Serve body for one specific URL."""
        self._bodies[url] = body

    def set_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise from open(), or None to clear."""
        self._exception = exception

    def set_stream_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise while the body is being read."""
        self._stream_exception = exception

    def clear_calls(self) -> None:
        self._calls.clear()
        self._responses.clear()

    @contextmanager
    def open(
        self, url: str, timeout: float | None = None
    ) -> Iterator[FakeFetchResponse]:
        """Yield a FakeFetchResponse or raise the configured exception."""
        self._calls.append((url, timeout))

        if self._exception is not None:
            raise self._exception

        response = FakeFetchResponse(
            body=self._bodies.get(url, self._body),
            status_code=self._status_code,
            stream_exception=self._stream_exception,
        )
        self._responses.append(response)
        try:
            yield response
        finally:
            response.closed = True
