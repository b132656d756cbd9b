"""HTTPX-based implementation of the FetcherPort.

This adapter uses httpx to stream binaries from remote URLs.
"""

from __future__ import annotations

import logging
from contextlib import ExitStack, contextmanager
from typing import Iterator

import httpx

from binstrap.adapters.ports import FetcherPort
from binstrap.domain.exceptions import FetchError

logger = logging.getLogger(__name__)


class HttpxFetcher:
    """HTTPX-based adapter for fetching binaries.

    Opens a streaming GET request so the body can be consumed chunk by
    chunk without loading the whole binary in memory. Redirects are
    followed by default since release assets are usually served through
    one.

    By default a non-success status (anything outside 2xx after redirects)
    raises FetchError. With ``raise_for_status=False`` the body of any
    response is handed to the caller, matching a fetcher that only fails
    on transport errors.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        raise_for_status: bool = True,
        follow_redirects: bool = True,
    ) -> None:
        """Initialize the HTTPX fetcher.

        Args:
            client: Optional httpx.Client for dependency injection (testing).
                   If not provided, a new client is created per request.
            raise_for_status: Treat non-success statuses as FetchError.
            follow_redirects: Follow HTTP redirects.
        """
        self._client = client
        self._raise_for_status = raise_for_status
        self._follow_redirects = follow_redirects

    @contextmanager
    def open(self, url: str, timeout: float | None = None) -> Iterator[httpx.Response]:
        """Open a streaming GET request against url.

        Args:
            url: URL to fetch.
            timeout: Optional timeout in seconds. None uses the client's
                default timeout.

        Yields:
            The streaming httpx.Response. It is closed when the block exits.

        Raises:
            FetchError: For network failures, invalid URLs, errors while
                reading the body, and (when enabled) non-success statuses.
        """
        request_timeout = httpx.USE_CLIENT_DEFAULT if timeout is None else timeout
        logger.debug("GET %s", url)
        try:
            with ExitStack() as stack:
                client = self._client
                if client is None:
                    client = stack.enter_context(httpx.Client())

                response = stack.enter_context(
                    client.stream(
                        "GET",
                        url,
                        timeout=request_timeout,
                        follow_redirects=self._follow_redirects,
                    )
                )

                if self._raise_for_status and not response.is_success:
                    raise FetchError(
                        f"GET {url} returned HTTP {response.status_code}",
                        url=url,
                        status_code=response.status_code,
                    )

                yield response
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as e:
            raise FetchError(f"GET {url} failed: {e}", url=url, original_error=e) from e


# Runtime protocol check
assert isinstance(HttpxFetcher(), FetcherPort)
