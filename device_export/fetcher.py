"""
HTTP fetch logic for the product API. One GET per call, inside a client that
is opened and closed within the call. No retries.
"""

import time
from datetime import datetime, timezone
from typing import Optional

import httpx
import structlog

from .errors import FetchFailed

logger = structlog.get_logger(__name__)


class FetchResult:
    def __init__(
        self,
        url: str,
        status_code: int,
        text: str = "",
        final_url: str = None,
        fetch_time: float = 0.0,
        content_type: str = None,
    ):
        """Initialize a FetchResult with the response body and metadata."""
        self.url = url
        self.status_code = status_code
        self.text = text
        self.final_url = final_url or url
        self.fetch_time = fetch_time
        self.content_type = content_type
        self.timestamp = datetime.now(timezone.utc)

    @property
    def size(self) -> int:
        """Size of the decoded body in characters."""
        return len(self.text)


class HTTPFetcher:
    def __init__(
        self,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the fetcher.

        Args:
            timeout: Seconds before giving up. ``None`` keeps the httpx default.
            user_agent: Overrides the httpx User-Agent header when set.
            transport: Custom transport, used by tests to fake the API.
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self.transport = transport

    def _client_options(self) -> dict:
        options = {"follow_redirects": True}
        if self.timeout is not None:
            options["timeout"] = httpx.Timeout(self.timeout)
        if self.user_agent:
            options["headers"] = {"User-Agent": self.user_agent}
        if self.transport is not None:
            options["transport"] = self.transport
        return options

    async def fetch(self, url: str) -> FetchResult:
        """GET ``url`` and return its body.

        Raises:
            FetchFailed: on timeouts, connection errors, non-2xx responses or
                any other transport error.
        """
        start_time = time.time()
        logger.info("fetch_started", url=url)

        try:
            async with httpx.AsyncClient(**self._client_options()) as client:
                response = await client.get(url)
                response.raise_for_status()
                text = response.text

        except httpx.TimeoutException as e:
            logger.warning("fetch_timeout", url=url, timeout=self.timeout, error=str(e))
            raise FetchFailed(url, f"timeout: {e}") from e

        except httpx.ConnectError as e:
            logger.warning("fetch_connection_error", url=url, error=str(e))
            raise FetchFailed(url, f"connection error: {e}") from e

        except httpx.HTTPStatusError as e:
            logger.warning("fetch_bad_status", url=url, status_code=e.response.status_code)
            raise FetchFailed(url, f"HTTP {e.response.status_code}") from e

        except httpx.HTTPError as e:
            logger.error("fetch_error", url=url, error=str(e))
            raise FetchFailed(url, str(e) or type(e).__name__) from e

        result = FetchResult(
            url=url,
            status_code=response.status_code,
            text=text,
            final_url=str(response.url),
            fetch_time=time.time() - start_time,
            content_type=response.headers.get("content-type", "").lower(),
        )
        logger.info(
            "fetch_completed",
            url=url,
            status_code=result.status_code,
            size=result.size,
            fetch_time=round(result.fetch_time, 3),
        )
        return result
