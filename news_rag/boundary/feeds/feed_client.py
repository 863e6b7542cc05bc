"""
Feed HTTP client.

Fetches raw feed payloads with a bounded timeout. Every transport failure,
timeout or non-success status becomes a FetchError.

Dependencies: httpx, news_rag.core.exceptions
System role: Network boundary for feed ingestion
"""

import logging

import httpx

from news_rag.core.exceptions import FetchError

logger = logging.getLogger(__name__)

USER_AGENT = "news-rag-ingestor/0.1"


class FeedClient:
    """Async HTTP client for feed endpoints."""

    def __init__(
        self,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize feed client.

        Args:
            timeout: Total request timeout in seconds
            transport: Optional httpx transport (tests inject MockTransport)
        """
        self.timeout = timeout
        self._transport = transport

    async def fetch(self, url: str) -> bytes:
        """
        Download a feed payload.

        Args:
            url: Feed endpoint URL

        Returns:
            bytes: Raw response body

        Raises:
            FetchError: Network error, timeout or non-2xx status
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
                headers={"User-Agent": USER_AGENT},
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.TimeoutException as e:
            raise FetchError(f"Timed out fetching feed after {self.timeout}s", url=url) from e
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"Feed returned HTTP {e.response.status_code}",
                url=url,
                details={"status_code": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(f"Feed request failed: {type(e).__name__}: {e}", url=url) from e

        logger.debug(f"Fetched {len(response.content)} bytes from {url}")
        return response.content
