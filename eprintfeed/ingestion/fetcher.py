"""Upstream document fetcher."""

import asyncio
from typing import Optional

import httpx

from ..errors import FetchError

DEFAULT_USER_AGENT = "eprintfeed/0.1 (+https://eprint.fans)"


class FeedFetcher:
    """Fetch the raw upstream feed document."""

    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize feed fetcher."""
        self.url = url
        self.timeout = timeout
        self.user_agent = user_agent
        self.transport = transport

    async def fetch_document(self) -> bytes:
        """
        Fetch the upstream document.

        Raises:
            FetchError: if the upstream is unreachable or answers non-2xx
        """
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "application/rss+xml, application/atom+xml, application/xml;q=0.9, */*;q=0.8",
        }
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                headers=headers,
                transport=self.transport,
            ) as client:
                response = await client.get(self.url)
                response.raise_for_status()
                return response.content

        except httpx.HTTPStatusError as e:
            raise FetchError(
                self.url, f"HTTP {e.response.status_code}", status_code=e.response.status_code
            ) from e
        except httpx.TimeoutException as e:
            raise FetchError(self.url, "request timed out") from e
        except httpx.HTTPError as e:
            raise FetchError(self.url, f"HTTP error: {e}") from e

    def fetch_document_sync(self) -> bytes:
        """Synchronous wrapper for fetch_document."""
        return asyncio.run(self.fetch_document())
