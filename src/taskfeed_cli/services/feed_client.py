"""HTTP client for published spreadsheet feeds."""

from __future__ import annotations

import time

import httpx

from taskfeed_cli.models import FetchError
from taskfeed_cli.utils.logger import get_logger

_DEFAULT_TIMEOUT = 30.0
_CACHE_BUST_PARAM = "t"


class FeedClient:
    """Fetches the raw CSV text of a feed in a single request.

    Args:
        timeout: HTTP request timeout in seconds.
        cache_bust: Append a millisecond timestamp parameter so shared caches
            never serve an older copy of the sheet.
        transport: Optional httpx transport (useful for testing).
    """

    def __init__(
        self,
        *,
        timeout: float = _DEFAULT_TIMEOUT,
        cache_bust: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._cache_bust = cache_bust
        self._transport = transport

    def build_url(self, url: str) -> httpx.URL:
        """Validate *url* and add the cache-busting parameter if enabled.

        Raises:
            FetchError: If the URL is not an absolute http(s) URL
        """
        try:
            parsed = httpx.URL(url.strip())
        except httpx.InvalidURL as e:
            raise FetchError(f"Invalid feed URL: {url!r}") from e

        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise FetchError(f"Invalid feed URL: {url!r}")

        if self._cache_bust:
            parsed = parsed.copy_merge_params(
                {_CACHE_BUST_PARAM: str(int(time.time() * 1000))}
            )
        return parsed

    async def fetch_text(self, url: str) -> str:
        """Download the feed and return its body as text.

        Raises:
            FetchError: On invalid URLs, transport failures and non-2xx
                responses
        """
        logger = get_logger("feed")
        target = self.build_url(url)
        logger.info("fetching feed %s", url.strip())

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(target)
        except httpx.RequestError as e:
            raise FetchError(f"Could not reach feed: {e}") from e

        if response.status_code in (401, 403):
            raise FetchError(
                "Feed is not publicly accessible - publish the sheet to the web as CSV."
            )
        if response.status_code == 404:
            raise FetchError("Feed not found - check the URL.")
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(f"Feed request failed with status {response.status_code}") from e

        logger.debug("feed returned %d bytes", len(response.content))
        return response.text


def get_feed_client(timeout: float = _DEFAULT_TIMEOUT, cache_bust: bool = True) -> FeedClient:
    """Get a feed client instance."""
    return FeedClient(timeout=timeout, cache_bust=cache_bust)
