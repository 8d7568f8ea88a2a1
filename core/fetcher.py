# =============================================================================
# core/fetcher.py  -  Remote Content Fetcher
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Performs one HTTP GET against an absolute URL and hands back the body as
#   text.  That is the only suspension point in the whole system: a site tool
#   awaits here while the network round trip completes.
#
# WHAT IT DELIBERATELY DOES NOT DO:
#   - No retries.  One attempt, then success or FetchError.
#   - No custom timeout.  httpx's default applies.
#   - No caching.  Every call goes to the network.
#
# TESTING:
#   Pass an httpx.AsyncClient built on httpx.MockTransport and no socket is
#   ever opened.
# =============================================================================

import logging

import httpx

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when a remote page cannot be retrieved."""

    def __init__(self, url: str, cause: str):
        self.url = url
        self.cause = cause
        super().__init__(f"Failed to fetch from {url}: {cause}")


async def fetch_content(url: str, client: httpx.AsyncClient | None = None) -> str:
    """GET ``url`` and return the decoded response body.

    Args:
        url: An absolute http(s) URL.
        client: Optional shared client.  When omitted, a short-lived client
            is opened for this single request.

    Raises:
        FetchError: on a non-success status or any transport failure.  The
            message always names the URL and the status or cause.
    """
    if client is None:
        async with httpx.AsyncClient(follow_redirects=True) as own_client:
            return await _get_text(own_client, url)
    return await _get_text(client, url)


async def _get_text(client: httpx.AsyncClient, url: str) -> str:
    try:
        response = await client.get(url)
    except httpx.HTTPError as exc:
        logger.debug("GET %s failed: %r", url, exc)
        raise FetchError(url, str(exc) or exc.__class__.__name__) from exc

    if not response.is_success:
        raise FetchError(url, f"HTTP status {response.status_code}")
    return response.text
