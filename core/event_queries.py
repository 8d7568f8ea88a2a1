# =============================================================================
# core/event_queries.py  -  Event-Site Query Dispatcher
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Implements the four site tools (fetch_sitemap, get_event_page,
#   search_events, list_all_events).  Each one follows the same pipeline:
#
#       validate params -> fetch -> parse / extract -> format text
#
# THE BOUNDARY RULE:
#   These methods NEVER raise.  An unknown site, a failed fetch, or any
#   unexpected exception is turned into ToolReply.error(...).  A search with
#   zero matches is NOT an error; it is a normal reply that says so.
#
# DEPENDENCY INJECTION:
#   The fetch coroutine is passed in at construction.  Production code uses
#   core.fetcher.fetch_content; tests pass a fake that returns canned XML.
#   An optional `progress` callable receives intermediate status lines
#   ("Fetched 212 sitemap URLs ..."); the MCP server wires it to log_status.
# =============================================================================

import logging
from typing import Awaitable, Callable, Mapping

from core.fetcher import FetchError, fetch_content
from core.models import EventSite, Progress, ToolReply, no_progress
from core.sitemap import extract_text_from_html, parse_sitemap
from core.sites import EVENT_SITES, get_site, valid_sites_text

logger = logging.getLogger(__name__)

Fetch = Callable[[str], Awaitable[str]]


def _plural(count: int, word: str) -> str:
    return word if count == 1 else f"{word}s"


class EventQueries:
    """Stateless handlers for the event-site tools."""

    def __init__(
        self,
        fetch: Fetch = fetch_content,
        sites: Mapping[str, EventSite] = EVENT_SITES,
        progress: Progress = no_progress,
    ):
        self._fetch = fetch
        self._sites = sites
        self._progress = progress

    @property
    def valid_sites(self) -> str:
        return valid_sites_text(self._sites)

    def _site(self, site: str | None) -> EventSite | None:
        return get_site(site, self._sites) if site else None

    def _unknown_site(self, site: str) -> ToolReply:
        return ToolReply.error(
            f'Error: Unknown site "{site}". Valid sites are: {self.valid_sites}'
        )

    async def _sitemap_urls(self, site: EventSite) -> list[str]:
        xml = await self._fetch(site.sitemap_url)
        urls = parse_sitemap(xml)
        self._progress(f"Fetched {len(urls)} sitemap URLs from {site.name}")
        return urls

    def _failure(self, tool: str, exc: Exception) -> ToolReply:
        if isinstance(exc, FetchError):
            logger.warning("%s: %s", tool, exc)
        else:
            logger.exception("%s failed unexpectedly", tool)
        return ToolReply.error(f"Error: {exc}")

    # -------------------------------------------------------------------------
    # fetch_sitemap
    # -------------------------------------------------------------------------
    async def fetch_sitemap(self, site: str) -> ToolReply:
        """Every URL in the site's sitemap, in document order."""
        event_site = self._site(site)
        if event_site is None:
            return self._unknown_site(site)

        try:
            urls = await self._sitemap_urls(event_site)
        except Exception as exc:
            return self._failure("fetch_sitemap", exc)

        joined = "\n".join(urls)
        return ToolReply.ok(
            f"Sitemap for {event_site.name} ({len(urls)} URLs found):\n\n{joined}"
        )

    # -------------------------------------------------------------------------
    # get_event_page
    # -------------------------------------------------------------------------
    def resolve_page_url(self, url: str, site: str | None) -> str | ToolReply:
        """Turn ``url`` (absolute, or relative to ``site``) into a fetchable URL.

        Returns the absolute URL, or an error reply when neither an absolute
        URL nor a known site was given.
        """
        if url.startswith(("http://", "https://")):
            return url
        if not site:
            return ToolReply.error(
                "Error: Must provide either a full URL or a relative path "
                "with a site parameter"
            )

        event_site = self._site(site)
        if event_site is None:
            return self._unknown_site(site)
        if url.startswith("/"):
            return f"{event_site.base_url}{url}"
        return f"{event_site.base_url}/{url}"

    async def get_event_page(
        self,
        url: str,
        site: str | None = None,
        extract_text: bool = True,
    ) -> ToolReply:
        """Fetch one page, as plain text unless ``extract_text`` is False."""
        resolved = self.resolve_page_url(url, site)
        if isinstance(resolved, ToolReply):
            return resolved

        try:
            content = await self._fetch(resolved)
        except Exception as exc:
            return self._failure("get_event_page", exc)

        self._progress(f"Fetched {len(content)} characters from {resolved}")
        if extract_text:
            content = extract_text_from_html(content)
        return ToolReply.ok(f"Content from {resolved}:\n\n{content}")

    # -------------------------------------------------------------------------
    # search_events
    # -------------------------------------------------------------------------
    async def search_events(
        self,
        site: str,
        pattern: str,
        case_insensitive: bool = True,
    ) -> ToolReply:
        """Sitemap URLs containing ``pattern`` as a plain substring."""
        event_site = self._site(site)
        if event_site is None:
            return self._unknown_site(site)

        try:
            urls = await self._sitemap_urls(event_site)
        except Exception as exc:
            return self._failure("search_events", exc)

        matches = filter_urls(urls, pattern, case_insensitive)
        self._progress(f'{len(matches)} of {len(urls)} URLs contain "{pattern}"')
        if not matches:
            return ToolReply.ok(
                f'No URLs found matching pattern "{pattern}" in the '
                f"{event_site.name} sitemap."
            )

        joined = "\n".join(matches)
        return ToolReply.ok(
            f'Found {len(matches)} {_plural(len(matches), "URL")} matching '
            f'"{pattern}" in {event_site.name}:\n\n{joined}'
        )

    # -------------------------------------------------------------------------
    # list_all_events
    # -------------------------------------------------------------------------
    async def list_all_events(self, site: str, limit: int = 50) -> ToolReply:
        """The first ``limit`` sitemap URLs (0 means all of them)."""
        event_site = self._site(site)
        if event_site is None:
            return self._unknown_site(site)

        try:
            urls = await self._sitemap_urls(event_site)
        except Exception as exc:
            return self._failure("list_all_events", exc)

        shown, omitted = truncate_urls(urls, limit)
        text = f"{event_site.name} - Found {len(urls)} total URLs"
        if omitted:
            text += f" (showing first {limit})"
        text += ":\n\n" + "\n".join(shown)
        if omitted:
            text += f"\n\n... and {omitted} more"
        return ToolReply.ok(text)


def filter_urls(urls: list[str], pattern: str, case_insensitive: bool = True) -> list[str]:
    """Keep the URLs that contain ``pattern``; substring match, not regex."""
    if case_insensitive:
        needle = pattern.lower()
        return [u for u in urls if needle in u.lower()]
    return [u for u in urls if pattern in u]


def truncate_urls(urls: list[str], limit: int) -> tuple[list[str], int]:
    """Return (first ``limit`` urls, number omitted).  limit <= 0 keeps all."""
    if limit > 0 and len(urls) > limit:
        return urls[:limit], len(urls) - limit
    return list(urls), 0
