# =============================================================================
# tools/event_server.py  -  FastMCP server for the event websites
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the four site tools of core/event_queries.py over MCP:
#
#     fetch_sitemap    - every URL of a site's sitemap
#     get_event_page   - one page, as text (or raw HTML)
#     search_events    - sitemap URLs containing a substring
#     list_all_events  - the first N sitemap URLs
#
# HOW IT WORKS:
#   1. The client calls a tool by name (e.g. "search_events")
#   2. FastMCP validates the arguments against the typed signature below;
#      `site` is a Literal, so the published schema carries the enum
#   3. The wrapper logs the call and awaits the EventQueries method, whose
#      progress lines are logged in yellow by log_status
#   4. replies.deliver() turns the ToolReply into text or an isError result
#
# RUNNING THIS SERVER:
#     python main.py events                     (stdio, the default)
#     python main.py events --transport http
# =============================================================================

from typing import Literal

from fastmcp import FastMCP

from core.event_queries import EventQueries
from core.sites import list_site_ids
from tools.replies import deliver
from tools.tool_logging import log_banner, log_request, log_status

SERVER_NAME = "event-info-server"
SERVER_VERSION = "1.0.0"

Site = Literal["pmc", "unpaved", "wintercycle"]

EVENT_TOOLS = {
    "fetch_sitemap": "Get the sitemap for an event site",
    "get_event_page": "Fetch a specific event page",
    "search_events": "Search for events by URL pattern",
    "list_all_events": "List all URLs from a site",
}


def create_event_server(queries: EventQueries | None = None) -> FastMCP:
    """Build the event-info FastMCP server around ``queries``."""
    queries = queries or EventQueries(progress=log_status)
    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)

    # -------------------------------------------------------------------------
    # TOOL 1: fetch_sitemap
    # -------------------------------------------------------------------------
    @mcp.tool(output_schema=None)
    async def fetch_sitemap(site: Site) -> str:
        """Fetch and parse the sitemap for an event site.

        Supported sites: pmc, unpaved, wintercycle.  Returns every URL found in
        the sitemap, in sitemap order.  Use it to discover event pages.

        Args:
            site: The event site to fetch the sitemap from.
        """
        log_request("fetch_sitemap", site=site)
        return deliver("fetch_sitemap", await queries.fetch_sitemap(site))

    # -------------------------------------------------------------------------
    # TOOL 2: get_event_page
    # -------------------------------------------------------------------------
    # `url` may be absolute ("https://...") or relative ("/events/2026");
    # a relative path needs `site` to know which base URL to join it to.
    # -------------------------------------------------------------------------
    @mcp.tool(output_schema=None)
    async def get_event_page(
        url: str,
        site: Site | None = None,
        extractText: bool = True,
    ) -> str:
        """Fetch the content of a specific event page.

        Provide either a full URL or a relative path plus `site`.  The HTML is
        converted to plain text unless extractText is false.  Use
        fetch_sitemap or search_events first to discover pages.

        Args:
            url: Full URL (https://...) or relative path (/event/...).
            site: The event site, required for relative paths.
            extractText: Extract plain text from the HTML (default true).
                Set to false to get the raw HTML.
        """
        log_request("get_event_page", url=url, site=site, extractText=extractText)
        reply = await queries.get_event_page(url, site=site, extract_text=extractText)
        return deliver("get_event_page", reply)

    # -------------------------------------------------------------------------
    # TOOL 3: search_events
    # -------------------------------------------------------------------------
    @mcp.tool(output_schema=None)
    async def search_events(
        site: Site,
        pattern: str,
        caseInsensitive: bool = True,
    ) -> str:
        """Search a site's sitemap for URLs containing a pattern.

        Plain substring matching, not regex.  Returns matching URLs that can be
        passed to get_event_page.  Zero matches is reported as a normal result.

        Args:
            site: The event site to search.
            pattern: Text to look for in URLs (e.g. "event", "ride", "2026").
            caseInsensitive: Ignore case when matching (default true).
        """
        log_request("search_events", site=site, pattern=pattern, caseInsensitive=caseInsensitive)
        reply = await queries.search_events(site, pattern, case_insensitive=caseInsensitive)
        return deliver("search_events", reply)

    # -------------------------------------------------------------------------
    # TOOL 4: list_all_events
    # -------------------------------------------------------------------------
    @mcp.tool(output_schema=None)
    async def list_all_events(site: Site, limit: int = 50) -> str:
        """List the URLs from a site's sitemap.

        Gives an overview of every page the site publishes, in sitemap order,
        and says how many were left out.

        Args:
            site: The event site to list URLs from.
            limit: Maximum number of URLs to return (default 50, 0 = no limit).
        """
        log_request("list_all_events", site=site, limit=limit)
        return deliver("list_all_events", await queries.list_all_events(site, limit=limit))

    return mcp


def log_startup() -> None:
    log_banner(
        f"{SERVER_NAME} {SERVER_VERSION}",
        f"Supported sites: {', '.join(list_site_ids())}",
        EVENT_TOOLS,
    )


if __name__ == "__main__":
    from tools.tool_logging import configure_logging

    configure_logging()
    log_startup()
    create_event_server().run()
