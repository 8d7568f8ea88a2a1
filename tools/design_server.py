# =============================================================================
# tools/design_server.py  -  FastMCP server for the design-token document
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the seven design-token tools of core/design_queries.py over MCP,
#   and, when served over HTTP, two plain routes next to the MCP endpoint:
#
#     GET  /healthz  ->  200 "ok"
#     GET  /         ->  JSON descriptor (name, version, brands, tools)
#     *    /mcp      ->  streamable-HTTP MCP endpoint
#
# SESSIONS:
#   The /mcp endpoint is session-multiplexed by the MCP SDK: a request without
#   an "mcp-session-id" header opens a new session, later requests carrying
#   the id are routed to it, and the entry is dropped when the session closes.
#   The tools themselves hold no per-session state, so one server instance
#   serves every session.
#
# THE DOCUMENT:
#   create_design_server() receives an already-loaded DesignTokenDocument.
#   Loading (and failing fatally) is main.py's job.
# =============================================================================

from typing import Literal

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse

from core.design_queries import DesignQueries
from core.design_tokens import DesignTokenDocument
from tools.replies import deliver
from tools.tool_logging import log_banner, log_request, log_status

SERVER_NAME = "design-standards-server"
SERVER_VERSION = "2.0.0"
MCP_PATH = "/mcp"
HEALTH_PATH = "/healthz"

Brand = Literal["pmc", "unpaved", "wintercycle", "admin"]
OutputFormat = Literal["json", "css"]
VariableCategory = Literal["colors", "borderRadius", "boxShadow", "fontFamily", "fontFiles"]
Component = Literal[
    "buttons", "cards", "modals", "spacing",
    "typography", "mediaQueries", "contrast", "accessibility",
]
StylesheetComponent = Literal["buttons", "cards", "modals", "typography"]
UsageCategory = Literal["colors", "typography", "spacing", "accessibility", "all"]

DESIGN_TOOLS = {
    "list_brands": "List all available brands",
    "get_brand_styles": "Get complete styles for a brand",
    "get_css_variables": "Get CSS variables for a brand/category",
    "get_css_rules": "Get CSS rules for components",
    "generate_css": "Generate complete CSS stylesheet",
    "search_design_standards": "Search through design standards",
    "get_usage_guidelines": "Get usage guidelines and best practices",
}


def server_descriptor(document: DesignTokenDocument) -> dict:
    """Body of GET /."""
    return {
        "name": SERVER_NAME,
        "version": SERVER_VERSION,
        "status": "running",
        "endpoints": {"health": HEALTH_PATH, "mcp": MCP_PATH},
        "supportedBrands": document.brand_ids,
        "availableTools": list(DESIGN_TOOLS),
    }


def create_design_server(document: DesignTokenDocument) -> FastMCP:
    """Build the design-standards FastMCP server around ``document``."""
    queries = DesignQueries(document, progress=log_status)
    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)

    # =========================================================================
    # HTTP routes (only reachable with the http transport)
    # =========================================================================
    @mcp.custom_route(HEALTH_PATH, methods=["GET"])
    async def healthz(request: Request) -> PlainTextResponse:
        return PlainTextResponse("ok")

    @mcp.custom_route("/", methods=["GET"])
    async def root(request: Request) -> JSONResponse:
        return JSONResponse(server_descriptor(document))

    # =========================================================================
    # TOOL 1: list_brands
    # =========================================================================
    @mcp.tool(output_schema=None)
    def list_brands() -> str:
        """List all brands in the design standards system.

        Returns each brand id with its full name, short name, and whether CSS
        variables, SASS variables and assets are defined for it.
        """
        log_request("list_brands")
        return deliver("list_brands", queries.list_brands())

    # =========================================================================
    # TOOL 2: get_brand_styles
    # =========================================================================
    @mcp.tool(output_schema=None)
    def get_brand_styles(brand: Brand, format: OutputFormat = "json") -> str:
        """Get the complete design standards for one brand.

        Supported brands: pmc, unpaved, wintercycle, admin.  "json" returns the
        brand's CSS variables, font definitions, assets and SASS variables;
        "css" returns the variables as a ready-to-use :root block.

        Args:
            brand: The brand to get styles for.
            format: "json" for structured data or "css" for CSS code.
        """
        log_request("get_brand_styles", brand=brand, format=format)
        return deliver("get_brand_styles", queries.get_brand_styles(brand, format))

    # =========================================================================
    # TOOL 3: get_css_variables
    # =========================================================================
    @mcp.tool(output_schema=None)
    def get_css_variables(
        brand: Brand,
        category: VariableCategory | None = None,
        format: OutputFormat = "json",
    ) -> str:
        """Get the CSS variables of a brand, optionally for one category.

        Categories: colors, borderRadius, boxShadow, fontFamily, fontFiles.
        fontFiles holds font URLs and is never emitted in "css" format.

        Args:
            brand: The brand to get CSS variables for.
            category: One category to return.  Omit for all of them.
            format: "json" or "css".
        """
        log_request("get_css_variables", brand=brand, category=category, format=format)
        return deliver("get_css_variables", queries.get_css_variables(brand, category, format))

    # =========================================================================
    # TOOL 4: get_css_rules
    # =========================================================================
    @mcp.tool(output_schema=None)
    def get_css_rules(
        component: Component,
        format: OutputFormat = "json",
        brand: Brand | None = None,
    ) -> str:
        """Get the CSS rules for a UI component.

        Components: buttons, cards, modals, spacing, typography, mediaQueries,
        contrast, accessibility.  In "css" format, buttons, cards and modals
        are rendered as classes named .<brand>-<component> (plus :hover when
        defined); other components are always returned as JSON.

        Args:
            component: The component type to get rules for.
            format: "json" or "css".
            brand: Class-name prefix for "css" output (default "component").
        """
        log_request("get_css_rules", component=component, format=format, brand=brand)
        return deliver("get_css_rules", queries.get_css_rules(component, format, brand))

    # =========================================================================
    # TOOL 5: generate_css
    # =========================================================================
    @mcp.tool(output_schema=None)
    def generate_css(
        brand: Brand,
        includeComponents: list[StylesheetComponent] | None = None,
    ) -> str:
        """Generate a complete CSS stylesheet for a brand.

        The stylesheet holds every CSS variable of the brand in a :root block,
        followed by the component classes (.<brand>-<component>).

        Args:
            brand: The brand to generate CSS for.
            includeComponents: Components to include, in order.  Defaults to
                buttons, cards and modals.
        """
        log_request("generate_css", brand=brand, includeComponents=includeComponents)
        return deliver("generate_css", queries.generate_css(brand, includeComponents))

    # =========================================================================
    # TOOL 6: search_design_standards
    # =========================================================================
    @mcp.tool(output_schema=None)
    def search_design_standards(
        query: str,
        caseSensitive: bool = False,
        maxResults: int = 20,
    ) -> str:
        """Search all design standards for a term or a color value.

        Matches keys, dotted paths and string values.  Useful for finding where
        a value is used or what options exist for a property.

        Args:
            query: The search term (e.g. "primary", "#AB292C", "radius").
            caseSensitive: Case-sensitive matching (default false).
            maxResults: Maximum number of results to return (default 20).
        """
        log_request("search_design_standards", query=query,
                    caseSensitive=caseSensitive, maxResults=maxResults)
        reply = queries.search_design_standards(query, caseSensitive, maxResults)
        return deliver("search_design_standards", reply)

    # =========================================================================
    # TOOL 7: get_usage_guidelines
    # =========================================================================
    @mcp.tool(output_schema=None)
    def get_usage_guidelines(category: UsageCategory = "all") -> str:
        """Get usage guidelines and best practices for the design standards.

        Covers colors, typography, spacing, accessibility and implementation
        patterns.

        Args:
            category: One guideline category, or "all" (default).
        """
        log_request("get_usage_guidelines", category=category)
        return deliver("get_usage_guidelines", queries.get_usage_guidelines(category))

    return mcp


def log_startup(document: DesignTokenDocument) -> None:
    log_banner(
        f"{SERVER_NAME} {SERVER_VERSION}",
        f"Supported brands: {', '.join(document.brand_ids)}",
        DESIGN_TOOLS,
    )
