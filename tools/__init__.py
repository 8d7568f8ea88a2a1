# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP servers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between MCP clients and the core/
#   query logic.  Each server module here:
#     1. Builds a FastMCP instance around an injected core/ dispatcher
#     2. Declares the tools with typed (Literal-enum) parameters
#     3. Logs each call and converts ToolReply into the MCP envelope
#
#   event_server.py   - "event-info-server": sitemap and page tools (stdio)
#   design_server.py  - "design-standards-server": design-token tools, plus
#                       /healthz and / routes next to the /mcp endpoint
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT parse sitemaps, walk token trees, or render CSS (core/ does)
#   - They do NOT hold state between calls
# =============================================================================
