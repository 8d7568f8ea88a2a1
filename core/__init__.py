# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL query logic for the event-site and design-token
# tool servers.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or any transport framework.
#   Every module here is plain Python (plus httpx for the one network call),
#   so the parsers, the token walker and the CSS renderer can be imported and
#   tested in a bare REPL.
#
# The tools/ layer wraps the dispatchers defined here (EventQueries,
# DesignQueries) in MCP tools.  The dispatchers never raise: every outcome,
# including failures, comes back as a ToolReply.
# =============================================================================
