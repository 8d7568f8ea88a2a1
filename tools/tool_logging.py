# =============================================================================
# tools/tool_logging.py  -  Colored request/response logging for MCP tools
# =============================================================================
#
# We log to STDERR because a stdio MCP server talks to its client over
# STDOUT.  A single log line on stdout would corrupt the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - YELLOW for intermediate status/progress messages
#     - GREEN for successful responses
#     - RED for error responses (the ones sent back with isError: true)
# =============================================================================

import json
import logging
import sys

from core.models import ToolReply

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"

# Long page bodies and stylesheets are cut in the log, never in the reply.
_MAX_LOGGED_CHARS = 300

logger = logging.getLogger("mcp.tools")


def configure_logging(level: str = "INFO") -> None:
    """Send all log output to stderr with a compact timestamped format."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def log_reply(tool_name: str, reply: ToolReply) -> ToolReply:
    """Log the reply envelope as compact JSON, then return it unchanged."""
    envelope = json.dumps(reply.to_envelope(), separators=(",", ":"), ensure_ascii=False)
    if len(envelope) > _MAX_LOGGED_CHARS:
        envelope = envelope[:_MAX_LOGGED_CHARS] + f"... ({len(envelope)} chars)"
    color = _RED if reply.is_error else _GREEN
    logger.info(f"{color}  ← {tool_name} response: {envelope}{_RESET}")
    return reply


def log_banner(server_name: str, detail: str, tools: dict[str, str]) -> None:
    """Startup summary: server identity plus one line per available tool."""
    logger.info(f"{server_name} starting")
    logger.info(detail)
    logger.info("Available tools:")
    for name, summary in tools.items():
        logger.info(f"  - {name}: {summary}")
