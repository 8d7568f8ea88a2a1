# =============================================================================
# main.py  -  Entry Point for the event-site and design-token MCP servers
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py events                      # stdio (default)
#   uv run python main.py design                      # HTTP on $HOST:$PORT
#   uv run python main.py design --transport stdio
#   uv run python main.py design --port 9000
#
# WHAT HAPPENS:
#   1. .env is loaded (PORT, HOST, DESIGN_STANDARDS_PATH, LOG_LEVEL)
#   2. Logging goes to stderr (stdout belongs to the stdio transport)
#   3. For "design", the design-token JSON is loaded once.  If that fails
#      the process exits with status 1: no design tool can work without it.
#   4. The selected FastMCP server runs until interrupted.
# =============================================================================

import argparse
import logging
import sys

from dotenv import load_dotenv

from core.config import ConfigError, Settings, load_settings
from core.design_tokens import DocumentLoadError, load_document
from tools.design_server import MCP_PATH, create_design_server
from tools.design_server import log_startup as log_design_startup
from tools.event_server import create_event_server
from tools.event_server import log_startup as log_event_startup
from tools.tool_logging import configure_logging

logger = logging.getLogger("main")

DEFAULT_TRANSPORTS = {"events": "stdio", "design": "http"}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="main.py",
        description="Run the event-site or design-standards MCP server.",
    )
    parser.add_argument("server", choices=sorted(DEFAULT_TRANSPORTS), help="Which server to run")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        help="MCP transport (default: stdio for events, http for design)",
    )
    parser.add_argument("--host", help="Bind address for http (overrides $HOST)")
    parser.add_argument("--port", type=int, help="Port for http (overrides $PORT)")
    return parser


def run_server(args: argparse.Namespace, settings: Settings) -> int:
    transport = args.transport or DEFAULT_TRANSPORTS[args.server]

    if args.server == "design":
        try:
            document = load_document(settings.design_standards_path)
        except DocumentLoadError as exc:
            logger.critical(f"Error loading design standards: {exc}")
            return 1
        log_design_startup(document)
        mcp = create_design_server(document)
    else:
        log_event_startup()
        mcp = create_event_server()

    if transport == "stdio":
        logger.info("Serving over stdio")
        mcp.run(transport="stdio")
        return 0

    host = args.host or settings.host
    port = args.port or settings.port
    logger.info(f"Listening on http://{host}:{port}")
    logger.info(f"MCP endpoint: http://{host}:{port}{MCP_PATH}")
    mcp.run(transport="http", host=host, port=port, path=MCP_PATH)
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = _build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as exc:
        configure_logging()
        logger.critical(f"Invalid configuration: {exc}")
        return 1

    configure_logging(settings.log_level)
    return run_server(args, settings)


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    sys.exit(main())
