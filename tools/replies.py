# =============================================================================
# tools/replies.py  -  ToolReply -> MCP result
# =============================================================================
# A successful reply becomes the tool's text content.  An error reply is
# raised as ToolError: FastMCP catches it and answers with a CallToolResult
# whose isError is true and whose text is exactly reply.text.
#
# Every tool is registered with output_schema=None, so a result is only
# {content: [{type: "text", text}], isError} with no structuredContent.
# =============================================================================

from fastmcp.exceptions import ToolError

from core.models import ToolReply
from tools.tool_logging import log_reply


def deliver(tool_name: str, reply: ToolReply) -> str:
    log_reply(tool_name, reply)
    if reply.is_error:
        raise ToolError(reply.text)
    return reply.text
