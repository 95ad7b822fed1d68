# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the FastMCP server that exposes the single tool of this project,
#   generateContentOutline, plus a plain-text health check at "/".  The tool
#   is a thin wrapper around core/outline.py: it converts the MCP arguments
#   into an OutlineRequest, awaits the adapter and converts the result (or
#   the BackendError) back into MCP terms.
#
# HOW IT WORKS (the flow):
#   1. An MCP client calls "generateContentOutline" with {"topic": ...}
#   2. FastMCP validates the arguments against the input schema and rejects
#      malformed calls before our code runs
#   3. The wrapper below calls OutlineAdapter.generate_outline()
#   4. Success  -> {"outline": ...} as structured content
#      Failure  -> ToolError with the generic message, nothing more
#
# HTTP LAYOUT (see create_app):
#   GET  /      health check, static text, 200
#   *    /mcp   streamable-HTTP MCP transport
# =============================================================================

import json
import logging
import sys
from typing import Annotated

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import BaseModel, Field
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from core.config import Settings
from core.models import OutlineRequest
from core.outline import BackendError, OutlineAdapter

SERVER_NAME = "AI Content Assistant"
SERVER_INSTRUCTIONS = (
    "A powerful assistant to help you brainstorm and structure articles, "
    "blog posts, and essays."
)
TOOL_NAME = "generateContentOutline"
HEALTH_MESSAGE = "AI Content Assistant MCP Server is running and ready to help!"

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR.  Under the stdio transport, STDOUT carries the MCP JSON
# stream and any stray log line would corrupt it.
#
# ANSI colours:
#   CYAN   incoming tool calls
#   YELLOW intermediate status
#   GREEN  responses
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logging.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(result, separators=(',', ':'))}{_RESET}")
    return result


# -----------------------------------------------------------------------------
# Output schema
# -----------------------------------------------------------------------------
# FastMCP derives the tool's output schema from the return annotation.  The
# pydantic model carries the field description that MCP clients display.
# -----------------------------------------------------------------------------
class OutlineOutput(BaseModel):
    outline: str = Field(description="The formatted, multi-level content outline.")


def create_mcp_server(adapter: OutlineAdapter) -> FastMCP:
    """Create the FastMCP server with the outline tool and health route.

    The adapter (and, through it, the backend client) is captured by the
    tool function, so there is no module-level server state.
    """
    mcp = FastMCP(SERVER_NAME, instructions=SERVER_INSTRUCTIONS)

    # =========================================================================
    # TOOL: generateContentOutline
    # =========================================================================
    # The description is what the calling model reads to decide when to use
    # the tool, so it is kept identical to the published contract.
    # =========================================================================
    @mcp.tool(
        name=TOOL_NAME,
        description=(
            "Takes a topic and generates a detailed, structured outline for a "
            "blog post or essay. Perfect for overcoming writer's block."
        ),
    )
    async def generate_content_outline(
        topic: Annotated[
            str,
            Field(
                description=(
                    "The main topic or title of the content you want to write. "
                    'For example: "the future of artificial intelligence".'
                )
            ),
        ],
    ) -> OutlineOutput:
        _log_request(TOOL_NAME, topic=topic)

        try:
            response = await adapter.generate_outline(OutlineRequest(topic=topic))
        except BackendError as e:
            raise ToolError(str(e)) from e

        _log_status(f"Generated outline ({len(response.outline)} chars)")
        return OutlineOutput(**_log_response(TOOL_NAME, {"outline": response.outline}))

    # =========================================================================
    # ROUTE: GET /  (health check)
    # =========================================================================
    # Static text; does not touch the backend.
    # =========================================================================
    @mcp.custom_route("/", methods=["GET"])
    async def health_check(request: Request) -> PlainTextResponse:
        return PlainTextResponse(HEALTH_MESSAGE)

    return mcp


def create_app(mcp: FastMCP, settings: Settings):
    """Build the ASGI app: MCP under ``settings.mcp_path``, custom routes at root."""
    return mcp.http_app(path=settings.mcp_path)
