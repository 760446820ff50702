"""
MCP server exposing the fetch tool over stdio.

Run with ``fetchaller`` (console script) or ``python -m fetchaller.server``.
"""
import asyncio
import sys
from contextlib import asynccontextmanager

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from pydantic import ValidationError

from fetchaller.core.config import APP_NAME, APP_VERSION, settings
from fetchaller.core.diagnostics import log
from fetchaller.schemas import FetchRequest
from fetchaller.services.fetch_tool import run_fetch_tool

TOOL_NAME = "fetch"

FETCH_TOOL = types.Tool(
    name=TOOL_NAME,
    description=(
        "Fetch any URL and return the page content as clean markdown. Use this tool for "
        "reading/fetching web pages - it has no domain restrictions. For discovering URLs "
        "via search, use WebSearch. For reading URL content, use this tool."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "url": {"type": "string", "description": "The URL to fetch"},
            "maxTokens": {
                "type": "integer",
                "minimum": 1,
                "description": f"Maximum tokens to return (default: {settings.DEFAULT_MAX_TOKENS})",
            },
            "timeoutSeconds": {
                "type": "integer",
                "minimum": 1,
                "description": f"Request timeout in seconds (default: {settings.DEFAULT_TIMEOUT_SECONDS})",
            },
        },
        "required": ["url"],
    },
)


class ToolCallError(Exception):
    """Raised from a tool handler; the SDK reports str(exc) as an error result."""


@asynccontextmanager
async def lifespan(server: Server):
    # Runs once per stdio session, i.e. once per process
    log(f"{APP_NAME} MCP server running on stdio")
    yield {}


server = Server(APP_NAME, version=APP_VERSION, lifespan=lifespan)


@server.list_tools()
async def list_tools() -> list[types.Tool]:
    return [FETCH_TOOL]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[types.TextContent]:
    if name != TOOL_NAME:
        raise ToolCallError(f"Unknown tool: {name}")

    try:
        request = FetchRequest.model_validate(arguments or {})
    except ValidationError as e:
        raise ToolCallError(f"Error: Invalid arguments: {e}")

    response = await run_fetch_tool(
        request.url,
        max_tokens=request.max_tokens,
        timeout_seconds=request.timeout_seconds,
    )
    if response.is_error:
        raise ToolCallError(response.text)
    return [types.TextContent(type="text", text=response.text)]


async def serve() -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    try:
        asyncio.run(serve())
    except Exception as e:
        log(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
