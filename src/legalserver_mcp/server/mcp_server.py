"""MCP server implementation for LegalServer."""

import logging

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from legalserver_mcp.client import LegalServerClient
from legalserver_mcp.config import Settings
from legalserver_mcp.tools import ToolDispatcher, tool_definitions

logger = logging.getLogger(__name__)

SERVER_NAME = "legalserver-mcp"


class ToolCallError(Exception):
    """Carries an error envelope out of call_tool so it is flagged isError."""


def create_mcp_server(dispatcher: ToolDispatcher) -> Server:
    """Create an MCP server exposing the LegalServer tools.

    Design: the server holds no document state. Every call goes through
    the dispatcher, which fetches and extracts afresh.

    Args:
        dispatcher: Tool dispatcher bound to a LegalServer client

    Returns:
        Configured low-level MCP Server instance
    """
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return tool_definitions()

    # the dispatcher owns argument handling, so schema checks are skipped
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        response = await dispatcher.dispatch(name, arguments)
        if response.is_error:
            # raised exceptions come back to the host as isError results
            raise ToolCallError(response.to_json())
        return [TextContent(type="text", text=response.to_json())]

    return server


async def run_stdio(settings: Settings) -> None:
    """Serve the tools over stdio until the host closes the stream."""
    async with LegalServerClient(settings) as client:
        server = create_mcp_server(ToolDispatcher(client))
        logger.info("LegalServer MCP server is running against %s", settings.base_url)
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
