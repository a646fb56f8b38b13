"""MCP server wiring."""

from legalserver_mcp.server.mcp_server import SERVER_NAME, ToolCallError, create_mcp_server, run_stdio

__all__ = ["SERVER_NAME", "ToolCallError", "create_mcp_server", "run_stdio"]
