"""Tests for MCP server construction and request handling."""

import json

import pytest
from mcp import types
from mcp.server import Server

from conftest import FakeCaseAPI, FakeFetcher
from legalserver_mcp.models import DocumentPayload
from legalserver_mcp.server import SERVER_NAME, create_mcp_server
from legalserver_mcp.tools import ToolDispatcher


@pytest.fixture
def server() -> Server:
    payload = DocumentPayload(content=b"B" * 9000, mime_type="text/plain", filename="letter.txt")
    return create_mcp_server(ToolDispatcher(FakeCaseAPI(), FakeFetcher(payload)))


async def _call_tool(server: Server, name: str, arguments: dict) -> tuple[types.CallToolResult, dict]:
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    result = (await handler(request)).root
    return result, json.loads(result.content[0].text)


class TestCreateMcpServer:
    """create_mcp_server wiring."""

    def test_returns_named_server(self):
        server = create_mcp_server(ToolDispatcher(FakeCaseAPI()))

        assert isinstance(server, Server)
        assert server.name == SERVER_NAME == "legalserver-mcp"

    def test_advertises_tool_capability(self):
        server = create_mcp_server(ToolDispatcher(FakeCaseAPI()))

        options = server.create_initialization_options()

        assert options.server_name == "legalserver-mcp"
        assert options.capabilities.tools is not None

    @pytest.mark.asyncio
    async def test_lists_tools(self, server):
        handler = server.request_handlers[types.ListToolsRequest]

        result = (await handler(types.ListToolsRequest(method="tools/list"))).root

        assert [tool.name for tool in result.tools] == [
            "search_case_by_number",
            "get_case_info",
            "list_case_documents",
            "get_document",
        ]


class TestCallTool:
    """Tool calls sent through the server's request handler."""

    @pytest.mark.asyncio
    async def test_success_body(self, server):
        result, body = await _call_tool(server, "get_document", {"document_id": "1", "max_chars": 4000})

        assert result.isError is False
        assert body["success"] is True
        assert body["document_identifier"] == "letter.txt"
        assert body["approx_chunks"] == 3

    @pytest.mark.asyncio
    async def test_non_numeric_budget_falls_back(self, server):
        result, body = await _call_tool(server, "get_document", {"document_id": "1", "max_chars": "abc"})

        assert result.isError is False
        assert body["success"] is True
        assert body["text"] == "B" * 8000

    @pytest.mark.asyncio
    async def test_unknown_mode_is_structured_failure(self, server):
        result, body = await _call_tool(server, "get_document", {"document_id": "1", "mode": "summary"})

        assert result.isError is False
        assert body["success"] is False
        assert '"summary"' in body["error"]
        assert '"preview", "chunk", "search", or "full"' in body["error"]

    @pytest.mark.asyncio
    async def test_missing_parameter_is_error_envelope(self, server):
        result, body = await _call_tool(server, "get_case_info", {})

        assert result.isError is True
        assert body["error"] is True
        assert body["tool"] == "get_case_info"
        assert body["message"] == "case_uuid is required"
        assert body["suggestion"].startswith("Check the parameters")

    @pytest.mark.asyncio
    async def test_unknown_tool_is_error_envelope(self, server):
        result, body = await _call_tool(server, "delete_case", {})

        assert result.isError is True
        assert body["message"] == "Unknown tool: delete_case"
