"""Tool handlers exposed over MCP."""

from legalserver_mcp.tools.cases import get_case_info, list_case_documents, search_case_by_number
from legalserver_mcp.tools.dispatcher import ToolDispatcher, ToolResponse
from legalserver_mcp.tools.documents import get_document
from legalserver_mcp.tools.schemas import tool_definitions

__all__ = [
    "ToolDispatcher",
    "ToolResponse",
    "get_case_info",
    "get_document",
    "list_case_documents",
    "search_case_by_number",
    "tool_definitions",
]
