"""Tool definitions advertised to the MCP host."""

from mcp.types import Tool

from legalserver_mcp.models import AccessMode


def tool_definitions() -> list[Tool]:
    return [
        Tool(
            name="search_case_by_number",
            description=(
                "Search for a LegalServer case by case number to get its UUID. "
                "This UUID is required for other operations like retrieving documents."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "case_number": {
                        "type": "string",
                        "description": "The LegalServer case number (e.g., '24-0539721')",
                    }
                },
                "required": ["case_number"],
            },
        ),
        Tool(
            name="get_case_info",
            description=(
                "Retrieve detailed information about a specific case including dates, location, "
                "problem codes, and notes. Requires the case UUID from search_case_by_number."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "case_uuid": {
                        "type": "string",
                        "description": "The UUID of the case (obtained from search_case_by_number)",
                    }
                },
                "required": ["case_uuid"],
            },
        ),
        Tool(
            name="list_case_documents",
            description=(
                "Retrieves a list of all documents associated with a specific case in LegalServer. "
                "Returns document IDs, names, titles, and size/token estimates."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "case_uuid": {
                        "type": "string",
                        "description": "The UUID of the case/matter in LegalServer",
                    }
                },
                "required": ["case_uuid"],
            },
        ),
        Tool(
            name="get_document",
            description=(
                "Retrieve text from a LegalServer document. Prefer mode=\"preview\", \"chunk\", or "
                "\"search\" to avoid loading entire files; use mode=\"full\" only for small documents."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "document_id": {
                        "type": "string",
                        "description": "The internal ID of the document (optional if document_uuid is provided)",
                    },
                    "document_uuid": {
                        "type": "string",
                        "description": (
                            "The UUID (guid) of the document (optional if document_id is provided). "
                            "Preferred - use the guid from list_case_documents."
                        ),
                    },
                    "mode": {
                        "type": "string",
                        "enum": AccessMode.values(),
                        "description": "How much content to return. Default: preview.",
                    },
                    "chunk_index": {
                        "type": "integer",
                        "description": "Zero-based chunk index when mode=chunk.",
                    },
                    "max_chars": {
                        "type": "integer",
                        "description": "Maximum number of characters of text to return (default: 8000).",
                    },
                    "search_query": {
                        "type": "string",
                        "description": "Search term(s) when mode=search; only matching snippets are returned.",
                    },
                },
            },
        ),
    ]
