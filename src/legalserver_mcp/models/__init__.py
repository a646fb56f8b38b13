"""Data models for legalserver-mcp."""

from legalserver_mcp.models.document import (
    AccessMode,
    Chunk,
    DocumentPayload,
    ExtractedText,
    FormatKind,
    ToolResult,
)

__all__ = [
    "AccessMode",
    "Chunk",
    "DocumentPayload",
    "ExtractedText",
    "FormatKind",
    "ToolResult",
]
