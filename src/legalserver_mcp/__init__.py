"""legalserver-mcp - MCP tools for LegalServer cases and documents."""

__version__ = "1.0.0"
