"""Chunking strategies for extracted text."""

from legalserver_mcp.chunkers.fixed_chunker import DEFAULT_MAX_CHARS, FixedSizeChunker

__all__ = ["DEFAULT_MAX_CHARS", "FixedSizeChunker"]
