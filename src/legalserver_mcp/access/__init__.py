"""Chunk/access engine: preview, chunk, search and guarded full-text views."""

from legalserver_mcp.access.engine import (
    MAX_FULL_TOKENS,
    coerce_chunk_index,
    coerce_max_chars,
    estimate_tokens,
    render_view,
)
from legalserver_mcp.access.search import find_snippets, split_paragraphs

__all__ = [
    "MAX_FULL_TOKENS",
    "coerce_chunk_index",
    "coerce_max_chars",
    "estimate_tokens",
    "find_snippets",
    "render_view",
    "split_paragraphs",
]
