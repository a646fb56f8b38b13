"""Bounded views over extracted document text.

A view is computed from scratch on every call: the text is re-chunked with
the requested budget and the requested projection is returned. Nothing is
remembered between calls, so chunk boundaries depend only on the text and
``max_chars``.
"""

import logging
import math
from typing import Any, Optional

from legalserver_mcp.access.search import find_snippets
from legalserver_mcp.chunkers import DEFAULT_MAX_CHARS, FixedSizeChunker
from legalserver_mcp.errors import (
    ChunkRangeError,
    EmptyQueryError,
    NoTextError,
    SizeGuardError,
    UnknownModeError,
)
from legalserver_mcp.models import AccessMode, ExtractedText

logger = logging.getLogger(__name__)

MAX_FULL_TOKENS = 40000

PREVIEW_NOTE = (
    'To retrieve more content, call get_document with mode="chunk" and a '
    "chunk_index between 0 and approx_chunks - 1."
)


def estimate_tokens(length: int) -> int:
    """Rough token count for ``length`` characters (four characters per token)."""
    return math.floor(length / 4 + 0.5)


def _as_int(value: Any) -> Optional[int]:
    """Integral numbers as ``int`` (``2.0`` counts), anything else as None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def coerce_max_chars(value: Any) -> int:
    """Return ``value`` if it is a positive integer, else the default budget."""
    number = _as_int(value)
    if number is not None and number > 0:
        return number
    return DEFAULT_MAX_CHARS


def coerce_chunk_index(value: Any) -> int:
    number = _as_int(value)
    return 0 if number is None else number


def render_view(
    extracted: ExtractedText,
    mode: Optional[str] = None,
    *,
    chunk_index: Any = None,
    max_chars: Any = None,
    search_query: Optional[str] = None,
) -> dict[str, Any]:
    """Compute the requested projection of a document's text.

    Args:
        extracted: Text produced by the format dispatcher
        mode: One of preview, chunk, search, full (default preview)
        chunk_index: Zero-based chunk to return when mode is chunk
        max_chars: Character budget, non-positive or non-integer values
            fall back to 8000
        search_query: Term to look for when mode is search

    Returns:
        Success payload fields, starting with ``mode``

    Raises:
        NoTextError: The text is empty or whitespace, whatever the mode
        SizeGuardError: mode is full and the text exceeds MAX_FULL_TOKENS
        ChunkRangeError: chunk_index outside the chunk set
        EmptyQueryError: mode is search and the query is blank
        UnknownModeError: mode is not an AccessMode value
    """
    mode = mode or AccessMode.PREVIEW.value
    budget = coerce_max_chars(max_chars)

    if extracted.is_empty:
        raise NoTextError()

    text = extracted.text
    total_length = len(text)
    tokens = estimate_tokens(total_length)
    chunks = FixedSizeChunker(budget).chunk(text, extracted.source)
    base = {"total_length": total_length, "estimated_tokens": tokens}

    if mode == AccessMode.FULL.value and tokens > MAX_FULL_TOKENS:
        raise SizeGuardError(tokens, MAX_FULL_TOKENS)

    if mode == AccessMode.PREVIEW.value:
        return {
            "mode": mode,
            **base,
            "approx_chunks": len(chunks),
            "chunk_index": 0,
            "text": chunks[0].text,
            "note": PREVIEW_NOTE,
        }

    if mode == AccessMode.CHUNK.value:
        idx = coerce_chunk_index(chunk_index)
        if idx < 0 or idx >= len(chunks):
            raise ChunkRangeError(idx, len(chunks), total_length)
        return {
            "mode": mode,
            **base,
            "approx_chunks": len(chunks),
            "chunk_index": idx,
            "text": chunks[idx].text,
        }

    if mode == AccessMode.SEARCH.value:
        query = (search_query or "").strip().lower()
        if not query:
            raise EmptyQueryError()
        snippets = find_snippets(text, query, budget)
        logger.debug("Search for %r in %s matched %d snippets", query, extracted.source, len(snippets))
        return {
            "mode": mode,
            "query": query,
            **base,
            "snippet_count": len(snippets),
            "text": "\n\n".join(snippets),
        }

    if mode == AccessMode.FULL.value:
        return {
            "mode": mode,
            **base,
            "truncated": total_length > budget,
            "text": text[:budget],
        }

    raise UnknownModeError(mode, AccessMode.values())
