"""Protocol definitions for extensible components."""

from legalserver_mcp.protocols.chunker import ChunkingStrategy
from legalserver_mcp.protocols.extractor import TextExtractor
from legalserver_mcp.protocols.upstream import CaseAPI, DocumentFetcher

__all__ = ["TextExtractor", "ChunkingStrategy", "CaseAPI", "DocumentFetcher"]
