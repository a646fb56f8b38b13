"""Protocol for text chunking strategies."""

from typing import Protocol, runtime_checkable

from legalserver_mcp.models import Chunk


@runtime_checkable
class ChunkingStrategy(Protocol):
    """Protocol for text chunking strategies.

    Chunk boundaries must be a pure function of the text and the strategy's
    settings, so a caller paging through indices across separate calls sees
    the same partition every time.
    """

    def chunk(self, text: str, source: str) -> list[Chunk]:
        """Split text into ordered chunks with position metadata."""
        ...
