"""Fixed-size chunking strategy."""

from legalserver_mcp.models import Chunk

DEFAULT_MAX_CHARS = 8000


class FixedSizeChunker:
    """Split text into consecutive slices of at most ``max_chars`` characters.

    Every chunk except the last is exactly ``max_chars`` long, chunks never
    overlap, and joining them gives back the original text.
    """

    def __init__(self, max_chars: int = DEFAULT_MAX_CHARS):
        if max_chars <= 0:
            raise ValueError("max_chars must be greater than 0")
        self.max_chars = max_chars

    def chunk(self, text: str, source: str) -> list[Chunk]:
        """Split text into chunks with metadata.

        Args:
            text: The text content to chunk
            source: Identifier of the document (for metadata)

        Returns:
            List of Chunk objects in document order, empty for empty text
        """
        chunks = []
        for idx, start in enumerate(range(0, len(text), self.max_chars)):
            piece = text[start : start + self.max_chars]
            chunks.append(
                Chunk(
                    text=piece,
                    source=source,
                    chunk_index=idx,
                    start_char=start,
                    end_char=start + len(piece),
                )
            )
        return chunks
