"""Extractor for word-processor documents using python-docx."""

import io
import logging
from typing import Iterator

from docx import Document
from docx.table import Table

from legalserver_mcp.errors import ExtractionError
from legalserver_mcp.models import FormatKind

logger = logging.getLogger(__name__)


def _iter_block_text(container) -> Iterator[str]:
    """Yield paragraph text in document order, descending into tables.

    A merged cell is repeated in ``row.cells`` for every grid position it
    spans; it is emitted only the first time.
    """
    for block in container.iter_inner_content():
        if isinstance(block, Table):
            seen = set()
            for row in block.rows:
                for cell in row.cells:
                    if cell._tc in seen:
                        continue
                    seen.add(cell._tc)
                    yield from _iter_block_text(cell)
        else:
            yield block.text


class WordExtractor:
    """Extract raw paragraph and table text from an Office Open XML document."""

    kind = FormatKind.WORD

    def extract(self, content: bytes) -> str:
        try:
            document = Document(io.BytesIO(content))
        except Exception as exc:
            logger.warning("Word parsing error: %s", exc)
            raise ExtractionError(f"Failed to extract Word text: {exc}") from exc

        return "\n\n".join(_iter_block_text(document))
