"""Extractor for PDF documents using pypdf."""

import io
import logging

from pypdf import PdfReader

from legalserver_mcp.errors import ExtractionError
from legalserver_mcp.models import FormatKind

logger = logging.getLogger(__name__)


class PdfExtractor:
    """Extract the text layer of a PDF.

    Pages are joined with a blank line so that page breaks act as paragraph
    boundaries for search. Scanned PDFs without a text layer yield an empty
    string, which the caller reports as "no text".
    """

    kind = FormatKind.PDF

    def extract(self, content: bytes) -> str:
        try:
            reader = PdfReader(io.BytesIO(content))
            pages = [page.extract_text() or "" for page in reader.pages]
        except Exception as exc:
            logger.warning("PDF parsing error: %s", exc)
            raise ExtractionError(f"Failed to extract PDF text: {exc}") from exc

        logger.debug("Extracted %d PDF pages", len(pages))
        return "\n\n".join(pages)
