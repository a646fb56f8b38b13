"""Format-to-text extractors and the format dispatcher."""

import asyncio
import logging
from typing import Optional

from legalserver_mcp.errors import ImageDocumentError, UnsupportedFormatError
from legalserver_mcp.extractors.detect import detect_format, guess_mime_type, resolve_mime_type
from legalserver_mcp.extractors.pdf_extractor import PdfExtractor
from legalserver_mcp.extractors.plain_text import PlainTextExtractor
from legalserver_mcp.extractors.word_extractor import WordExtractor
from legalserver_mcp.models import DocumentPayload, ExtractedText, FormatKind
from legalserver_mcp.protocols import TextExtractor

logger = logging.getLogger(__name__)

# Registry of available extractors
_EXTRACTORS: dict[FormatKind, TextExtractor] = {
    FormatKind.TEXT: PlainTextExtractor(),
    FormatKind.PDF: PdfExtractor(),
    FormatKind.WORD: WordExtractor(),
}


def get_extractor(kind: FormatKind) -> Optional[TextExtractor]:
    """Find the extractor registered for a format.

    Args:
        kind: Format selected by detect_format

    Returns:
        A TextExtractor instance, or None for images and unsupported formats
    """
    return _EXTRACTORS.get(kind)


def register_extractor(extractor: TextExtractor) -> None:
    """Register or replace the extractor for ``extractor.kind``.

    Args:
        extractor: An object implementing the TextExtractor protocol
    """
    _EXTRACTORS[extractor.kind] = extractor


def extract_text(payload: DocumentPayload, identifier: str) -> ExtractedText:
    """Convert a payload to text using the first matching strategy.

    Args:
        payload: Downloaded document
        identifier: Filename or id used in messages and for the .pdf fallback

    Returns:
        ExtractedText; its text may be empty, callers check ``is_empty``

    Raises:
        ImageDocumentError: For image/* payloads, no extraction is attempted
        UnsupportedFormatError: When no strategy matches
        ExtractionError: When the parser rejects the bytes
    """
    mime_type = resolve_mime_type(payload.mime_type, identifier)
    kind = detect_format(mime_type, identifier)
    logger.info("Dispatching %s (%s) to %s extractor", identifier, mime_type, kind.value)

    if kind is FormatKind.IMAGE:
        raise ImageDocumentError(mime_type, payload.size_bytes)

    extractor = get_extractor(kind)
    if extractor is None:
        raise UnsupportedFormatError(mime_type, payload.size_bytes)

    return ExtractedText(text=extractor.extract(payload.content), source=identifier)


async def async_extract_text(payload: DocumentPayload, identifier: str) -> ExtractedText:
    """Async version of extract_text; parsing runs in a worker thread."""
    return await asyncio.to_thread(extract_text, payload, identifier)


__all__ = [
    "extract_text",
    "async_extract_text",
    "detect_format",
    "get_extractor",
    "guess_mime_type",
    "register_extractor",
    "resolve_mime_type",
    "PdfExtractor",
    "PlainTextExtractor",
    "WordExtractor",
]
