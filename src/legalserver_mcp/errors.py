"""Exception hierarchy for legalserver-mcp.

Two families exist. ``DocumentError`` subclasses describe an expected,
caller-facing outcome of reading a document (unsupported format, bad chunk
index, ...) and are turned into ``success: false`` tool results. Everything
else raised inside a tool handler becomes an RPC error envelope.
"""

from typing import Any, Optional

from legalserver_mcp.models import ToolResult


class LegalServerMCPError(Exception):
    """Base class for all errors raised by this package."""


class MissingParameterError(LegalServerMCPError):
    """A required tool argument was absent or empty."""


class UpstreamHTTPError(LegalServerMCPError):
    """LegalServer answered with a non-success HTTP status."""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"LegalServer API error: {status_code} {reason}")


class DocumentError(LegalServerMCPError):
    """A document could not be served in the requested way.

    Args:
        message: Human readable error, returned as the ``error`` field
        suggestion: Next step for the calling agent, if any
        **fields: Extra fields merged into the failure payload
    """

    default_suggestion: Optional[str] = None

    def __init__(self, message: str, suggestion: Optional[str] = None, **fields: Any):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion if suggestion is not None else self.default_suggestion
        self.fields = fields
        self.context: dict[str, Any] = {}

    def with_context(self, **context: Any) -> "DocumentError":
        """Attach call details (document identifier, mode, ...) and return self."""
        self.context.update(context)
        return self

    def to_result(self) -> ToolResult:
        """Build the failure result, with call context fields first."""
        return ToolResult.fail(self.message, self.suggestion, **{**self.context, **self.fields})


class UnsupportedFormatError(DocumentError):
    """The MIME type has no extraction strategy."""

    def __init__(self, mime_type: str, size_bytes: int):
        super().__init__(
            "Unsupported document format for text extraction",
            suggestion=(
                f"This document type ({mime_type}) cannot be read directly. "
                "Supported formats: PDF, Word, plain text. Please ask the user "
                "if they can provide the document in a supported format."
            ),
            size_bytes=size_bytes,
        )
        self.mime_type = mime_type


class ImageDocumentError(DocumentError):
    """The document is an image; text would require OCR."""

    def __init__(self, mime_type: str, size_bytes: int):
        super().__init__(
            "Image document - OCR not available",
            suggestion=(
                "This is an image file. To read text from images, OCR (Optical "
                "Character Recognition) would be needed. Please ask the user to "
                "describe the image content or provide it in text format."
            ),
            size_bytes=size_bytes,
        )
        self.mime_type = mime_type


class ExtractionError(DocumentError):
    """A parser failed on the document bytes."""

    default_suggestion = (
        "The document could not be processed. It may be corrupted or in an unsupported format."
    )

    def __init__(self, message: str):
        super().__init__(f"Failed to extract text: {message}")
        self.reason = message


class NoTextError(DocumentError):
    """Extraction succeeded but produced only whitespace."""

    def __init__(self) -> None:
        super().__init__("No text content could be extracted from this document.")


class ChunkRangeError(DocumentError):
    """chunk_index lies outside the chunk set."""

    def __init__(self, index: int, chunk_count: int, total_length: int):
        super().__init__(
            f"chunk_index {index} out of range (0-{chunk_count - 1})",
            total_length=total_length,
            approx_chunks=chunk_count,
        )
        self.index = index
        self.chunk_count = chunk_count


class EmptyQueryError(DocumentError):
    """mode=search was requested without a usable query."""

    def __init__(self) -> None:
        super().__init__('search_query is required when mode is "search".')


class UnknownModeError(DocumentError):
    """The mode argument is not one of the access modes."""

    def __init__(self, mode: str, accepted: list[str]):
        quoted = ", ".join(f'"{value}"' for value in accepted[:-1])
        super().__init__(f'Unsupported mode "{mode}". Use {quoted}, or "{accepted[-1]}".')
        self.mode = mode


class SizeGuardError(DocumentError):
    """Full-text retrieval refused because the document is too large."""

    default_suggestion = 'Call get_document with mode="preview", "chunk", or "search" instead.'

    def __init__(self, estimated_tokens: int, limit: int):
        super().__init__(
            "Document too large for full retrieval in a single call.",
            estimated_tokens=estimated_tokens,
        )
        self.limit = limit
