"""Protocol for format-to-text extractors."""

from typing import Protocol, runtime_checkable

from legalserver_mcp.models import FormatKind


@runtime_checkable
class TextExtractor(Protocol):
    """Protocol for converting a binary payload into a single string.

    Uses structural subtyping - no inheritance required. Implementations
    raise ``ExtractionError`` when the bytes cannot be parsed.
    """

    @property
    def kind(self) -> FormatKind:
        """Return the format this extractor handles."""
        ...

    def extract(self, content: bytes) -> str:
        """Return the text contained in ``content``."""
        ...
