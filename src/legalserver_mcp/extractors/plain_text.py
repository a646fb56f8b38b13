"""Extractor for plain text documents."""

from legalserver_mcp.models import FormatKind


class PlainTextExtractor:
    """Decode bytes as UTF-8, replacing invalid sequences."""

    kind = FormatKind.TEXT

    def extract(self, content: bytes) -> str:
        return content.decode("utf-8", errors="replace")
