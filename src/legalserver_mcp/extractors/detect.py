"""Format detection from declared MIME type and filename."""

from pathlib import PurePosixPath
from typing import Callable, Optional

from legalserver_mcp.models import FormatKind

DEFAULT_MIME_TYPE = "application/octet-stream"

# Extension -> MIME type, used when LegalServer sends no content-type
_EXT_MIME_MAP: dict[str, str] = {
    ".pdf": "application/pdf",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".doc": "application/msword",
    ".txt": "text/plain",
    ".rtf": "application/rtf",
}

FormatRule = Callable[[str, str], bool]

# Checked in order, first match wins. Arguments are the lower-cased MIME
# type and the lower-cased document identifier.
_FORMAT_RULES: list[tuple[FormatKind, FormatRule]] = [
    (FormatKind.IMAGE, lambda mime, ident: mime.startswith("image/")),
    (FormatKind.TEXT, lambda mime, ident: mime.startswith("text/") or "plain" in mime),
    (FormatKind.PDF, lambda mime, ident: "pdf" in mime or ident.endswith(".pdf")),
    (FormatKind.WORD, lambda mime, ident: "word" in mime or "officedocument" in mime),
]


def guess_mime_type(name: Optional[str]) -> Optional[str]:
    """Guess a MIME type from a filename extension.

    Args:
        name: Filename or identifier, may be None

    Returns:
        The MIME type for known extensions, otherwise None
    """
    if not name:
        return None
    return _EXT_MIME_MAP.get(PurePosixPath(name.lower()).suffix)


def resolve_mime_type(declared: Optional[str], identifier: Optional[str]) -> str:
    """Pick the effective MIME type: declared, then guessed, then the octet-stream default."""
    return declared or guess_mime_type(identifier) or DEFAULT_MIME_TYPE


def detect_format(mime_type: str, identifier: str = "") -> FormatKind:
    """Select the extraction strategy for a MIME type.

    Args:
        mime_type: Effective MIME type of the payload
        identifier: Filename or id of the document (for the .pdf fallback)

    Returns:
        The first matching FormatKind, or FormatKind.UNSUPPORTED
    """
    mime = mime_type.strip().lower()
    ident = (identifier or "").lower()
    for kind, matches in _FORMAT_RULES:
        if matches(mime, ident):
            return kind
    return FormatKind.UNSUPPORTED
