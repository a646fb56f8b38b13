"""Core data models for fetched documents, extracted text and chunks."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class AccessMode(str, Enum):
    """Projection of a document's text returned by get_document."""

    PREVIEW = "preview"
    CHUNK = "chunk"
    SEARCH = "search"
    FULL = "full"

    @classmethod
    def values(cls) -> list[str]:
        return [mode.value for mode in cls]


class FormatKind(str, Enum):
    """Extraction strategy selected for a payload."""

    IMAGE = "image"
    TEXT = "text"
    PDF = "pdf"
    WORD = "word"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class DocumentPayload:
    """A binary document as downloaded from LegalServer."""

    content: bytes
    mime_type: Optional[str] = None
    filename: Optional[str] = None  # from the content-disposition header

    @property
    def size_bytes(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class ExtractedText:
    """Text derived from a DocumentPayload."""

    text: str
    source: str

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()


@dataclass(frozen=True)
class Chunk:
    """A contiguous slice of extracted text."""

    text: str
    source: str
    chunk_index: int
    start_char: int
    end_char: int


@dataclass(frozen=True)
class ToolResult:
    """Outcome of a tool handler, flattened to a JSON object for the caller."""

    success: bool
    payload: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, **fields: Any) -> "ToolResult":
        return cls(success=True, payload=fields)

    @classmethod
    def fail(cls, error: str, suggestion: Optional[str] = None, **fields: Any) -> "ToolResult":
        payload: dict[str, Any] = dict(fields)
        payload["error"] = error
        if suggestion is not None:
            payload["suggestion"] = suggestion
        return cls(success=False, payload=payload)

    def to_dict(self) -> dict[str, Any]:
        return {"success": self.success, **self.payload}
