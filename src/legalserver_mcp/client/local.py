"""Document source backed by a local file, for offline extraction checks."""

from pathlib import Path
from typing import Any, Optional

from legalserver_mcp.errors import LegalServerMCPError
from legalserver_mcp.models import DocumentPayload


class LocalDocumentSource:
    """Serve a single file from disk as if LegalServer had returned it.

    Args:
        path: File to read
        mime_type: Declared MIME type; None lets the extension decide
    """

    def __init__(self, path: Path | str, mime_type: Optional[str] = None):
        self.path = Path(path)
        self.mime_type = mime_type

    async def get_json(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> Any:
        raise LegalServerMCPError(f"No LegalServer API available for {endpoint} when reading local files")

    async def download_document(
        self,
        document_id: Optional[str] = None,
        document_uuid: Optional[str] = None,
    ) -> DocumentPayload:
        return DocumentPayload(
            content=self.path.read_bytes(),
            mime_type=self.mime_type,
            filename=self.path.name,
        )
