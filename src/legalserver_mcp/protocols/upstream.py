"""Protocols for the LegalServer collaborators used by the tools."""

from typing import Any, Optional, Protocol, runtime_checkable

from legalserver_mcp.models import DocumentPayload


@runtime_checkable
class CaseAPI(Protocol):
    """JSON side of the LegalServer API."""

    async def get_json(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> Any:
        """GET ``endpoint`` and return the decoded JSON body.

        Raises ``UpstreamHTTPError`` for non-success statuses.
        """
        ...


@runtime_checkable
class DocumentFetcher(Protocol):
    """Binary side of the LegalServer API."""

    async def download_document(
        self,
        document_id: Optional[str] = None,
        document_uuid: Optional[str] = None,
    ) -> DocumentPayload:
        """Download a document by internal id and/or guid."""
        ...
