"""LegalServer REST API client."""

import logging
import re
from typing import Any, Optional
from urllib.parse import unquote

import httpx

from legalserver_mcp.config import Settings, get_settings
from legalserver_mcp.errors import UpstreamHTTPError
from legalserver_mcp.models import DocumentPayload

logger = logging.getLogger(__name__)

USER_AGENT = "legalserver-mcp/1.0"
DOWNLOAD_ENDPOINT = "modules/document/download.php"

_FILENAME_RE = re.compile(r"filename\*=UTF-8''([^;]+)|filename=\"?([^\";]+)\"?", re.IGNORECASE)


def filename_from_disposition(disposition: Optional[str]) -> Optional[str]:
    """Extract the filename from a content-disposition header.

    Handles both ``filename*=UTF-8''<percent-encoded>`` and
    ``filename="<value>"`` forms.
    """
    if not disposition:
        return None
    match = _FILENAME_RE.search(disposition)
    if not match:
        return None
    return unquote(match.group(1) or match.group(2)).strip()


class LegalServerClient:
    """Async client for the LegalServer API.

    Use as an async context manager, or call ``aclose()`` when done.

    Args:
        settings: Connection settings, loaded from the environment if omitted
        transport: Optional httpx transport (tests pass ``httpx.MockTransport``)
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self._http = httpx.AsyncClient(
            base_url=self.settings.base_url,
            headers={
                "Authorization": f"Bearer {self.settings.bearer_token}",
                "User-Agent": USER_AGENT,
            },
            timeout=self.settings.request_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "LegalServerClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, endpoint: str, params: Optional[dict[str, Any]], accept: str) -> httpx.Response:
        """Make an authenticated GET and raise on non-success statuses."""
        clean_params = {key: value for key, value in (params or {}).items() if value is not None}
        logger.debug("GET %s params=%s", endpoint, clean_params)

        response = await self._http.get(endpoint, params=clean_params, headers={"Accept": accept})
        if not response.is_success:
            logger.warning("LegalServer %s returned %d", endpoint, response.status_code)
            raise UpstreamHTTPError(response.status_code, response.reason_phrase)
        return response

    # ============= JSON =============

    async def get_json(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> Any:
        """GET an API endpoint and return the decoded ``{"data": ...}`` envelope."""
        response = await self._request(endpoint, params, accept="application/json")
        return response.json()

    # ============= Documents =============

    async def download_document(
        self,
        document_id: Optional[str] = None,
        document_uuid: Optional[str] = None,
    ) -> DocumentPayload:
        """Download a document's bytes with its content type and filename."""
        params = {"id": document_id or None, "unique_id": document_uuid or None}
        response = await self._request(DOWNLOAD_ENDPOINT, params, accept="*/*")

        payload = DocumentPayload(
            content=response.content,
            mime_type=response.headers.get("content-type") or None,
            filename=filename_from_disposition(response.headers.get("content-disposition")),
        )
        logger.info(
            "Downloaded document %s (%d bytes, %s)",
            payload.filename or document_uuid or document_id,
            payload.size_bytes,
            payload.mime_type,
        )
        return payload
