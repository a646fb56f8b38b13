"""The get_document tool: download, extract, then serve a bounded view."""

import logging
from typing import Any

from legalserver_mcp.access import render_view
from legalserver_mcp.errors import DocumentError, MissingParameterError
from legalserver_mcp.extractors import async_extract_text, resolve_mime_type
from legalserver_mcp.models import AccessMode, ToolResult
from legalserver_mcp.protocols import DocumentFetcher
from legalserver_mcp.tools.arguments import optional_argument

logger = logging.getLogger(__name__)


async def get_document(fetcher: DocumentFetcher, arguments: dict[str, Any]) -> ToolResult:
    """Fetch a document and return the view selected by ``mode``.

    Every call downloads and extracts the document again; nothing is
    cached between calls.
    """
    document_id = optional_argument(arguments, "document_id")
    document_uuid = optional_argument(arguments, "document_uuid")
    if not document_id and not document_uuid:
        raise MissingParameterError("Either document_id or document_uuid is required")

    payload = await fetcher.download_document(document_id=document_id, document_uuid=document_uuid)

    identifier = payload.filename or document_id or document_uuid
    mime_type = resolve_mime_type(payload.mime_type, identifier)

    try:
        extracted = await async_extract_text(payload, identifier)
    except DocumentError as exc:
        raise exc.with_context(document_identifier=identifier, mime_type=mime_type)

    mode = arguments.get("mode") or AccessMode.PREVIEW.value
    try:
        view = render_view(
            extracted,
            mode,
            chunk_index=arguments.get("chunk_index"),
            max_chars=arguments.get("max_chars"),
            search_query=arguments.get("search_query"),
        )
    except DocumentError as exc:
        raise exc.with_context(document_identifier=identifier, mode=mode)

    logger.info("Served %s view of %s (%d chars)", view["mode"], identifier, view["total_length"])
    return ToolResult.ok(document_identifier=identifier, **view)
