"""Routes tool calls to handlers and converts every failure into a payload."""

import json
import logging
from dataclasses import dataclass
from functools import partial
from typing import Any, Awaitable, Callable, Optional

from legalserver_mcp.errors import DocumentError, LegalServerMCPError
from legalserver_mcp.models import ToolResult
from legalserver_mcp.protocols import CaseAPI, DocumentFetcher
from legalserver_mcp.tools.cases import get_case_info, list_case_documents, search_case_by_number
from legalserver_mcp.tools.documents import get_document

logger = logging.getLogger(__name__)

ERROR_SUGGESTION = (
    "Check the parameters and try again. Ensure the case exists and you have proper permissions."
)

ToolHandler = Callable[[dict[str, Any]], Awaitable[ToolResult]]


@dataclass(frozen=True)
class ToolResponse:
    """What a tool call returns to the host: a JSON body and an error flag."""

    body: dict[str, Any]
    is_error: bool = False

    def to_json(self) -> str:
        return json.dumps(self.body, indent=2, default=str)


class ToolDispatcher:
    """Map tool names to handlers bound to the LegalServer collaborators.

    ``dispatch`` never raises: document problems become ``success: false``
    results, anything else becomes an error envelope with ``is_error`` set.

    Args:
        api: JSON API collaborator (case lookups, document lists)
        fetcher: Binary download collaborator, defaults to ``api``
    """

    def __init__(self, api: CaseAPI, fetcher: Optional[DocumentFetcher] = None):
        self._handlers: dict[str, ToolHandler] = {
            "search_case_by_number": partial(search_case_by_number, api),
            "get_case_info": partial(get_case_info, api),
            "list_case_documents": partial(list_case_documents, api),
            "get_document": partial(get_document, fetcher or api),
        }

    @property
    def tool_names(self) -> list[str]:
        return list(self._handlers)

    async def dispatch(self, name: str, arguments: Optional[dict[str, Any]] = None) -> ToolResponse:
        """Run one tool call.

        Args:
            name: Tool name as advertised by tool_definitions()
            arguments: Tool arguments from the host

        Returns:
            ToolResponse with the flattened result or error envelope
        """
        arguments = arguments or {}
        logger.info("Tool call: %s %s", name, sorted(arguments))

        try:
            handler = self._handlers.get(name)
            if handler is None:
                raise LegalServerMCPError(f"Unknown tool: {name}")
            result = await handler(arguments)
        except DocumentError as exc:
            logger.info("Tool %s could not serve document: %s", name, exc.message)
            result = exc.to_result()
        except LegalServerMCPError as exc:
            logger.warning("Tool %s failed: %s", name, exc)
            return self._error_response(name, exc)
        except Exception as exc:
            logger.exception("Tool %s raised an unexpected error", name)
            return self._error_response(name, exc)

        if not result.success:
            logger.info("Tool %s returned failure: %s", name, result.payload.get("error"))
        return ToolResponse(body=result.to_dict())

    @staticmethod
    def _error_response(name: str, exc: Exception) -> ToolResponse:
        return ToolResponse(
            body={
                "error": True,
                "tool": name,
                "message": str(exc),
                "suggestion": ERROR_SUGGESTION,
            },
            is_error=True,
        )
