"""Case lookup, case detail and document list tools.

These are thin reshapes of LegalServer JSON responses: each picks the
fields worth showing to the calling agent and renames a few of them.
"""

import logging
from typing import Any, Optional

from legalserver_mcp.access import estimate_tokens
from legalserver_mcp.models import ToolResult
from legalserver_mcp.protocols import CaseAPI
from legalserver_mcp.tools.arguments import require_argument

logger = logging.getLogger(__name__)

MATTERS_ENDPOINT = "api/v1/matters"


def _unwrap(response: Any) -> Any:
    """Return the ``data`` member of an API envelope, or the response itself."""
    if isinstance(response, dict) and "data" in response:
        return response["data"]
    return response


async def search_case_by_number(api: CaseAPI, arguments: dict[str, Any]) -> ToolResult:
    """Find a case by its case number and return its matter UUID."""
    case_number = require_argument(arguments, "case_number")

    response = await api.get_json(
        MATTERS_ENDPOINT,
        {"case_number": case_number, "results": "full", "page_size": "1"},
    )
    matches = _unwrap(response)
    if isinstance(matches, dict):
        matches = [matches]

    if not matches:
        logger.info("No case found for %s", case_number)
        return ToolResult.fail(
            f"No case found with case number: {case_number}",
            "Please verify the case number and try again.",
        )

    case = matches[0]
    return ToolResult.ok(
        case_found=True,
        matter_uuid=case.get("matter_uuid"),
        case_id=case.get("case_id"),
        case_number=case.get("case_number"),
        client_name=case.get("client_full_name"),
        case_disposition=case.get("case_disposition"),
        date_opened=case.get("date_opened"),
        legal_problem_code=case.get("legal_problem_code"),
        case_profile_url=case.get("case_profile_url"),
        note="Use the matter_uuid to retrieve documents with list_case_documents",
    )


def _is_active(note: dict[str, Any]) -> bool:
    return note.get("active") is not False


def project_note(note: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": note.get("id"),
        "uuid": note.get("casenote_uuid"),
        "subject": note.get("subject"),
        "body": note.get("body"),
        "note_type": note.get("note_type"),
        "date_posted": note.get("date_posted"),
        "date_created": note.get("date_time_created"),
        "created_by": note.get("created_by"),
        "last_updated": note.get("last_update"),
        "last_updated_by": note.get("last_updated_by"),
        "is_html": note.get("is_html"),
        "has_document_attached": note.get("note_has_document_attached"),
    }


async def get_case_info(api: CaseAPI, arguments: dict[str, Any]) -> ToolResult:
    """Return the curated details of a case, keeping only active notes."""
    case_uuid = require_argument(arguments, "case_uuid")

    response = await api.get_json(f"{MATTERS_ENDPOINT}/{case_uuid}", {"results": "full"})
    case = _unwrap(response)
    if not isinstance(case, dict) or not case:
        return ToolResult.fail(
            f"No case found with UUID: {case_uuid}",
            "Look up the case with search_case_by_number to get a valid matter_uuid.",
        )

    notes = case.get("notes") or []
    active_notes = [note for note in notes if _is_active(note)]

    return ToolResult.ok(
        case_uuid=case_uuid,
        case_number=case.get("case_number"),
        case_id=case.get("case_id"),
        case_title=case.get("case_title"),
        case_disposition=case.get("case_disposition"),
        case_status=case.get("case_status"),
        client_name=case.get("client_full_name"),
        client_email=case.get("client_email_address"),
        dates={
            "opened": case.get("date_opened"),
            "closed": case.get("date_closed"),
            "intake": case.get("intake_date"),
            "rejected": case.get("date_rejected"),
            "days_open": case.get("days_open"),
        },
        location={
            "home_address": case.get("client_address_home"),
            "mailing_address": case.get("client_address_mailing"),
            "county_of_residence": case.get("county_of_residence"),
            "county_of_dispute": case.get("county_of_dispute"),
        },
        legal_problem={
            "code": case.get("legal_problem_code"),
            "category": case.get("legal_problem_category"),
            "special_code": case.get("special_legal_problem_code"),
            "case_type": case.get("case_type"),
        },
        intake_office=case.get("intake_office"),
        intake_program=case.get("intake_program"),
        close_reason=case.get("close_reason"),
        notes=[project_note(note) for note in active_notes],
        notes_summary={
            "total_notes": len(notes),
            "active_notes": len(active_notes),
        },
        case_profile_url=case.get("case_profile_url"),
    )


def _document_size(doc: dict[str, Any]) -> Optional[int]:
    size = doc.get("disk_file_size") or doc.get("file_size")
    return size or None


def project_document(doc: dict[str, Any]) -> dict[str, Any]:
    """Reshape one document record, adding size and token estimates."""
    size_bytes = _document_size(doc)
    return {
        "guid": doc.get("guid"),
        "internal_id": doc.get("internal_id"),
        "name": doc.get("name"),
        "title": doc.get("title"),
        "mime_type": doc.get("mime_type"),
        "size_bytes": size_bytes,
        "estimated_tokens": estimate_tokens(size_bytes) if size_bytes else None,
        "file_size": f"{size_bytes / 1024:.2f} KB" if size_bytes else None,
        "date_created": doc.get("date_create"),
        "date_updated": doc.get("date_update"),
        "virus_scanned": doc.get("virus_scanned"),
        "virus_free": doc.get("virus_free"),
        "folder_id": doc.get("folder_id"),
    }


async def list_case_documents(api: CaseAPI, arguments: dict[str, Any]) -> ToolResult:
    """List the documents attached to a case."""
    case_uuid = require_argument(arguments, "case_uuid")

    response = await api.get_json(f"{MATTERS_ENDPOINT}/{case_uuid}/documents")
    documents = _unwrap(response)

    if not isinstance(documents, list) or not documents:
        return ToolResult.fail(
            "No documents were found for this case.",
            "Verify the case UUID or ensure documents have been uploaded.",
        )

    return ToolResult.ok(
        case_uuid=case_uuid,
        total_documents=len(documents),
        documents=[project_document(doc) for doc in documents],
        note="Use the guid field with get_document to retrieve document content",
    )
