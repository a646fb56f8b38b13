import io
from typing import Any, Optional

import pytest
from docx import Document
from pypdf import PdfWriter

from legalserver_mcp.models import DocumentPayload


class FakeCaseAPI:
    """In-memory stand-in for the LegalServer JSON API."""

    def __init__(self, responses: Optional[dict[str, Any]] = None):
        self.responses = responses or {}
        self.calls: list[tuple[str, Optional[dict[str, Any]]]] = []

    async def get_json(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> Any:
        self.calls.append((endpoint, params))
        response = self.responses[endpoint]
        if isinstance(response, Exception):
            raise response
        return response


class FakeFetcher:
    """Returns one canned payload for every download."""

    def __init__(self, payload: DocumentPayload):
        self.payload = payload
        self.calls: list[dict[str, Optional[str]]] = []

    async def download_document(
        self,
        document_id: Optional[str] = None,
        document_uuid: Optional[str] = None,
    ) -> DocumentPayload:
        self.calls.append({"document_id": document_id, "document_uuid": document_uuid})
        return self.payload


def make_text_pdf(text: str) -> bytes:
    """Build a one-page PDF whose text layer contains ``text``."""
    content = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(content) + content + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = b"%PDF-1.4\n"
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_at = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    out += b"".join(b"%010d 00000 n \n" % offset for offset in offsets)
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n" % (len(objects) + 1, xref_at)
    out += b"%%EOF\n"
    return out


@pytest.fixture
def pdf_bytes() -> bytes:
    return make_text_pdf("Notice of eviction hearing")


@pytest.fixture
def blank_pdf_bytes() -> bytes:
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


@pytest.fixture
def docx_bytes() -> bytes:
    document = Document()
    document.add_paragraph("Tenant statement")
    document.add_paragraph("The landlord refused repairs.")
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def docx_table_bytes() -> bytes:
    document = Document()
    document.add_paragraph("Intro")
    table = document.add_table(rows=1, cols=2)
    table.cell(0, 0).text = "Rent owed"
    table.cell(0, 1).text = "$1,200"
    document.add_paragraph("Signed")
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()
