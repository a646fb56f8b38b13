"""Upstream LegalServer API client and local document source."""

from legalserver_mcp.client.legalserver import LegalServerClient, filename_from_disposition
from legalserver_mcp.client.local import LocalDocumentSource

__all__ = ["LegalServerClient", "LocalDocumentSource", "filename_from_disposition"]
