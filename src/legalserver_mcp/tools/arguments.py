"""Helpers for reading tool arguments."""

from typing import Any

from legalserver_mcp.errors import MissingParameterError


def require_argument(arguments: dict[str, Any], name: str) -> str:
    """Return a required argument as a string, rejecting missing or blank values."""
    value = arguments.get(name)
    if value is None or not str(value).strip():
        raise MissingParameterError(f"{name} is required")
    return str(value).strip()


def optional_argument(arguments: dict[str, Any], name: str) -> str | None:
    value = arguments.get(name)
    if value is None or not str(value).strip():
        return None
    return str(value).strip()
