"""CLI entry point for legalserver-mcp."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from legalserver_mcp.client import LegalServerClient, LocalDocumentSource
from legalserver_mcp.config import Settings, get_settings
from legalserver_mcp.models import AccessMode
from legalserver_mcp.tools import ToolDispatcher

# stdout belongs to the MCP stream, so logs go to stderr
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def load_settings() -> Settings:
    """Load settings or exit: missing credentials are fatal at startup."""
    try:
        settings = get_settings()
    except ValidationError as exc:
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"]) or "settings"
            logger.error("Invalid configuration for %s: %s", field, error["msg"])
        logger.error("Set LEGALSERVER_BASE_URL and LEGALSERVER_BEARER_TOKEN (environment or .env)")
        sys.exit(1)

    logging.getLogger().setLevel(settings.log_level)
    return settings


def serve() -> None:
    """Start the MCP server over stdio."""
    settings = load_settings()

    # Import here to avoid loading MCP unless needed
    from legalserver_mcp.server import run_stdio

    logger.info("Starting LegalServer MCP server...")
    asyncio.run(run_stdio(settings))


def read(
    path: str,
    mime_type: Optional[str] = None,
    mode: str = "preview",
    chunk_index: Optional[int] = None,
    max_chars: Optional[int] = None,
    query: Optional[str] = None,
) -> int:
    """Run the get_document pipeline against a local file and print the result.

    Args:
        path: File to read
        mime_type: Declared MIME type (default: guessed from the extension)
        mode: Access mode
        chunk_index: Chunk to return for mode=chunk
        max_chars: Character budget
        query: Search term for mode=search

    Returns:
        Process exit status
    """
    file_path = Path(path)
    if not file_path.is_file():
        logger.error(f"File not found: {path}")
        return 1

    dispatcher = ToolDispatcher(LocalDocumentSource(file_path, mime_type))
    arguments = {
        "document_id": str(file_path),
        "mode": mode,
        "chunk_index": chunk_index,
        "max_chars": max_chars,
        "search_query": query,
    }
    response = asyncio.run(dispatcher.dispatch("get_document", arguments))
    print(response.to_json())
    return 0 if response.body.get("success") else 1


async def _ping(settings: Settings) -> None:
    async with LegalServerClient(settings) as client:
        await client.get_json("api/v1/matters", {"page_size": "1"})


def check(ping: bool = False) -> int:
    """Validate configuration and optionally make one authenticated request."""
    settings = load_settings()
    print(f"LegalServer: {settings.base_url}")
    print(f"  Timeout: {settings.request_timeout:g}s")

    if not ping:
        return 0

    try:
        asyncio.run(_ping(settings))
    except Exception as exc:
        print(f"Connection failed: {exc}")
        return 1
    print("Connected")
    return 0


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="legalserver-mcp",
        description="MCP tools for LegalServer cases and documents",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # serve command
    subparsers.add_parser(
        "serve",
        help="Start the MCP server over stdio",
    )

    # read command
    read_parser = subparsers.add_parser(
        "read",
        help="Extract a local file and print a get_document view",
    )
    read_parser.add_argument("path", help="Document file path")
    read_parser.add_argument("--mime-type", default=None, help="Declared MIME type (default: from extension)")
    read_parser.add_argument(
        "--mode",
        choices=AccessMode.values(),
        default=AccessMode.PREVIEW.value,
        help="View to return (default: preview)",
    )
    read_parser.add_argument("--chunk-index", type=int, default=None, help="Chunk for --mode chunk")
    read_parser.add_argument("--max-chars", type=int, default=None, help="Character budget (default: 8000)")
    read_parser.add_argument("--query", default=None, help="Search term for --mode search")

    # check command
    check_parser = subparsers.add_parser(
        "check",
        help="Validate configuration",
    )
    check_parser.add_argument(
        "--ping",
        action="store_true",
        help="Also make one request to the LegalServer API",
    )

    args = parser.parse_args()

    if args.command == "serve":
        serve()
    elif args.command == "read":
        sys.exit(read(args.path, args.mime_type, args.mode, args.chunk_index, args.max_chars, args.query))
    elif args.command == "check":
        sys.exit(check(args.ping))


if __name__ == "__main__":
    main()
