"""FastMCP server exposing the documentation tools.

This is the edge layer that:
1. Checks the configured sources once at startup
2. Registers list_doc_sources and fetch_docs
3. Turns fetch failures into text for the calling agent
"""

import logging
from pathlib import Path
from typing import Annotated

import httpx
import sentry_sdk
from fastmcp import FastMCP
from pydantic import Field

from mcpdoc.catalog import list_sources
from mcpdoc.deps import Deps
from mcpdoc.fetcher import fetch_document
from mcpdoc.policy import FetchPolicy
from mcpdoc.sources import canonicalize_local, partition
from mcpdoc.types import ConfigError, DocSource, FetchError, RetrievalError

logger = logging.getLogger(__name__)

SERVER_NAME = "llms-txt"

LIST_DOC_SOURCES_DESCRIPTION = """List all available documentation sources.

This is the first tool you should call in the documentation workflow.
It provides URLs to llms.txt files or local file paths that the user has made available.

Returns:
    A string containing a formatted list of documentation sources with their URLs or file paths"""


def fetch_docs_description(has_local_sources: bool) -> str:
    """Describe fetch_docs, mentioning file paths only when local sources exist."""
    lines = [
        "Fetch and parse documentation from a given URL or local file.",
        "",
        "Use this tool after list_doc_sources to:",
        "1. First fetch the llms.txt file from a documentation source",
        "2. Analyze the URLs listed in the llms.txt file",
        "3. Then fetch specific documentation pages relevant to the user's question",
        "",
    ]
    if has_local_sources:
        lines += [
            "Args:",
            "    url: The URL or file path to fetch documentation from. Can be:",
            "        - URL from an allowed domain",
            "        - A local file path (absolute or relative)",
            "        - A file:// URL (e.g., file:///path/to/llms.txt)",
        ]
    else:
        lines += ["Args:", "    url: The URL to fetch documentation from."]
    lines += [
        "",
        "Returns:",
        "    The fetched documentation content converted to markdown, or an error message",
        "    if the request fails or the URL is not from an allowed domain.",
    ]
    return "\n".join(lines)


def _check_local_sources(local_sources: list[DocSource]) -> None:
    for source in local_sources:
        path = canonicalize_local(source.llms_txt)
        if not Path(path).is_file():
            raise ConfigError(f"Local file not found: {path}")


def _format_error(e: FetchError) -> str:
    return f"Error: {e}"


# ─────────────────────────────────────────────────────────────────────────────
# FastMCP Server
# ─────────────────────────────────────────────────────────────────────────────


def create_server(
    sources: list[DocSource],
    *,
    follow_redirects: bool = False,
    timeout: float = 10.0,
    allowed_domains: list[str] | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> FastMCP:
    """Create the MCP server for a fixed set of doc sources.

    Args:
        sources: Doc sources in the order list_doc_sources shows them
        follow_redirects: Follow HTTP redirects and one meta-refresh hop
        timeout: Request deadline in seconds
        allowed_domains: Extra allowed origins; "*" allows every remote URL
        http_client: Shared client for all fetches (one per call if omitted)

    Raises:
        ConfigError: a local source does not exist
    """
    sources = list(sources)
    _, local_sources = partition(sources)
    _check_local_sources(local_sources)

    deps = Deps(
        policy=FetchPolicy.from_sources(sources, allowed_domains or []),
        follow_redirects=follow_redirects,
        timeout=timeout,
        http_client=http_client,
    )
    logger.debug(f"Allowed domains: {deps.policy.domains.allowed()}")
    logger.debug(f"Allowed local files: {deps.policy.local_files.allowed()}")

    mcp = FastMCP(name=SERVER_NAME)

    # ─────────────────────────────────────────────────────────────────────────
    # Tools
    # ─────────────────────────────────────────────────────────────────────────

    @mcp.tool(description=LIST_DOC_SOURCES_DESCRIPTION)
    async def list_doc_sources() -> str:
        return list_sources(sources)

    @mcp.tool(description=fetch_docs_description(bool(local_sources)))
    async def fetch_docs(
        url: Annotated[str, Field(description="The URL or file path to fetch documentation from")],
    ) -> str:
        try:
            return await fetch_document(url, deps)
        except RetrievalError as e:
            sentry_sdk.capture_exception(e)
            logger.error(f"fetch_docs failed for {url}: {e}")
            return _format_error(e)
        except FetchError as e:
            logger.info(f"fetch_docs rejected {url!r}: {e}")
            return _format_error(e)

    return mcp
