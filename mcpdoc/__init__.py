"""mcpdoc - llms.txt documentation tools for AI coding assistants.

Usage as MCP server:
    from mcpdoc import DocSource, create_server

    mcp = create_server(
        [DocSource(name="LangGraph", llms_txt="https://langchain-ai.github.io/langgraph/llms.txt")],
        follow_redirects=True,
        timeout=15.0,
    )
    mcp.run()  # stdio transport

Usage as library:
    from mcpdoc import fetch, list_sources

    text = await fetch("https://example.com/docs/page", sources)
"""

from mcpdoc.catalog import list_sources
from mcpdoc.fetcher import fetch, fetch_document
from mcpdoc.server import create_server
from mcpdoc.types import DocSource

__all__ = [
    # Server
    "create_server",
    # Library
    "fetch",
    "fetch_document",
    "list_sources",
    "DocSource",
]
