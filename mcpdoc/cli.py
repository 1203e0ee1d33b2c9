"""Command-line interface for the mcpdoc documentation server."""

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version

from fastmcp import FastMCP
from fastmcp.utilities.logging import configure_logging

from mcpdoc.config import create_doc_sources_from_urls, load_config_file
from mcpdoc.server import create_server
from mcpdoc.settings import McpdocSettings
from mcpdoc.types import ConfigError, DocSource

logger = logging.getLogger(__name__)

TRANSPORTS = ("stdio", "sse", "http")

EPILOG = """
Examples:
  # Directly specifying llms.txt URLs with optional names
  mcpdoc --urls LangGraph:https://langchain-ai.github.io/langgraph/llms.txt

  # Using a local file (absolute or relative path)
  mcpdoc --urls LocalDocs:/path/to/llms.txt --allowed-domains '*'

  # Using a YAML or JSON config file
  mcpdoc --yaml sample_config.yaml
  mcpdoc --json sample_config.json

  # Combining multiple documentation sources
  mcpdoc --yaml sample_config.yaml --json sample_config.json --urls LangGraph:https://langchain-ai.github.io/langgraph/llms.txt

  # Using SSE transport with custom host and port
  mcpdoc --yaml sample_config.yaml --transport sse --host 0.0.0.0 --port 9000

  # Following redirects with a longer timeout
  mcpdoc --yaml sample_config.yaml --follow-redirects --timeout 15

  # Allow fetching from additional domains. The domains hosting the llms.txt files are always allowed.
  mcpdoc --yaml sample_config.yaml --allowed-domains https://example.com/ https://another-example.com/

  # Allow fetching from any domain
  mcpdoc --yaml sample_config.yaml --allowed-domains '*'
"""


def get_version() -> str:
    try:
        return version("mcpdoc")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser(settings: McpdocSettings) -> argparse.ArgumentParser:
    """Build the argument parser, taking defaults from settings."""
    parser = argparse.ArgumentParser(
        prog="mcpdoc",
        description="MCP LLMS-TXT Documentation Server",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {get_version()}")
    parser.add_argument("--yaml", "-y", help="Path to YAML config file with doc sources")
    parser.add_argument("--json", "-j", help="Path to JSON config file with doc sources")
    parser.add_argument(
        "--urls",
        "-u",
        nargs="+",
        help='List of llms.txt URLs or file paths with optional names (format: "url_or_path" or "name:url_or_path")',
    )
    parser.add_argument(
        "--follow-redirects",
        action="store_true",
        default=settings.follow_redirects,
        help="Whether to follow HTTP redirects",
    )
    parser.add_argument(
        "--allowed-domains",
        nargs="*",
        default=settings.allowed_domains,
        help='Additional allowed domains to fetch documentation from. Use "*" to allow all domains.',
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.timeout,
        help=f"HTTP request timeout in seconds (default: {settings.timeout})",
    )
    parser.add_argument(
        "--transport",
        "-t",
        choices=TRANSPORTS,
        default=settings.transport,
        help=f"Transport protocol for MCP server (default: {settings.transport})",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Log level for the server (default: {settings.log_level})",
    )
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Host to bind to, network transports only (default: {settings.host})",
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=settings.port,
        help=f"Port to bind to, network transports only (default: {settings.port})",
    )
    return parser


def collect_sources(args: argparse.Namespace) -> list[DocSource]:
    """Merge doc sources from --yaml, --json and --urls, in that order.

    Raises:
        ConfigError: a config file could not be loaded
    """
    sources: list[DocSource] = []
    if args.yaml:
        sources.extend(load_config_file(args.yaml, "yaml"))
    if args.json:
        sources.extend(load_config_file(args.json, "json"))
    if args.urls:
        sources.extend(create_doc_sources_from_urls(args.urls))
    return sources


def run_server(mcp: FastMCP, args: argparse.Namespace) -> None:
    """Run the server on the transport chosen on the command line."""
    if args.transport == "stdio":
        mcp.run()
        return
    mcp.run(transport=args.transport, host=args.host, port=args.port, log_level=args.log_level)


def main(argv: list[str] | None = None) -> int:
    """Entry point for `mcpdoc` and `python -m mcpdoc`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser(McpdocSettings())

    if not argv:
        parser.print_help()
        return 0

    args = parser.parse_args(argv)

    configure_logging(level=args.log_level.upper())  # fastmcp logger
    configure_logging(level=args.log_level.upper(), logger=logging.getLogger("mcpdoc"))

    if not (args.yaml or args.json or args.urls):
        print("Error: At least one source option (--yaml, --json, or --urls) is required", file=sys.stderr)
        return 1

    try:
        sources = collect_sources(args)
        mcp = create_server(
            sources,
            follow_redirects=args.follow_redirects,
            timeout=args.timeout,
            allowed_domains=args.allowed_domains or [],
        )
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.transport != "stdio":
        # stdout is the protocol channel for stdio, so only announce network transports
        print(f"Launching MCPDOC server with {len(sources)} doc sources")

    run_server(mcp, args)
    return 0
