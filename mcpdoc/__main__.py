"""Documentation server for llms.txt sources.

Usage:
    python -m mcpdoc --urls LangGraph:https://langchain-ai.github.io/langgraph/llms.txt
    python -m mcpdoc --yaml sources.yaml -t sse -p 9000
"""

import mcpdoc.sentry  # noqa: F401 - must be first to capture startup errors

import sys

from mcpdoc.cli import main


def run():
    """Entry point for the `mcpdoc` console script."""
    sys.exit(main())


if __name__ == "__main__":
    run()
