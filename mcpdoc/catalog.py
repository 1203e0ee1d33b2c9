"""Listing of configured doc sources for the list_doc_sources tool."""

from mcpdoc.sources import canonicalize_local, display_name, is_remote
from mcpdoc.types import DocSource


def format_source(source: DocSource) -> str:
	"""Render one source as a name line followed by its URL or path."""
	if is_remote(source.llms_txt):
		return f"{display_name(source)}\nURL: {source.llms_txt}"
	return f"{display_name(source)}\nPath: {canonicalize_local(source.llms_txt)}"


def list_sources(sources: list[DocSource]) -> str:
	"""Render all sources in configured order, separated by blank lines.

	An empty catalog renders as an empty string.
	"""
	return "\n\n".join(format_source(source) for source in sources)
