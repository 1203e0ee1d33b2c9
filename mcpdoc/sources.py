"""Classification of doc source locations as remote URLs or local paths."""

import os
from urllib.parse import urlparse

from mcpdoc.types import DocSource, SourceKind

FILE_URI_PREFIX = "file://"
DEFAULT_PORTS = {"http": 80, "https": 443}


def is_remote(location: str) -> bool:
	"""Check if a location is an HTTP or HTTPS URL.

	The scheme check is case-sensitive: "HTTPS://example.com" is treated
	as a local path and goes through the local allow-list instead.
	"""
	return location.startswith("http:") or location.startswith("https:")


def classify(location: str) -> SourceKind:
	"""Decide which gate applies to a location."""
	return SourceKind.REMOTE if is_remote(location) else SourceKind.LOCAL


def canonicalize_local(location: str) -> str:
	"""Map a file:// URI or a relative/absolute path to an absolute path.

	Relative paths resolve against the current working directory. The
	file does not have to exist.

	Examples:
	    canonicalize_local("file:///docs/llms.txt") -> "/docs/llms.txt"
	    canonicalize_local("docs/../llms.txt") -> "<cwd>/llms.txt"
	"""
	if location.startswith(FILE_URI_PREFIX):
		location = location[len(FILE_URI_PREFIX) :]
	return os.path.abspath(location)


def origin(url: str) -> str:
	"""Extract scheme, host and port from a URL, with a trailing slash.

	Host is lowercased, credentials are dropped and a default port for
	the scheme is omitted.

	Examples:
	    origin("https://example.com/docs/llms.txt") -> "https://example.com/"
	    origin("http://localhost:8080") -> "http://localhost:8080/"
	    origin("https://Example.com:443/x") -> "https://example.com/"
	"""
	parsed = urlparse(url)
	host = parsed.hostname or ""
	if ":" in host:
		host = f"[{host}]"  # IPv6 literal
	port = parsed.port
	if port is not None and port != DEFAULT_PORTS.get(parsed.scheme):
		host = f"{host}:{port}"
	return f"{parsed.scheme}://{host}/"


def display_name(source: DocSource) -> str:
	"""Label for a source: its name, else its origin or canonical path."""
	if source.name:
		return source.name
	if is_remote(source.llms_txt):
		return origin(source.llms_txt)
	return canonicalize_local(source.llms_txt)


def partition(sources: list[DocSource]) -> tuple[list[DocSource], list[DocSource]]:
	"""Split sources into (remote, local), preserving configured order."""
	remote: list[DocSource] = []
	local: list[DocSource] = []
	for source in sources:
		if is_remote(source.llms_txt):
			remote.append(source)
		else:
			local.append(source)
	return remote, local
