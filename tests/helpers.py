"""Helpers for building mocked HTTP responses."""

from collections.abc import Callable

import httpx

LLMS_TXT = """# Example Docs

> Documentation for the example project.

- [Quickstart](https://docs.example.com/quickstart): Getting started
- [API](https://docs.example.com/api): Reference
"""


def routes(mapping: dict[str, httpx.Response]) -> Callable[[httpx.Request], httpx.Response]:
	"""Build a MockTransport handler serving fixed responses by URL (404 otherwise)."""

	def handler(request: httpx.Request) -> httpx.Response:
		return mapping.get(str(request.url), httpx.Response(404))

	return handler


def html(body: str, status: int = 200) -> httpx.Response:
	return httpx.Response(status, text=body, headers={"content-type": "text/html; charset=utf-8"})
