"""Shared test fixtures: mocked HTTP clients and llms.txt files on disk."""

import httpx
import pytest
import pytest_asyncio

from mcpdoc.types import DocSource
from tests.helpers import LLMS_TXT


@pytest_asyncio.fixture
async def mock_client():
	"""Factory for httpx clients backed by a MockTransport handler."""
	clients: list[httpx.AsyncClient] = []

	def factory(handler) -> httpx.AsyncClient:
		client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
		clients.append(client)
		return client

	yield factory

	for client in clients:
		await client.aclose()


@pytest.fixture
def llms_file(tmp_path):
	"""A local llms.txt file."""
	path = tmp_path / "llms.txt"
	path.write_text(LLMS_TXT, encoding="utf-8")
	return path


@pytest.fixture
def remote_source():
	return DocSource(name="Example", llms_txt="https://docs.example.com/llms.txt")
