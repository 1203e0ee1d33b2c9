"""Fetch gate and retriever behind the fetch_docs tool.

Every fetch goes through the same steps:
1. Reject blank targets
2. Local paths: exact allow-list check, then read the file
3. Remote URLs: origin check, GET with a deadline, optional meta-refresh hop
4. Convert the payload to markdown
"""

import asyncio
import logging
import re
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from urllib.parse import urljoin

import httpx

from mcpdoc.deps import Deps
from mcpdoc.normalize import to_text
from mcpdoc.policy import FetchPolicy
from mcpdoc.sources import canonicalize_local, is_remote
from mcpdoc.types import (
    AccessDenied,
    DocSource,
    FetchTimeout,
    HttpError,
    InvalidInput,
    NetworkError,
    ReadError,
)

logger = logging.getLogger(__name__)

# <meta http-equiv="refresh" content="0; url=https://example.com/">
META_REFRESH = re.compile(
    r"""<meta\s+http-equiv=["']?refresh["']?\s+content=["'][^;]+;\s*url=([^"']+)["']""",
    re.IGNORECASE,
)


def find_meta_refresh(body: str) -> str | None:
    """Return the raw target of the first meta-refresh tag, if any."""
    match = META_REFRESH.search(body)
    if match is None:
        return None
    return match.group(1).strip()


async def fetch_document(target: str, deps: Deps) -> str:
    """Fetch a URL or local file and return it as markdown text.

    Args:
        target: http(s) URL, file:// URI, or relative/absolute file path
        deps: Policy and request settings of the running server

    Returns:
        The document converted to markdown

    Raises:
        InvalidInput: target is blank, or it or its meta-refresh target is not a valid URL
        AccessDenied: target (or its meta-refresh target) is not allowed
        HttpError: remote server answered with a non-2xx status
        FetchTimeout: deadline passed before the response arrived
        NetworkError: connection failed without an HTTP status
        ReadError: allowed local file could not be read
    """
    target = (target or "").strip()
    if not target:
        raise InvalidInput()

    if is_remote(target):
        body = await _fetch_remote(target, deps)
    else:
        body = await _fetch_local(target, deps.policy)
    return to_text(body)


async def _fetch_local(target: str, policy: FetchPolicy) -> str:
    path = canonicalize_local(target)
    if not policy.local_files.is_allowed(path):
        allowed = policy.local_files.allowed()
        logger.warning(f"Denied local file {path}")
        raise AccessDenied(
            f"Local file not allowed: {path}. Allowed files: {', '.join(allowed)}",
            target=path,
            allowed=allowed,
        )

    logger.info(f"Reading local file {path}")
    try:
        return await asyncio.to_thread(Path(path).read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(f"Error reading local file: {e}") from e


async def _fetch_remote(url: str, deps: Deps) -> str:
    domains = deps.policy.domains
    if not domains.is_allowed(url):
        allowed = domains.allowed()
        logger.warning(f"Denied URL {url}")
        raise AccessDenied(
            f"URL not allowed. Must start with one of the following domains: {', '.join(allowed)}",
            target=url,
            allowed=allowed,
        )

    async with _client(deps) as client:
        response = await _get(client, url, deps.timeout, follow_redirects=deps.follow_redirects)
        body = response.text

        if not deps.follow_redirects:
            return body

        refresh = find_meta_refresh(body)
        if refresh is None:
            return body

        try:
            redirect_url = urljoin(str(response.url), refresh)
        except ValueError as e:
            raise InvalidInput(f"Invalid redirect URL: {refresh}") from e
        if not domains.is_allowed(redirect_url):
            allowed = domains.allowed()
            logger.warning(f"Denied meta-refresh from {response.url} to {redirect_url}")
            raise AccessDenied(
                f"Redirect URL not allowed. Must start with one of the following domains: {', '.join(allowed)}",
                target=redirect_url,
                allowed=allowed,
            )

        # Single hop only: the second body is returned even if it refreshes again
        logger.debug(f"Following meta-refresh from {response.url} to {redirect_url}")
        response = await _get(client, redirect_url, deps.timeout, follow_redirects=True)
        return response.text


async def _get(client: httpx.AsyncClient, url: str, timeout: float, *, follow_redirects: bool) -> httpx.Response:
    """GET a URL, failing on non-2xx and on the deadline."""
    logger.info(f"Fetching GET {url}")
    try:
        async with asyncio.timeout(timeout):
            response = await client.get(url, follow_redirects=follow_redirects, timeout=timeout)
    except (TimeoutError, httpx.TimeoutException) as e:
        raise FetchTimeout(f"Request timed out after {timeout}s: {url}") from e
    except httpx.InvalidURL as e:
        raise InvalidInput(f"Invalid URL: {url}") from e
    except httpx.RequestError as e:
        raise NetworkError(f"Encountered an HTTP error: {type(e).__name__}: {e}") from e

    # Without follow_redirects a 3xx lands here too
    if not response.is_success:
        raise HttpError(response.status_code, response.reason_phrase)
    return response


@asynccontextmanager
async def _client(deps: Deps) -> AsyncIterator[httpx.AsyncClient]:
    if deps.http_client is not None:
        yield deps.http_client
        return
    async with httpx.AsyncClient(timeout=deps.timeout) as client:
        yield client


async def fetch(
    target: str,
    sources: list[DocSource],
    *,
    follow_redirects: bool = False,
    timeout: float = 10.0,
    extra_domains: list[str] | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> str:
    """Fetch a document without a running server.

    Builds the allow-lists from `sources` on every call. Servers build
    them once and call fetch_document directly.
    """
    deps = Deps(
        policy=FetchPolicy.from_sources(sources, extra_domains or []),
        follow_redirects=follow_redirects,
        timeout=timeout,
        http_client=http_client,
    )
    return await fetch_document(target, deps)
