"""Shared async HTTP client utilities.

Provides a thin wrapper around ``httpx.AsyncClient`` with standardised
timeouts, user-agent headers, and redirect handling. The JDK installer and
the PageSpeed Insights client both go through this module so that HTTP
behaviour is consistent and testable.

Errors are not swallowed here: ``httpx.HTTPError`` (and ``ValueError`` for
undecodable JSON) reach the caller, which translates them into its own
``BubblewrapError`` subclass.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import httpx

from bubblewrap import __version__

logger = logging.getLogger(__name__)

# Timeout for API requests (seconds).
DEFAULT_TIMEOUT: float = 30.0

# PSI audits a live page and routinely takes longer than a plain API call.
LONG_TIMEOUT: float = 120.0

# Archive downloads are large; only the connect phase is bounded tightly.
DOWNLOAD_TIMEOUT = httpx.Timeout(DEFAULT_TIMEOUT, read=300.0)

# User-Agent sent with every request.
USER_AGENT: str = f"Bubblewrap-CLI/{__version__}"

_CHUNK_SIZE: int = 64 * 1024


def _client(timeout: float | httpx.Timeout) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=timeout,
        headers={"User-Agent": USER_AGENT},
        follow_redirects=True,
    )


async def fetch_json(
    url: str,
    *,
    params: Sequence[tuple[str, str]] | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> dict[str, Any] | list[Any]:
    """Fetch a URL and parse the response as JSON.

    Args:
        url: The URL to fetch.
        params: Optional query parameters as ``(name, value)`` pairs, so a
            name may repeat.
        timeout: Request timeout in seconds.

    Returns:
        Parsed JSON response (dict or list).

    Raises:
        httpx.HTTPError: On transport errors, timeouts, or non-2xx status.
        ValueError: If the body is not valid JSON.
    """
    async with _client(timeout) as client:
        resp = await client.get(url, params=list(params or []))
        logger.debug("GET %s -> %d", resp.url, resp.status_code)
        resp.raise_for_status()
        return resp.json()


async def download_file(
    url: str,
    dst: Path,
    *,
    timeout: float | httpx.Timeout = DOWNLOAD_TIMEOUT,
) -> Path:
    """Stream ``url`` into the file ``dst``.

    A partially written file is removed if the transfer fails.

    Args:
        url: The URL to download.
        dst: Destination file path. Its parent must exist.
        timeout: Request timeout.

    Returns:
        The destination path.

    Raises:
        httpx.HTTPError: On transport errors, timeouts, or non-2xx status.
    """
    logger.debug("Downloading %s to %s", url, dst)
    try:
        async with _client(timeout) as client:
            async with client.stream("GET", url) as resp:
                resp.raise_for_status()
                with dst.open("wb") as fh:
                    async for chunk in resp.aiter_bytes(_CHUNK_SIZE):
                        fh.write(chunk)
    except httpx.HTTPError:
        dst.unlink(missing_ok=True)
        raise
    return dst
