"""Byte stream adapter over an httpx streaming response."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx

from jsonl_preview.exceptions import FetchError, ObjectNotFoundError

logger = logging.getLogger(__name__)


async def _iter_chunks(
    response: httpx.Response,
    url: str,
    chunk_size: Optional[int],
) -> AsyncIterator[bytes]:
    try:
        async for chunk in response.aiter_bytes(chunk_size):
            yield chunk
    except httpx.RequestError as e:
        logger.error("Stream from %s interrupted: %s", url, e)
        raise FetchError(f"Stream interrupted: {e}", url=url) from e


@asynccontextmanager
async def open_byte_stream(
    client: httpx.AsyncClient,
    url: str,
    chunk_size: Optional[int] = None,
) -> AsyncIterator[AsyncIterator[bytes]]:
    """
    Open a remote object and yield its body as an async chunk iterator.

    Redirects are followed. The response is closed when the ``async with``
    block exits, whether the body was fully read, the caller stopped early,
    an exception was raised or the awaiting task was cancelled.

    Args:
        client: httpx.AsyncClient used for the request
        url: Location of the JSONL object
        chunk_size: Bytes per chunk, or None to take chunks as they arrive

    Yields:
        Async iterator of byte chunks

    Raises:
        ObjectNotFoundError: If the remote answers 404
        FetchError: On any other non-success status or transport error

    Example:
        async with open_byte_stream(client, url) as chunks:
            async for chunk in chunks:
                ...
    """
    try:
        async with client.stream("GET", url, follow_redirects=True) as response:
            if response.status_code == 404:
                raise ObjectNotFoundError(f"Object not found: {url}", url=url)
            if not response.is_success:
                logger.error("Fetching %s failed with HTTP %s", url, response.status_code)
                raise FetchError(
                    f"HTTP {response.status_code}: {response.reason_phrase}",
                    status_code=response.status_code,
                    url=url,
                )
            yield _iter_chunks(response, url, chunk_size)
    except httpx.RequestError as e:
        logger.error("Request to %s failed: %s", url, e)
        raise FetchError(f"Request failed: {e}", url=url) from e
