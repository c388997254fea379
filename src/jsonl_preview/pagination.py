"""Streaming pagination over JSONL byte streams."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, AsyncIterable

from jsonl_preview.exceptions import RecordParseError
from jsonl_preview.lines import iter_lines
from jsonl_preview.models import Pagination
from jsonl_preview.window import PageWindow, WindowedDecoder

logger = logging.getLogger(__name__)


@dataclass
class PageSlice:
    """
    Outcome of streaming one file for one page.

    Attributes:
        items: Decoded records inside the window, in file order
        total_items: Exact number of non-blank lines in the file
        window: Window that was collected
        parse_errors: Malformed in-window lines that were dropped
    """

    items: list[Any]
    total_items: int
    window: PageWindow
    parse_errors: list[RecordParseError] = field(default_factory=list)


def compute_pagination(total_items: int, page: int, page_size: int) -> Pagination:
    """
    Derive pagination metadata from an exact item count.

    Args:
        total_items: Exact number of records in the file
        page: 1-based page number
        page_size: Records per page (must be positive)

    Returns:
        Pagination metadata for the page

    Example:
        >>> compute_pagination(25, 3, 10).total_pages
        3
    """
    window = PageWindow.for_page(page, page_size)
    return Pagination(
        page=page,
        items_per_page=page_size,
        total_items=total_items,
        total_pages=math.ceil(total_items / page_size),
        has_next=total_items > window.end,
        has_previous=page > 1,
    )


async def paginate_stream(
    chunks: AsyncIterable[bytes],
    page: int,
    page_size: int = 10,
) -> PageSlice:
    """
    Collect one page of records from a JSONL byte stream.

    The whole stream is consumed so the total is exact, but only lines in
    the page window are JSON-decoded.

    Args:
        chunks: Async iterable of raw bytes
        page: 1-based page number
        page_size: Records per page

    Returns:
        PageSlice with the page's records and the file's total line count

    Example:
        async with open_byte_stream(client, url) as chunks:
            result = await paginate_stream(chunks, page=2)
    """
    decoder = WindowedDecoder(PageWindow.for_page(page, page_size))

    async for line in iter_lines(chunks):
        decoder.feed(line)

    logger.debug(
        "Streamed %d lines, kept %d items for window %s",
        decoder.total,
        len(decoder.items),
        decoder.window,
    )
    return PageSlice(
        items=decoder.items,
        total_items=decoder.total,
        window=decoder.window,
        parse_errors=decoder.parse_errors,
    )
