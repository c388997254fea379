"""Page window and the windowed JSON decoder."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from jsonl_preview.exceptions import RecordParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageWindow:
    """
    Half-open range [start, end) of line indices covered by one page.

    Attributes:
        start: Index of the first line on the page
        end: Index one past the last line on the page
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end <= self.start:
            raise ValueError(f"Invalid page window [{self.start}, {self.end})")

    @classmethod
    def for_page(cls, page: int, page_size: int) -> "PageWindow":
        """Window for a 1-based page number."""
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        start = (page - 1) * page_size
        return cls(start=start, end=start + page_size)

    @property
    def size(self) -> int:
        return self.end - self.start

    def __contains__(self, index: int) -> bool:
        return self.start <= index < self.end


class DecoderMode(str, Enum):
    """
    Processing mode of a WindowedDecoder.

    Attributes:
        FILLING: Page not yet complete; lines inside the window are parsed
        DRAINING: Page complete; remaining lines are only counted
    """
    FILLING = "filling"
    DRAINING = "draining"


@dataclass
class WindowedDecoder:
    """
    Decodes only the lines of one page window while counting every line.

    Feed it each non-blank line in file order. Lines inside the window are
    parsed as JSON; everything else is counted without being parsed. Once
    the page is full the decoder switches to DRAINING and stops parsing
    altogether, so the rest of the file costs a counter increment per line.

    Attributes:
        window: Page window to collect
        items: Decoded records, in file order
        total: Number of lines seen so far
        parse_errors: One entry per in-window line that was not valid JSON
        mode: Current processing mode

    Example:
        decoder = WindowedDecoder(PageWindow.for_page(2, 10))
        for line in lines:
            decoder.feed(line)
        print(decoder.items, decoder.total)
    """

    window: PageWindow
    items: list[Any] = field(default_factory=list)
    total: int = 0
    parse_errors: list[RecordParseError] = field(default_factory=list)
    mode: DecoderMode = DecoderMode.FILLING

    def feed(self, line: str) -> None:
        """Account for the next line, decoding it if it falls in the window."""
        index = self.total
        self.total += 1

        if self.mode is DecoderMode.DRAINING:
            return

        if index in self.window:
            self._decode(index, line)

        if len(self.items) >= self.window.size and self.total >= self.window.end:
            logger.debug("Page window %s filled at line %d, draining", self.window, index)
            self.mode = DecoderMode.DRAINING

    def _decode(self, index: int, line: str) -> None:
        try:
            self.items.append(json.loads(line))
        except json.JSONDecodeError as e:
            logger.warning("Dropping malformed JSONL line %d: %s", index, e)
            self.parse_errors.append(
                RecordParseError(f"Line {index}: {e.msg}", line_index=index)
            )
