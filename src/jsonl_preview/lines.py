"""Incremental splitting of a byte stream into JSONL lines."""

from __future__ import annotations

import codecs
from typing import AsyncIterable, AsyncIterator


class LineSplitter:
    """
    Turns arbitrary byte chunks into complete, stripped, non-blank lines.

    A chunk boundary may fall in the middle of a multi-byte character; the
    incremental decoder keeps the partial sequence until the next chunk
    completes it. Only the current incomplete line is ever buffered.

    Example:
        splitter = LineSplitter()
        for chunk in chunks:
            for line in splitter.feed(chunk):
                handle(line)
        for line in splitter.finish():
            handle(line)
    """

    def __init__(self, encoding: str = "utf-8-sig"):
        # utf-8-sig drops a leading byte order mark, even one split across chunks
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._pending: list[str] = []

    def feed(self, chunk: bytes) -> list[str]:
        """
        Decode a chunk and return every line it completes.

        Args:
            chunk: Next slice of the raw byte stream

        Returns:
            Stripped lines with content, in stream order
        """
        text = self._decoder.decode(chunk)
        if "\n" not in text:
            if text:
                self._pending.append(text)
            return []

        first, *rest = text.split("\n")
        *complete, tail = ["".join(self._pending) + first, *rest]
        self._pending = [tail] if tail else []
        return [line for line in (part.strip() for part in complete) if line]

    def finish(self) -> list[str]:
        """Flush the decoder and return the trailing line, if any."""
        # The file need not end with a newline
        tail = ("".join(self._pending) + self._decoder.decode(b"", final=True)).strip()
        self._pending = []
        return [tail] if tail else []


async def iter_lines(chunks: AsyncIterable[bytes]) -> AsyncIterator[str]:
    """
    Async generator yielding JSONL lines from an async chunk source.

    Args:
        chunks: Async iterable of raw bytes (e.g. from open_byte_stream)

    Yields:
        Non-blank lines with surrounding whitespace removed
    """
    splitter = LineSplitter()
    async for chunk in chunks:
        for line in splitter.feed(chunk):
            yield line
    for line in splitter.finish():
        yield line
