"""Shared pytest fixtures for jsonl-preview tests."""

import json
from datetime import datetime, timezone

import httpx
import pytest

from jsonl_preview.config import PreviewSettings
from jsonl_preview.locator import StaticFileLocator
from jsonl_preview.models import FileReference


STORAGE_BASE_URL = "https://storage.example.com/public/projects"


class ChunkedStream(httpx.AsyncByteStream):
    """Response body served in exactly the given chunks; records closing."""

    def __init__(self, chunks, fail_after=None):
        self.chunks = list(chunks)
        self.fail_after = fail_after
        self.closed = False

    async def __aiter__(self):
        for i, chunk in enumerate(self.chunks):
            if self.fail_after is not None and i == self.fail_after:
                raise httpx.ReadError("connection reset")
            yield chunk

    async def aclose(self):
        self.closed = True


def make_jsonl(count, start=0):
    """JSONL text with ``count`` records numbered from ``start``."""
    return "".join(json.dumps({"id": i, "name": f"item-{i}"}) + "\n" for i in range(start, start + count))


@pytest.fixture
def mock_settings():
    """Return test settings pointing at a fake storage bucket."""
    return PreviewSettings(storage_base_url=STORAGE_BASE_URL)


@pytest.fixture
def locator():
    """Locator serving a product and an order export for proj-1."""
    created = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return StaticFileLocator({
        "proj-1": [
            FileReference("proj-1/orders.jsonl", created, "order"),
            FileReference("proj-1/products.jsonl", created, "product"),
        ],
    })
