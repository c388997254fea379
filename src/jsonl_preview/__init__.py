"""
jsonl-preview - Page through huge JSONL exports in object storage without downloading them.

Quick Start
-----------
    from jsonl_preview import PreviewClient

    client = PreviewClient()
    result = client.preview_url("https://bucket.example.com/exports/products.jsonl", page=2)
    print(result.pagination.total_items)

Configuration
-------------
Set these environment variables (or use a .env file):

    JSONL_PREVIEW_STORAGE_BASE_URL  - Base URL of the bucket holding exports
    JSONL_PREVIEW_PAGE_SIZE         - Records per page (default: 10)
    JSONL_PREVIEW_TIMEOUT           - Fetch timeout in seconds (default: 30)
    JSONL_PREVIEW_CHUNK_SIZE        - Bytes per body read (default: as received)

Project Workflow
----------------
    locator = StaticFileLocator({"proj-1": [FileReference("proj-1/orders.jsonl", now, "order")]})
    client = PreviewClient(locator=locator)
    result = client.preview("proj-1", file_type="order", page=1)
    df = result.to_dataframe()

Exceptions
----------
    InvalidPageError     - Page number below 1
    FetchError           - Storage answered with an error or the transfer broke
    ObjectNotFoundError  - Reported as exists=False, never raised to callers
"""

__version__ = "0.1.0"

# Enable nested asyncio event loops (required for Jupyter notebooks)
import nest_asyncio
nest_asyncio.apply()

from jsonl_preview.client import PreviewClient
from jsonl_preview.config import PreviewSettings
from jsonl_preview.locator import FileLocator, StaticFileLocator
from jsonl_preview.models import FileReference, FileType, Pagination, PreviewResult
from jsonl_preview.pagination import PageSlice, compute_pagination, paginate_stream
from jsonl_preview.exceptions import (
    PreviewError,
    InvalidPageError,
    ObjectNotFoundError,
    FetchError,
    RecordParseError,
    error_response,
)

__all__ = [
    "PreviewClient",
    "PreviewSettings",
    "FileLocator",
    "StaticFileLocator",
    "FileReference",
    "FileType",
    "Pagination",
    "PreviewResult",
    "PageSlice",
    "compute_pagination",
    "paginate_stream",
    "PreviewError",
    "InvalidPageError",
    "ObjectNotFoundError",
    "FetchError",
    "RecordParseError",
    "error_response",
    "__version__",
]
