"""PreviewClient - main entry point for jsonl-preview."""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx

from jsonl_preview.config import PreviewSettings
from jsonl_preview.exceptions import InvalidPageError, ObjectNotFoundError
from jsonl_preview.locator import FileLocator, StaticFileLocator
from jsonl_preview.models import FileReference, FileType, PreviewResult
from jsonl_preview.pagination import compute_pagination, paginate_stream
from jsonl_preview.source import open_byte_stream

logger = logging.getLogger(__name__)

DEFAULT_FILE_TYPE = FileType.PRODUCT.value


class PreviewClient:
    """
    Client for previewing JSONL exports in object storage page by page.

    Reads configuration from environment variables (JSONL_PREVIEW_*) automatically.
    Provides both sync and async interfaces.

    Example:
        client = PreviewClient(locator=locator)
        result = client.preview("proj-1", file_type="order", page=2)

    Async Example:
        async with PreviewClient(locator=locator) as client:
            result = await client.preview_async("proj-1", page=1)
            print(result.to_response())

    Attributes:
        settings: PreviewSettings instance with storage configuration
        locator: FileLocator resolving (project, type) to a stored file
    """

    def __init__(
        self,
        settings: Optional[PreviewSettings] = None,
        locator: Optional[FileLocator] = None,
    ):
        """
        Initialize the preview client.

        Args:
            settings: Optional PreviewSettings instance. If not provided,
                     settings are loaded from environment variables.
            locator: Optional FileLocator. Defaults to an empty
                     StaticFileLocator, which finds nothing.
        """
        self.settings = settings or PreviewSettings()
        self.locator = locator if locator is not None else StaticFileLocator()
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "PreviewClient":
        """Async context manager entry."""
        self._client = self._new_http_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def _new_http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.settings.timeout, follow_redirects=True)

    @asynccontextmanager
    async def _http_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Yield the shared httpx client, or a short-lived one outside ``async with``."""
        if self._client is not None:
            yield self._client
            return
        async with self._new_http_client() as client:
            yield client

    # -------------------------------------------------------------------------
    # Public API: Sync methods (convenience wrappers)
    # -------------------------------------------------------------------------

    def preview(
        self,
        project_id: str,
        file_type: str = DEFAULT_FILE_TYPE,
        page: int = 1,
    ) -> PreviewResult:
        """
        Fetch one page of the project's export file of the given type.

        Args:
            project_id: Project whose export to preview
            file_type: Record type (default: "product")
            page: 1-based page number (default: 1)

        Returns:
            PreviewResult for the page

        Raises:
            InvalidPageError: If page < 1
            FetchError: If the file could not be fetched

        Example:
            result = client.preview("proj-1", file_type="customer", page=3)
            df = result.to_dataframe()
        """
        return asyncio.run(self.preview_async(project_id, file_type, page))

    def preview_url(
        self,
        url: str,
        file_type: str = DEFAULT_FILE_TYPE,
        page: int = 1,
    ) -> PreviewResult:
        """
        Fetch one page of a JSONL file at a known URL.

        Args:
            url: Location of the JSONL object
            file_type: Label reported back in the result
            page: 1-based page number

        Returns:
            PreviewResult for the page
        """
        return asyncio.run(self.preview_url_async(url, file_type, page))

    def list_files(self, project_id: str) -> list[FileReference]:
        """
        List the previewable files of a project, one per type.

        Args:
            project_id: Project to list

        Returns:
            FileReference list in display order
        """
        return asyncio.run(self.list_files_async(project_id))

    # -------------------------------------------------------------------------
    # Public API: Async methods
    # -------------------------------------------------------------------------

    async def preview_async(
        self,
        project_id: str,
        file_type: str = DEFAULT_FILE_TYPE,
        page: int = 1,
    ) -> PreviewResult:
        """
        Async version of preview().

        Args:
            project_id: Project whose export to preview
            file_type: Record type
            page: 1-based page number

        Returns:
            PreviewResult for the page
        """
        self._validate_page(page)

        logger.debug("Locating %s file for project %s", file_type, project_id)
        reference = await self.locator.locate(project_id, file_type)
        if reference is None:
            logger.debug("No %s file for project %s", file_type, project_id)
            return PreviewResult.empty(file_type, page, self.settings.page_size)

        url = self.settings.file_url(reference.path)
        return await self.preview_url_async(url, file_type, page)

    async def preview_url_async(
        self,
        url: str,
        file_type: str = DEFAULT_FILE_TYPE,
        page: int = 1,
    ) -> PreviewResult:
        """
        Async version of preview_url().

        Args:
            url: Location of the JSONL object
            file_type: Label reported back in the result
            page: 1-based page number

        Returns:
            PreviewResult for the page

        Raises:
            InvalidPageError: If page < 1
            FetchError: On non-404 fetch failures, including mid-stream ones
        """
        self._validate_page(page)
        page_size = self.settings.page_size

        logger.debug("Fetching %s (page %d)", url, page)
        try:
            async with self._http_client() as client:
                async with open_byte_stream(client, url, self.settings.chunk_size) as chunks:
                    page_slice = await paginate_stream(chunks, page, page_size)
        except ObjectNotFoundError:
            logger.info("Preview object missing from storage: %s", url)
            return PreviewResult.empty(file_type, page, page_size)

        if page_slice.parse_errors:
            logger.warning(
                "Dropped %d malformed records from %s (page %d)",
                len(page_slice.parse_errors),
                url,
                page,
            )

        # An empty file is reported the same way as a missing one
        if not page_slice.items and page == 1 and page_slice.total_items == 0:
            return PreviewResult.empty(file_type, page, page_size)

        return PreviewResult(
            items=page_slice.items,
            pagination=compute_pagination(page_slice.total_items, page, page_size),
            file_type=file_type,
            exists=True,
        )

    async def list_files_async(self, project_id: str) -> list[FileReference]:
        """Async version of list_files()."""
        return await self.locator.list_files(project_id)

    # -------------------------------------------------------------------------
    # Internal methods
    # -------------------------------------------------------------------------

    @staticmethod
    def _validate_page(page: int) -> None:
        if page < 1:
            raise InvalidPageError(f"Page must be >= 1, got {page}")
