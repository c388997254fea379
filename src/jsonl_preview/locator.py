"""File locator interface and an in-memory implementation."""

from __future__ import annotations

from typing import Iterable, Optional, Protocol

from jsonl_preview.models import FileReference, FileType


class FileLocator(Protocol):
    """
    Maps a project and record type to the export file to preview.

    Implementations typically query the database table of uploaded
    exports; picking the newest file per type is their concern.
    """

    async def locate(self, project_id: str, file_type: str) -> Optional[FileReference]:
        """Return the file to preview, or None if there is none."""
        ...

    async def list_files(self, project_id: str) -> list[FileReference]:
        """Return one file per type available for the project."""
        ...


class StaticFileLocator:
    """
    FileLocator backed by an in-memory mapping.

    Example:
        locator = StaticFileLocator({
            "proj-1": [FileReference("proj-1/products.jsonl", created_at, "product")],
        })
        ref = await locator.locate("proj-1", "product")
    """

    def __init__(self, files: Optional[dict[str, Iterable[FileReference]]] = None):
        self._files: dict[tuple[str, str], FileReference] = {}
        for project_id, references in (files or {}).items():
            for reference in references:
                self.register(project_id, reference)

    def register(self, project_id: str, reference: FileReference) -> None:
        """Serve ``reference`` for its type, replacing any previous file."""
        self._files[(project_id, reference.file_type)] = reference

    async def locate(self, project_id: str, file_type: str) -> Optional[FileReference]:
        return self._files.get((project_id, file_type))

    async def list_files(self, project_id: str) -> list[FileReference]:
        references = [ref for (pid, _), ref in self._files.items() if pid == project_id]
        return sorted(references, key=lambda ref: FileType.sort_key(ref.file_type))
