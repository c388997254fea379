"""Configuration management via environment variables."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PreviewSettings(BaseSettings):
    """
    JSONL preview configuration.

    All values are read from environment variables prefixed with JSONL_PREVIEW_.
    A .env file in the current directory is loaded automatically.

    Attributes:
        storage_base_url: Public base URL of the bucket holding export files
        page_size: Records per preview page
        timeout: Seconds before an outbound fetch is abandoned
        chunk_size: Bytes per read from the response body (None = as received)

    Example:
        # JSONL_PREVIEW_STORAGE_BASE_URL=https://xyz.supabase.co/storage/v1/object/public/projects

        settings = PreviewSettings()
        print(settings.file_url("proj-1/products.jsonl"))
    """

    storage_base_url: str
    page_size: int = Field(default=10, gt=0)
    timeout: float = 30.0
    chunk_size: Optional[int] = Field(default=None, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="JSONL_PREVIEW_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    def file_url(self, path: str) -> str:
        """Join the storage base URL and an object path."""
        return f"{self.storage_base_url.rstrip('/')}/{path.lstrip('/')}"
