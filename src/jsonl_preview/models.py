"""Data types shared across the preview pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

import pandas as pd
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from jsonl_preview._utils.dataframe import records_to_dataframe


class FileType(str, Enum):
    """
    Known export file types, in display order.

    Attributes:
        PRODUCT: Product catalogue export (the default)
        ORDER: Order history export
        CUSTOMER: Customer records export
        COLLECTION: Product collections export
        GIFTCARD: Gift card export
        DISCOUNT_CODE: Discount code export
    """
    PRODUCT = "product"
    ORDER = "order"
    CUSTOMER = "customer"
    COLLECTION = "collection"
    GIFTCARD = "giftcard"
    DISCOUNT_CODE = "discountCode"

    @classmethod
    def sort_key(cls, file_type: str) -> int:
        """Position of a type in display order; unknown types sort first."""
        for position, member in enumerate(cls):
            if member.value == file_type:
                return position
        return -1


@dataclass(frozen=True)
class FileReference:
    """
    Pointer to an export file in object storage, as handed out by a locator.

    Attributes:
        path: Object path relative to the storage base URL
        created_at: When the export was written
        file_type: Record type held by the file
    """

    path: str
    created_at: datetime
    file_type: str = FileType.PRODUCT.value


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Pagination(_CamelModel):
    """Pagination metadata for one preview page."""

    page: int
    items_per_page: int
    total_items: int
    total_pages: int
    has_next: bool
    has_previous: bool


class PreviewResult(_CamelModel):
    """
    One page of a JSONL export, ready to serialize.

    Attributes:
        items: Records on the page, in file order
        pagination: Counts and navigation flags
        file_type: Record type that was requested
        exists: False when there is no file, or the file is empty

    Example:
        result = client.preview("proj-1", file_type="order", page=2)
        print(result.pagination.total_items)
        payload = result.to_response()  # camelCase keys
    """

    items: list[Any]
    pagination: Pagination
    file_type: str
    exists: bool

    @classmethod
    def empty(cls, file_type: str, page: int, page_size: int) -> "PreviewResult":
        """Result for a missing or empty file."""
        return cls(
            items=[],
            pagination=Pagination(
                page=page,
                items_per_page=page_size,
                total_items=0,
                total_pages=0,
                has_next=False,
                has_previous=False,
            ),
            file_type=file_type,
            exists=False,
        )

    def to_response(self) -> dict:
        """Serialize with the camelCase keys of the HTTP response."""
        return self.model_dump(by_alias=True)

    def to_dataframe(self) -> pd.DataFrame:
        """Page items as a pandas DataFrame, nested objects flattened."""
        return records_to_dataframe(self.items)
