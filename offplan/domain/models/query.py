"""Catalog query models.

A query state is an immutable snapshot of the listing filters, sort order and
page; a query result is one page of matching records plus pagination data.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from offplan.core.settings import get_settings
from offplan.domain.models.property import PropertyRecord


class SortKey(str, Enum):
    """Supported listing orders."""

    TITLE = "title"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    HANDOVER = "handover"


class QueryState(BaseModel):
    """Filters, sort key and page requested by the UI layer.

    Empty strings and ``None`` disable the corresponding filter. ``max_price``
    is always applied unless set to ``None``.
    """

    search: str = Field(default="", description="Substring matched on title, developer, region")
    region: str = Field(default="", description="Exact region filter")
    type: str = Field(default="", description="Exact property type filter")
    developer: str = Field(default="", description="Exact developer filter")
    max_price: float | None = Field(
        default_factory=lambda: get_settings().default_max_price, ge=0, description="Inclusive price cap"
    )
    min_bedrooms: int | None = Field(default=None, ge=0, description="Inclusive bedroom floor")
    sort_key: SortKey = Field(default=SortKey.TITLE)
    page: int = Field(default=1, description="1-based page index")
    page_size: int = Field(default_factory=lambda: get_settings().page_size, gt=0)

    model_config = ConfigDict(frozen=True)

    @field_validator("search", "region", "type", "developer", mode="before")
    @classmethod
    def none_is_blank(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("min_bedrooms", mode="before")
    @classmethod
    def blank_is_none(cls, v: Any) -> Any:
        return None if v == "" else v

    @field_validator("sort_key", mode="before")
    @classmethod
    def legacy_price_key(cls, v: Any) -> Any:
        """The listing page historically used "price" for ascending price."""
        return SortKey.PRICE_ASC if v == "price" else v

    def with_page(self, page: int) -> QueryState:
        """Return a copy pointing at another page."""
        return self.model_copy(update={"page": page})


class QueryResult(BaseModel):
    """One page of matching records plus pagination metadata."""

    page: tuple[PropertyRecord, ...] = ()
    total_matched: int = Field(default=0, ge=0)
    total_pages: int = Field(default=1, ge=1)
    page_number: int = 1
    page_size: int = Field(default=12, gt=0)

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def start_item(self) -> int:
        """1-based position of the first record on the page, 0 if empty."""
        if not self.page:
            return 0
        return (self.page_number - 1) * self.page_size + 1

    @computed_field
    @property
    def end_item(self) -> int:
        """1-based position of the last record on the page, 0 if empty."""
        if not self.page:
            return 0
        return self.start_item + len(self.page) - 1

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages
