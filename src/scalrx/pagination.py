"""List options, paged results and page iteration shared by every resource."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationInfo, field_validator

ItemT = TypeVar("ItemT")
OptionsT = TypeVar("OptionsT", bound="ListOptions")


def join_names(value: Any) -> Any:
    """Comma-join a sequence of names; pass strings and ``None`` through."""

    if value is None or isinstance(value, str):
        return value
    if isinstance(value, Sequence):
        return ",".join(str(item) for item in value)
    return value


class ListOptions(BaseModel):
    """Pagination fields shared by every list query.

    Unset fields are left out of the query string entirely, so they never
    turn into an empty filter.
    """

    page_number: PositiveInt | None = Field(default=None, alias="page[number]")
    page_size: PositiveInt | None = Field(default=None, alias="page[size]")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    @field_validator("*", mode="before")
    @classmethod
    def _join_sequences(cls, value: Any, info: ValidationInfo) -> Any:
        if info.field_name in {"include", "sort"}:
            return join_names(value)
        return value

    def to_params(self) -> dict[str, Any]:
        """Return the query parameters for this options value."""

        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

    def with_page(self: OptionsT, page_number: int) -> OptionsT:
        return self.model_copy(update={"page_number": page_number})


class Pagination(BaseModel):
    """Paging metadata read from ``meta.pagination``."""

    current_page: int | None = Field(default=None, alias="current-page")
    prev_page: int | None = Field(default=None, alias="prev-page")
    next_page: int | None = Field(default=None, alias="next-page")
    total_pages: int | None = Field(default=None, alias="total-pages")
    total_count: int = Field(default=0, alias="total-count")

    model_config = ConfigDict(populate_by_name=True, extra="allow")


@dataclass(frozen=True)
class Page(Generic[ItemT]):
    """One page of a list query plus the count across all pages."""

    items: list[ItemT]
    pagination: Pagination

    @property
    def total_count(self) -> int:
        return self.pagination.total_count

    @property
    def current_page(self) -> int | None:
        return self.pagination.current_page

    @property
    def next_page(self) -> int | None:
        return self.pagination.next_page

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[ItemT]:
        return iter(self.items)


def iter_pages(
    fetch: Callable[[OptionsT], Page[ItemT]], options: OptionsT
) -> Iterator[Page[ItemT]]:
    """Yield pages starting at ``options`` and following ``next_page``."""

    current = options
    while True:
        page = fetch(current)
        yield page
        next_page = page.next_page
        if not next_page or (page.current_page and next_page <= page.current_page):
            return
        current = current.with_page(next_page)


def iter_items(
    fetch: Callable[[OptionsT], Page[ItemT]], options: OptionsT
) -> Iterator[ItemT]:
    """Yield every item across pages in service order."""

    for page in iter_pages(fetch, options):
        yield from page.items


__all__ = [
    "ListOptions",
    "Page",
    "Pagination",
    "iter_items",
    "iter_pages",
    "join_names",
]
