"""Response envelopes: the error payload, pagination metadata and list results."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, overload

from pydantic import Field

from ._base import BunnyModel

T = TypeVar("T")


class ErrorPayload(BunnyModel):
    """The API's error body: ``{"ErrorKey": ..., "Field": ..., "Message": ...}``."""

    error_key: str | None = None
    field: str | None = None
    message: str | None = None

    @classmethod
    def detect(cls, data: Any) -> ErrorPayload | None:
        """Return the payload if ``data`` is error-shaped, else None.

        All three keys must be present with string or null values, and at
        least one of them must be non-empty.
        """
        if not isinstance(data, dict):
            return None
        keys = ("ErrorKey", "Field", "Message")
        if any(key not in data for key in keys):
            return None
        values = [data[key] for key in keys]
        if any(value is not None and not isinstance(value, str) for value in values):
            return None
        if not any(values):
            return None
        return cls.model_validate(data)


class PageMeta(BunnyModel):
    """Pagination wrapper returned by list endpoints when paging is requested."""

    items: list[Any] = Field(default_factory=list)
    current_page: int = 0
    total_items: int = 0
    has_more_items: bool = False

    def valid(self) -> bool:
        return self.current_page > 0


@dataclass(frozen=True)
class ListResult(Generic[T]):
    """Decoded list items.

    ``skipped`` counts trailing elements that were not decoded because an
    element failed to decode; ``page`` is set when the API sent pagination
    metadata.
    """

    items: list[T] = field(default_factory=list)
    skipped: int = 0
    page: PageMeta | None = None

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        return self.items[index]

    @property
    def complete(self) -> bool:
        return self.skipped == 0


__all__ = ["ErrorPayload", "PageMeta", "ListResult"]
