"""Pagination and page-envelope schemas."""

from math import ceil
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, computed_field

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """A bounded, ordered slice of a larger result set plus total-count metadata."""

    items: list[T]
    total: int
    page: int
    per_page: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def pages(self) -> int:
        """Number of pages needed for the whole result set."""
        return max(1, ceil(self.total / self.per_page))

    def as_schema(self, schema: type[BaseModel]) -> "Page":
        """Convert the items (usually ORM rows) into response schemas."""
        return Page[schema](  # type: ignore[valid-type]
            items=[schema.model_validate(item) for item in self.items],
            total=self.total,
            page=self.page,
            per_page=self.per_page,
        )


class FlashMessage(BaseModel):
    """One-shot message carried across a redirect."""

    kind: str
    message: str


class IndexResponse(BaseModel, Generic[T]):
    """Paginated index with pending flash messages."""

    pagination: Page[T]
    flashes: list[FlashMessage] = Field(default_factory=list)


class FormResponse(BaseModel):
    """Description of a form to submit: where, how and with what current values."""

    method: str
    action: str
    data: dict[str, Any] = Field(default_factory=dict)
