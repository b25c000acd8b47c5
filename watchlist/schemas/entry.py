"""Entry schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, computed_field, field_validator

from watchlist.models.enums import EntryType
from watchlist.schemas.base import CamelModel
from watchlist.services.budget import format_budget, is_valid_budget

BUDGET_FORMAT_MESSAGE = (
    'Budget must be in format like $1M, $100K, $1.5B, or text like "Low", "High", etc.'
)


def _check_budget(value: str) -> str:
    if not is_valid_budget(value):
        raise ValueError(BUDGET_FORMAT_MESSAGE)
    return value


Budget = Annotated[str, Field(min_length=1, max_length=100), AfterValidator(_check_budget)]


class EntryCreate(CamelModel):
    """Create a new entry."""

    title: str = Field(..., min_length=1, max_length=255)
    type: EntryType
    director: str = Field(..., min_length=1, max_length=255)
    budget: Budget
    location: str = Field(..., min_length=1, max_length=255)
    duration: str = Field(..., min_length=1, max_length=100)
    year_time: str = Field(..., min_length=1, max_length=100)
    description: str | None = None
    image_url: str | None = Field(None, max_length=512)


class EntryUpdate(CamelModel):
    """Partially update an entry. Omitted fields keep their stored value."""

    title: str | None = Field(None, min_length=1, max_length=255)
    type: EntryType | None = None
    director: str | None = Field(None, min_length=1, max_length=255)
    budget: Budget | None = None
    location: str | None = Field(None, min_length=1, max_length=255)
    duration: str | None = Field(None, min_length=1, max_length=100)
    year_time: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None
    image_url: str | None = Field(None, max_length=512)

    @field_validator("title", "type", "director", "budget", "location", "duration", "year_time")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("Field cannot be null")
        return value


class EntryResponse(CamelModel):
    """Entry response."""

    id: int
    title: str
    type: str
    director: str
    budget: str
    location: str
    duration: str
    year_time: str
    description: str | None = None
    image_url: str | None = None
    user_id: int | None = None
    created_at: datetime
    updated_at: datetime

    @computed_field(alias="budgetDisplay")
    @property
    def budget_display(self) -> str:
        return format_budget(self.budget)


class Pagination(CamelModel):
    """Window metadata for a page of entries."""

    page: int
    limit: int
    total: int
    has_more: bool


class EntryListResponse(BaseModel):
    """A page of entries."""

    data: list[EntryResponse]
    pagination: Pagination
