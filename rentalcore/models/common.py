"""Common types used across rentalcore."""

from datetime import date, datetime
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

# Dates arrive from forms as ISO strings; parsing (and its failure mode)
# belongs to the pricing service, so the raw value is kept here.
DateInput = Union[datetime, date, str]


class Availability(str, Enum):
    """Where a catalog item is fulfilled from."""
    IN_HOUSE = "in-house"
    PARTNER = "partner"


class QuoteStatus(str, Enum):
    """Quote lifecycle status."""
    DRAFT = "draft"
    SUBMITTED = "submitted"
    ACCEPTED = "accepted"
    FULFILLED = "fulfilled"
    CANCELLED = "cancelled"


class RentalPeriod(BaseModel):
    """A rental date range, as entered by the customer."""
    model_config = ConfigDict(frozen=True)

    start_date: DateInput
    end_date: DateInput


class PaginationParams(BaseModel):
    """Pagination parameters."""
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=25, ge=1, le=100)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class Pagination(BaseModel):
    """Pagination metadata returned with a page of results."""
    page: int
    limit: int
    total_count: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, params: PaginationParams, total_count: int) -> "Pagination":
        total_pages = (total_count + params.limit - 1) // params.limit
        return cls(
            page=params.page,
            limit=params.limit,
            total_count=total_count,
            total_pages=total_pages,
            has_next=params.page < total_pages,
            has_prev=params.page > 1,
        )
