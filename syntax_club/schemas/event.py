"""Event schemas for API request/response."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from syntax_club.models.base import as_utc
from syntax_club.models.enums import EventPeriod, EventStatus
from syntax_club.schemas.shared import BaseListResponse


def split_tags(value: Any) -> Any:
    """Accept tags as a list or a comma-separated string."""
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    if isinstance(value, (list, tuple)):
        return [tag.strip() for tag in value if isinstance(tag, str) and tag.strip()]
    return value


class EventBase(BaseModel):
    """Base event schema."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    event_date: datetime = Field(..., validation_alias=AliasChoices("event_date", "eventDate", "date"))
    venue: str = Field(..., min_length=1, max_length=255, validation_alias=AliasChoices("venue", "location"))
    organizer: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=100)
    tags: List[str] = Field(default_factory=list)
    total_spots: int = Field(default=0, ge=0, description="0 means unlimited")
    ticket_price: float = Field(default=0, ge=0)
    registration_open_date: Optional[datetime] = None
    registration_close_date: Optional[datetime] = None

    @field_validator("title", "description", "venue", "organizer", "category", mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("tags", mode="before")
    @classmethod
    def validate_tags(cls, value: Any) -> Any:
        return split_tags(value)

    @field_validator("event_date", "registration_open_date", "registration_close_date")
    @classmethod
    def normalize_dates(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)

    @model_validator(mode="after")
    def check_registration_window(self) -> "EventBase":
        opens, closes = self.registration_open_date, self.registration_close_date
        if opens and closes and closes < opens:
            raise ValueError("Registration cannot close before it opens")
        return self


class EventCreate(EventBase):
    """Event creation schema."""
    status: EventStatus = EventStatus.UPCOMING


class EventUpdate(BaseModel):
    """Event update schema; null clears only the registration dates."""

    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    event_date: Optional[datetime] = Field(None, validation_alias=AliasChoices("event_date", "eventDate", "date"))
    venue: Optional[str] = Field(None, min_length=1, max_length=255, validation_alias=AliasChoices("venue", "location"))
    organizer: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    tags: Optional[List[str]] = None
    total_spots: Optional[int] = Field(None, ge=0)
    ticket_price: Optional[float] = Field(None, ge=0)
    status: Optional[EventStatus] = None
    registration_open_date: Optional[datetime] = None
    registration_close_date: Optional[datetime] = None

    @field_validator("tags", mode="before")
    @classmethod
    def validate_tags(cls, value: Any) -> Any:
        return split_tags(value)

    @field_validator("event_date", "registration_open_date", "registration_close_date")
    @classmethod
    def normalize_dates(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class EventResponse(BaseModel):
    """Event returned by the API."""
    id: int
    title: str
    description: str
    event_date: datetime
    venue: str
    organizer: str
    category: str
    tags: List[str]
    total_spots: int
    ticket_price: float
    status: EventStatus
    registration_open_date: Optional[datetime] = None
    registration_close_date: Optional[datetime] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class EventListResponse(BaseListResponse[EventResponse]):
    """Event list response with pagination."""
    pass


class EventFilterParams(BaseModel):
    """Event filter parameters."""
    page: int = Field(default=1, ge=1, description="Page number")
    size: int = Field(default=10, ge=1, le=100, description="Items per page")
    status: Optional[EventStatus] = Field(None, description="Filter by status")
    period: Optional[EventPeriod] = Field(None, description="Upcoming or past events")
    search: Optional[str] = Field(None, description="Case-insensitive match on title and description")
    sort_by: str = Field("event_date", pattern="^(event_date|created_at|title|status)$")
    sort_order: str = Field("asc", pattern="^(asc|desc)$")


class EventStatistics(BaseModel):
    total_events: int = 0
    status_counts: Dict[str, int] = Field(default_factory=dict)
