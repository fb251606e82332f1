"""Arvantis fest schemas for API request/response."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from syntax_club.core.config import settings
from syntax_club.models.base import as_utc
from syntax_club.models.enums import FestStatus, MoveDirection
from syntax_club.schemas.shared import BaseListResponse
from syntax_club.utils.sanitize_html import sanitize_html_content


# ===== FEST SCHEMAS =====

class FestBase(BaseModel):
    """Base fest schema."""
    name: str = Field(default=settings.FEST_DEFAULT_NAME, min_length=1, max_length=255)
    year: int = Field(..., ge=2000, le=2100, description="Fest year, one fest per year")
    description: str = Field(..., min_length=1)
    start_date: datetime
    end_date: datetime
    status: FestStatus = FestStatus.UPCOMING
    location: Optional[str] = Field(None, max_length=255)

    @field_validator("name", "description")
    @classmethod
    def strip_text(cls, value: str) -> str:
        return value.strip()

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_dates(cls, value: datetime) -> datetime:
        return as_utc(value)


class FestCreate(FestBase):
    """Fest creation schema."""
    pass


class FestUpdate(BaseModel):
    """Fest update schema."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    year: Optional[int] = Field(None, ge=2000, le=2100)
    description: Optional[str] = Field(None, min_length=1)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: Optional[FestStatus] = None
    location: Optional[str] = Field(None, max_length=255)

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_dates(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class FestSummary(BaseModel):
    """Fest row for listings."""
    id: int
    name: str
    year: int
    slug: str
    status: FestStatus
    start_date: datetime
    end_date: datetime

    model_config = ConfigDict(from_attributes=True)


class FestResponse(FestSummary):
    """Full fest with its sub-resources."""
    description: str
    location: Optional[str] = None
    events: List[int] = Field(default_factory=list)
    partners: List[Dict[str, Any]] = Field(default_factory=list)
    guidelines: List[Dict[str, Any]] = Field(default_factory=list)
    prizes: List[Dict[str, Any]] = Field(default_factory=list)
    guests: List[Dict[str, Any]] = Field(default_factory=list)
    created_at: datetime
    updated_at: Optional[datetime] = None


class FestListResponse(BaseListResponse[FestSummary]):
    """Fest list response with pagination."""
    pass


class FestFilterParams(BaseModel):
    """Fest filter parameters."""
    page: int = Field(default=1, ge=1, description="Page number")
    size: int = Field(default=10, ge=1, le=100, description="Items per page")
    status: Optional[FestStatus] = Field(None, description="Filter by status")
    sort_by: str = Field("year", description="Sort field")
    sort_order: str = Field("desc", pattern="^(asc|desc)$", description="Sort order")


# ===== SUB-RESOURCE SCHEMAS =====

class PartnerCreate(BaseModel):
    """Sponsor or collaborator attached to a fest."""
    name: str = Field(..., min_length=1, max_length=255)
    website: Optional[str] = Field(None, max_length=500)
    tier: Optional[str] = Field(None, max_length=100, description="e.g. sponsor, collaborator, title")
    logo_url: Optional[str] = Field(None, max_length=500)

    @field_validator("name")
    @classmethod
    def strip_name(cls, name: str) -> str:
        return name.strip()

    @field_validator("tier")
    @classmethod
    def normalize_tier(cls, tier: Optional[str]) -> Optional[str]:
        return tier.strip().lower() if tier else None


class GuidelineCreate(BaseModel):
    title: str = Field(default="", max_length=255)
    details: str = Field(default="")


class GuidelineUpdate(BaseModel):
    title: Optional[str] = Field(None, max_length=255)
    details: Optional[str] = None


class PrizeCreate(BaseModel):
    title: str = Field(default="", max_length=255)
    position: str = Field(default="", max_length=100, description="e.g. 1st, Runner-up")
    amount: Optional[float] = Field(None, ge=0)
    currency: str = Field(default=settings.DEFAULT_CURRENCY, max_length=10)
    description: str = Field(default="")

    @model_validator(mode="after")
    def require_label(self) -> "PrizeCreate":
        if not self.title.strip() and not self.position.strip():
            raise ValueError("A prize needs a title or a position")
        return self


class PrizeUpdate(BaseModel):
    title: Optional[str] = Field(None, max_length=255)
    position: Optional[str] = Field(None, max_length=100)
    amount: Optional[float] = Field(None, ge=0)
    currency: Optional[str] = Field(None, max_length=10)
    description: Optional[str] = None


class GuestCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    bio: str = Field(default="")
    photo_url: Optional[str] = Field(None, max_length=500)
    social_links: Dict[str, str] = Field(default_factory=dict, description="platform -> url")

    @field_validator("bio")
    @classmethod
    def sanitize_bio(cls, bio: str) -> str:
        return sanitize_html_content(bio) if bio else bio

    @field_validator("social_links")
    @classmethod
    def drop_blank_links(cls, links: Dict[str, str]) -> Dict[str, str]:
        return {platform: url.strip() for platform, url in links.items() if url and url.strip()}


class GuestUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    bio: Optional[str] = None
    photo_url: Optional[str] = Field(None, max_length=500)
    social_links: Optional[Dict[str, str]] = None

    @field_validator("bio")
    @classmethod
    def sanitize_bio(cls, bio: Optional[str]) -> Optional[str]:
        return sanitize_html_content(bio) if bio else bio


class EventLinkRequest(BaseModel):
    event_id: int = Field(..., ge=1)


class ReorderRequest(BaseModel):
    """Full new order of item ids."""
    order: List[str] = Field(..., description="Every existing item id exactly once")


class MoveRequest(BaseModel):
    direction: MoveDirection


# ===== REPORTING SCHEMAS =====

class FestStatistics(BaseModel):
    total_fests: int = 0
    total_partners: int = 0
    total_events: int = 0
    total_guests: int = 0
    total_prizes: int = 0
    status_counts: Dict[str, int] = Field(default_factory=dict)


class FestAnalyticsRow(BaseModel):
    year: int
    event_count: int
    partner_count: int
    sponsor_count: int
    collaborator_count: int
    guest_count: int
    prize_count: int


class FestReport(BaseModel):
    fest_details: Dict[str, Any]
    events: List[int]
    partners: List[Dict[str, Any]]
    guests: List[Dict[str, Any]]
    prizes: List[Dict[str, Any]]
