"""Club event model."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field, SQLModel

from .base import BaseModel
from .enums import EventStatus


class Event(BaseModel, SQLModel, table=True):
    """A single club event that fests can link to."""

    __tablename__ = "events"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255, nullable=False, index=True)
    description: str = Field(nullable=False)
    event_date: datetime = Field(sa_type=DateTime(timezone=True), nullable=False, index=True)
    venue: str = Field(max_length=255, nullable=False)
    organizer: str = Field(max_length=255, nullable=False)
    category: str = Field(max_length=100, nullable=False, index=True)
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    total_spots: int = Field(default=0, description="0 means unlimited")
    ticket_price: float = Field(default=0)
    status: EventStatus = Field(default=EventStatus.UPCOMING, index=True)
    registration_open_date: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
    registration_close_date: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, title={self.title}, status={self.status})>"
