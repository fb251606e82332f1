"""Arvantis fest model."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field, SQLModel

from .base import BaseModel
from .enums import FestStatus


def build_fest_slug(name: str, year: int) -> str:
    """Lowercase name words joined by dashes, suffixed with the year."""
    return f"{'-'.join(name.lower().split())}-{year}"


class ArvantisFest(BaseModel, SQLModel, table=True):
    """One yearly fest with its ordered sub-resources stored as JSON arrays."""

    __tablename__ = "arvantis_fests"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(default="Arvantis", max_length=255, nullable=False)
    year: int = Field(nullable=False, unique=True, index=True)
    slug: str = Field(max_length=300, nullable=False, unique=True, index=True)
    description: str = Field(nullable=False)
    start_date: datetime = Field(sa_type=DateTime(timezone=True), nullable=False)
    end_date: datetime = Field(sa_type=DateTime(timezone=True), nullable=False)
    status: FestStatus = Field(default=FestStatus.UPCOMING, index=True)
    location: Optional[str] = Field(default=None, max_length=255)
    events: List[int] = Field(default_factory=list, sa_column=Column(JSON, nullable=False), description="Linked event ids")
    partners: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    guidelines: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    prizes: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    guests: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    def __repr__(self) -> str:
        return f"<ArvantisFest(id={self.id}, year={self.year}, slug={self.slug})>"

    def refresh_slug(self) -> None:
        self.slug = build_fest_slug(self.name, self.year)
