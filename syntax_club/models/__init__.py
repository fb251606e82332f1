"""Database models initialization."""

# Base classes
from .base import BaseModel, as_utc, utcnow

# Core models
from .member import Member
from .arvantis import ArvantisFest, build_fest_slug
from .event import Event

# Enums
from .enums import (
    MemberStatus,
    FestStatus,
    EventStatus,
    EventPeriod,
    FestItemKind,
    MoveDirection,
)
