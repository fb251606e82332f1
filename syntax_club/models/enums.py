"""Enums for database models."""

from enum import Enum


class MemberStatus(str, Enum):
    """Member account status."""
    ACTIVE = "active"
    BANNED = "banned"

    @classmethod
    def get_all_values(cls):
        """Get all status values as list."""
        return [status.value for status in cls]


class FestStatus(str, Enum):
    """Lifecycle status of an Arvantis fest."""
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    POSTPONED = "postponed"

    @classmethod
    def get_all_values(cls):
        """Get all status values as list."""
        return [status.value for status in cls]


class FestItemKind(str, Enum):
    """Ordered sub-resources stored on a fest."""
    GUIDELINES = "guidelines"
    PRIZES = "prizes"
    GUESTS = "guests"

    @property
    def label(self) -> str:
        return self.value[:-1].capitalize()


class MoveDirection(str, Enum):
    """Single-step move for ordered lists."""
    UP = "up"
    DOWN = "down"


class EventStatus(str, Enum):
    """Lifecycle status of a club event."""
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    POSTPONED = "postponed"

    @classmethod
    def get_all_values(cls):
        """Get all status values as list."""
        return [status.value for status in cls]


class EventPeriod(str, Enum):
    """Event date relative to now."""
    UPCOMING = "upcoming"
    PAST = "past"
