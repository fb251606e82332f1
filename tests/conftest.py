"""Shared fixtures: in-memory repositories wired into the app."""

import os

# Settings are read at import time
os.environ.setdefault("DATABASE_URI", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_DIRECTORY", "")

from collections import Counter
from typing import Dict, Iterable, List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from main import app
from syntax_club.api.endpoints.arvantis import get_arvantis_repository, get_event_repository
from syntax_club.api.endpoints.members import get_member_repository
from syntax_club.models.arvantis import ArvantisFest
from syntax_club.models.base import as_utc, utcnow
from syntax_club.models.enums import EventPeriod, EventStatus, FestStatus, MemberStatus
from syntax_club.models.event import Event
from syntax_club.models.member import Member
from syntax_club.schemas.arvantis import FestFilterParams
from syntax_club.schemas.event import EventFilterParams


# ============================================
# Fake repositories
# ============================================
class FakeMemberRepository:
    """Dict-backed stand-in for MemberRepository."""

    def __init__(self):
        self.members: Dict[int, Member] = {}
        self._next_id = 1

    async def create(self, member_data: dict) -> Member:
        member = Member(**member_data)
        member.id = self._next_id
        self._next_id += 1
        self.members[member.id] = member
        return member

    async def get_by_id(self, member_id: int) -> Optional[Member]:
        member = self.members.get(member_id)
        if member is None or member.deleted_at is not None:
            return None
        return member

    async def update(self, member_id: int, update_data: dict) -> Optional[Member]:
        member = await self.get_by_id(member_id)
        if not member:
            return None
        for key, value in update_data.items():
            setattr(member, key, value)
        member.updated_at = utcnow()
        return member

    async def soft_delete(self, member_id: int) -> bool:
        member = await self.get_by_id(member_id)
        if not member:
            return False
        member.deleted_at = utcnow()
        return True

    async def get_all(self, status: Optional[MemberStatus] = MemberStatus.ACTIVE) -> List[Member]:
        members = [m for m in self.members.values() if m.deleted_at is None]
        if status is not None:
            members = [m for m in members if m.status == status]
        return sorted(members, key=lambda m: (m.member_order, m.id))

    async def get_max_member_order(self) -> int:
        return max((m.member_order for m in self.members.values() if m.deleted_at is None), default=0)


class FakeArvantisRepository:
    """List-backed stand-in for ArvantisRepository."""

    def __init__(self):
        self.fests: List[ArvantisFest] = []
        self._next_id = 1
        self.saves = 0

    async def create(self, fest_data: dict) -> ArvantisFest:
        fest = ArvantisFest(**fest_data)
        fest.refresh_slug()
        fest.id = self._next_id
        self._next_id += 1
        self.fests.append(fest)
        return fest

    async def get_by_year(self, year: int) -> Optional[ArvantisFest]:
        return next((f for f in self.fests if f.year == year), None)

    async def get_by_slug(self, slug: str) -> Optional[ArvantisFest]:
        return next((f for f in self.fests if f.slug == slug), None)

    async def save(self, fest: ArvantisFest) -> ArvantisFest:
        fest.updated_at = utcnow()
        self.saves += 1
        return fest

    async def delete(self, fest_id: int) -> None:
        self.fests = [f for f in self.fests if f.id != fest_id]

    async def get_all_filtered(self, filters: FestFilterParams) -> Tuple[List[ArvantisFest], int]:
        fests = [f for f in self.fests if not filters.status or f.status == filters.status]
        fests.sort(key=lambda f: f.year, reverse=filters.sort_order == "desc")
        offset = (filters.page - 1) * filters.size
        return fests[offset:offset + filters.size], len(fests)

    async def get_all_by_year(self, descending: bool = True) -> List[ArvantisFest]:
        return sorted(self.fests, key=lambda f: f.year, reverse=descending)

    async def get_for_year_with_status(self, year: int, statuses: Iterable[FestStatus]) -> Optional[ArvantisFest]:
        statuses = list(statuses)
        return next((f for f in self.fests if f.year == year and f.status in statuses), None)

    async def get_latest_with_status(self, status: FestStatus) -> Optional[ArvantisFest]:
        matches = [f for f in self.fests if f.status == status]
        return max(matches, key=lambda f: f.year, default=None)


class FakeEventRepository:
    """Dict-backed stand-in for EventRepository."""

    def __init__(self):
        self.events: Dict[int, Event] = {}
        self._next_id = 1

    async def create(self, event_data: dict) -> Event:
        event = Event(**event_data)
        event.id = self._next_id
        self._next_id += 1
        self.events[event.id] = event
        return event

    async def get_by_id(self, event_id: int) -> Optional[Event]:
        return self.events.get(event_id)

    async def save(self, event: Event) -> Event:
        event.updated_at = utcnow()
        return event

    async def delete(self, event_id: int) -> None:
        self.events.pop(event_id, None)

    async def get_all_filtered(self, filters: EventFilterParams) -> Tuple[List[Event], int]:
        now = utcnow()
        events = list(self.events.values())
        if filters.status:
            events = [e for e in events if e.status == filters.status]
        if filters.period == EventPeriod.UPCOMING:
            events = [e for e in events if as_utc(e.event_date) >= now]
        elif filters.period == EventPeriod.PAST:
            events = [e for e in events if as_utc(e.event_date) < now]
        if filters.search:
            needle = filters.search.strip().lower()
            events = [e for e in events if needle in e.title.lower() or needle in e.description.lower()]
        events.sort(key=lambda e: (getattr(e, filters.sort_by), e.id), reverse=filters.sort_order == "desc")
        offset = (filters.page - 1) * filters.size
        return events[offset:offset + filters.size], len(events)

    async def get_status_counts(self) -> Dict[str, int]:
        return dict(Counter(EventStatus(e.status).value for e in self.events.values()))


# ============================================
# Fixtures
# ============================================
@pytest.fixture
def member_repo():
    return FakeMemberRepository()


@pytest.fixture
def fest_repo():
    return FakeArvantisRepository()


@pytest.fixture
def event_repo():
    return FakeEventRepository()


@pytest.fixture
def client(member_repo, fest_repo, event_repo):
    """TestClient without lifespan, so no database is touched."""
    app.dependency_overrides[get_member_repository] = lambda: member_repo
    app.dependency_overrides[get_arvantis_repository] = lambda: fest_repo
    app.dependency_overrides[get_event_repository] = lambda: event_repo
    yield TestClient(app)
    app.dependency_overrides.clear()
