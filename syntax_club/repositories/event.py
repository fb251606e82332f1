"""Event repository for database operations."""

from typing import Dict, List, Optional, Tuple

from sqlalchemy import select, func, delete, or_
from sqlalchemy.ext.asyncio import AsyncSession

from syntax_club.models.base import utcnow
from syntax_club.models.enums import EventPeriod, EventStatus
from syntax_club.models.event import Event
from syntax_club.schemas.event import EventFilterParams


class EventRepository:
    """Repository for event operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, event_data: dict) -> Event:
        event = Event(**event_data)
        self.session.add(event)
        await self.session.commit()
        await self.session.refresh(event)
        return event

    async def get_by_id(self, event_id: int) -> Optional[Event]:
        result = await self.session.execute(select(Event).where(Event.id == event_id))
        return result.scalar_one_or_none()

    async def save(self, event: Event) -> Event:
        """Persist changes made to a loaded event."""
        event.updated_at = utcnow()
        self.session.add(event)
        await self.session.commit()
        await self.session.refresh(event)
        return event

    async def delete(self, event_id: int) -> None:
        await self.session.execute(delete(Event).where(Event.id == event_id))
        await self.session.commit()

    async def get_all_filtered(self, filters: EventFilterParams) -> Tuple[List[Event], int]:
        """Get events with filters and pagination."""
        conditions = []
        if filters.status:
            conditions.append(Event.status == filters.status)
        if filters.period == EventPeriod.UPCOMING:
            conditions.append(Event.event_date >= utcnow())
        elif filters.period == EventPeriod.PAST:
            conditions.append(Event.event_date < utcnow())
        if filters.search and filters.search.strip():
            pattern = f"%{filters.search.strip()}%"
            conditions.append(or_(Event.title.ilike(pattern), Event.description.ilike(pattern)))

        count_query = select(func.count(Event.id)).where(*conditions)
        total = (await self.session.execute(count_query)).scalar() or 0

        sort_column = getattr(Event, filters.sort_by, Event.event_date)
        order = sort_column.desc() if filters.sort_order == "desc" else sort_column.asc()

        offset = (filters.page - 1) * filters.size
        query = select(Event).where(*conditions).order_by(order, Event.id.asc()).offset(offset).limit(filters.size)
        result = await self.session.execute(query)
        return list(result.scalars().all()), total

    async def get_status_counts(self) -> Dict[str, int]:
        query = select(Event.status, func.count(Event.id)).group_by(Event.status)
        result = await self.session.execute(query)
        return {
            (status.value if isinstance(status, EventStatus) else str(status)): count
            for status, count in result.all()
        }
