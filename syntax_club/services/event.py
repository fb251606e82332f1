"""Event business logic services."""

import logging

from syntax_club.core.exceptions import BusinessLogicError, EventNotFoundError
from syntax_club.models.base import as_utc
from syntax_club.models.event import Event
from syntax_club.repositories.arvantis import ArvantisRepository
from syntax_club.repositories.event import EventRepository
from syntax_club.schemas.event import (
    EventCreate,
    EventFilterParams,
    EventListResponse,
    EventResponse,
    EventStatistics,
    EventUpdate,
)
from syntax_club.schemas.shared import MessageResponse, calculate_pages
from syntax_club.utils.messages import get_message

logger = logging.getLogger(__name__)

# columns that may be cleared with an explicit null
NULLABLE_FIELDS = {"registration_open_date", "registration_close_date"}


class EventService:
    """Service for event business logic."""

    def __init__(self, event_repo: EventRepository, fest_repo: ArvantisRepository):
        self.event_repo = event_repo
        self.fest_repo = fest_repo

    async def _get_or_404(self, event_id: int) -> Event:
        event = await self.event_repo.get_by_id(event_id)
        if not event:
            raise EventNotFoundError(event_id)
        return event

    async def create_event(self, event_data: EventCreate) -> EventResponse:
        event = await self.event_repo.create(event_data.model_dump())
        logger.info(f"Event created: id={event.id} title={event.title!r}")
        return EventResponse.model_validate(event)

    async def get_events(self, filters: EventFilterParams) -> EventListResponse:
        """Get events with filters and pagination."""
        events, total = await self.event_repo.get_all_filtered(filters)
        return EventListResponse(
            items=[EventResponse.model_validate(event) for event in events],
            total=total,
            page=filters.page,
            size=filters.size,
            pages=calculate_pages(total, filters.size),
        )

    async def get_event(self, event_id: int) -> EventResponse:
        return EventResponse.model_validate(await self._get_or_404(event_id))

    async def update_event(self, event_id: int, event_data: EventUpdate) -> EventResponse:
        """Apply sent fields; null is ignored except for the registration dates."""
        event = await self._get_or_404(event_id)
        update_data = {
            key: value
            for key, value in event_data.model_dump(exclude_unset=True).items()
            if value is not None or key in NULLABLE_FIELDS
        }

        opens = as_utc(update_data.get("registration_open_date", event.registration_open_date))
        closes = as_utc(update_data.get("registration_close_date", event.registration_close_date))
        if opens and closes and closes < opens:
            raise BusinessLogicError(get_message("event", "invalid_registration_window"))

        for key, value in update_data.items():
            setattr(event, key, value)
        event = await self.event_repo.save(event)
        logger.info(f"Event updated: id={event.id} fields={sorted(update_data)}")
        return EventResponse.model_validate(event)

    async def delete_event(self, event_id: int) -> MessageResponse:
        """Delete an event and unlink it from every fest."""
        event = await self._get_or_404(event_id)
        for fest in await self.fest_repo.get_all_by_year():
            if event.id in (fest.events or []):
                fest.events = [linked for linked in fest.events if linked != event.id]
                await self.fest_repo.save(fest)
                logger.info(f"Event {event.id} unlinked from fest {fest.year}")

        await self.event_repo.delete(event.id)
        logger.info(f"Event deleted: id={event.id}")
        return MessageResponse(message=get_message("event", "deleted"))

    async def get_statistics(self) -> EventStatistics:
        counts = await self.event_repo.get_status_counts()
        return EventStatistics(total_events=sum(counts.values()), status_counts=counts)
