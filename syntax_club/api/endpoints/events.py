"""Event management endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from syntax_club.api.endpoints.arvantis import get_arvantis_repository, get_event_repository
from syntax_club.models.enums import EventPeriod, EventStatus
from syntax_club.repositories.arvantis import ArvantisRepository
from syntax_club.repositories.event import EventRepository
from syntax_club.services.event import EventService
from syntax_club.schemas.event import (
    EventCreate,
    EventFilterParams,
    EventListResponse,
    EventResponse,
    EventStatistics,
    EventUpdate,
)
from syntax_club.schemas.shared import MessageResponse

router = APIRouter()


async def get_event_service(
    event_repo: EventRepository = Depends(get_event_repository),
    fest_repo: ArvantisRepository = Depends(get_arvantis_repository),
) -> EventService:
    """Get event service dependency."""
    return EventService(event_repo, fest_repo)


@router.get("/statistics/overview", response_model=EventStatistics, summary="Event counts by status")
async def get_event_statistics(event_service: EventService = Depends(get_event_service)):
    return await event_service.get_statistics()


@router.post("/", response_model=EventResponse, status_code=201, summary="Create an event")
async def create_event(
    event_data: EventCreate,
    event_service: EventService = Depends(get_event_service),
):
    return await event_service.create_event(event_data)


@router.get("/", response_model=EventListResponse, summary="List events")
async def get_events(
    page: int = Query(1, ge=1),
    size: int = Query(10, ge=1, le=100),
    status: Optional[EventStatus] = Query(None),
    period: Optional[EventPeriod] = Query(None),
    search: Optional[str] = Query(None),
    sort_by: str = Query("event_date", pattern="^(event_date|created_at|title|status)$"),
    sort_order: str = Query("asc", pattern="^(asc|desc)$"),
    event_service: EventService = Depends(get_event_service),
):
    filters = EventFilterParams(
        page=page,
        size=size,
        status=status,
        period=period,
        search=search,
        sort_by=sort_by,
        sort_order=sort_order
    )
    return await event_service.get_events(filters)


@router.get("/{event_id}", response_model=EventResponse, summary="Event details")
async def get_event(
    event_id: int,
    event_service: EventService = Depends(get_event_service),
):
    return await event_service.get_event(event_id)


@router.put("/{event_id}", response_model=EventResponse, summary="Update an event")
async def update_event(
    event_id: int,
    event_data: EventUpdate,
    event_service: EventService = Depends(get_event_service),
):
    return await event_service.update_event(event_id, event_data)


@router.delete("/{event_id}", response_model=MessageResponse, summary="Delete an event")
async def delete_event(
    event_id: int,
    event_service: EventService = Depends(get_event_service),
):
    return await event_service.delete_event(event_id)
