"""Arvantis fest management endpoints."""

from typing import Any, Dict, List, Optional, Type

from fastapi import APIRouter, Depends, Query, Response
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from syntax_club.core.database import get_db
from syntax_club.models.base import utcnow
from syntax_club.models.enums import FestItemKind, FestStatus
from syntax_club.repositories.arvantis import ArvantisRepository
from syntax_club.repositories.event import EventRepository
from syntax_club.services.arvantis import ArvantisService
from syntax_club.schemas.arvantis import (
    EventLinkRequest,
    FestAnalyticsRow,
    FestCreate,
    FestFilterParams,
    FestListResponse,
    FestReport,
    FestResponse,
    FestStatistics,
    FestUpdate,
    GuestCreate,
    GuestUpdate,
    GuidelineCreate,
    GuidelineUpdate,
    MoveRequest,
    PartnerCreate,
    PrizeCreate,
    PrizeUpdate,
    ReorderRequest,
)
from syntax_club.schemas.shared import MessageResponse

router = APIRouter()


# ===== DEPENDENCIES =====

async def get_arvantis_repository(session: AsyncSession = Depends(get_db)) -> ArvantisRepository:
    """Get fest repository dependency."""
    return ArvantisRepository(session)


async def get_event_repository(session: AsyncSession = Depends(get_db)) -> EventRepository:
    """Get event repository dependency."""
    return EventRepository(session)


async def get_arvantis_service(
    fest_repo: ArvantisRepository = Depends(get_arvantis_repository),
    event_repo: EventRepository = Depends(get_event_repository),
) -> ArvantisService:
    """Get fest service dependency."""
    return ArvantisService(fest_repo, event_repo)


# ===== LANDING, EXPORT & ANALYTICS =====

@router.get("/landing", response_model=MessageResponse, summary="Fest shown on the landing page")
async def get_landing_page_data(arvantis_service: ArvantisService = Depends(get_arvantis_service)):
    return await arvantis_service.get_landing_fest()


@router.get("/export/csv", summary="Download all fests as CSV")
async def export_fests_csv(arvantis_service: ArvantisService = Depends(get_arvantis_service)):
    content = await arvantis_service.export_fests_csv()
    filename = f"arvantis-fests-export-{utcnow().strftime('%Y%m%dT%H%M%S')}.csv"
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/statistics/overview", response_model=FestStatistics, summary="Totals across all fests")
async def get_fest_statistics(arvantis_service: ArvantisService = Depends(get_arvantis_service)):
    return await arvantis_service.get_statistics()


@router.get("/analytics/overview", response_model=List[FestAnalyticsRow], summary="Year-over-year counts")
async def get_fest_analytics(arvantis_service: ArvantisService = Depends(get_arvantis_service)):
    return await arvantis_service.get_analytics()


@router.get("/reports/{identifier}", response_model=FestReport, summary="Report for one fest")
async def generate_fest_report(
    identifier: str,
    arvantis_service: ArvantisService = Depends(get_arvantis_service),
):
    return await arvantis_service.generate_report(identifier)


# ===== CORE FEST ENDPOINTS =====

@router.post("/", response_model=FestResponse, status_code=201, summary="Create a fest")
async def create_fest(
    fest_data: FestCreate,
    arvantis_service: ArvantisService = Depends(get_arvantis_service),
):
    return await arvantis_service.create_fest(fest_data)


@router.get("/", response_model=FestListResponse, summary="List fests")
async def get_fests(
    page: int = Query(1, ge=1),
    size: int = Query(10, ge=1, le=100),
    status: Optional[FestStatus] = Query(None),
    sort_by: str = Query("year"),
    sort_order: str = Query("desc", pattern="^(asc|desc)$"),
    arvantis_service: ArvantisService = Depends(get_arvantis_service),
):
    filters = FestFilterParams(
        page=page,
        size=size,
        status=status,
        sort_by=sort_by,
        sort_order=sort_order
    )
    return await arvantis_service.get_fests(filters)


@router.get("/{identifier}", response_model=FestResponse, summary="Fest details by slug or year")
async def get_fest(
    identifier: str,
    arvantis_service: ArvantisService = Depends(get_arvantis_service),
):
    return await arvantis_service.get_fest(identifier)


@router.put("/{identifier}", response_model=FestResponse, summary="Update fest details")
async def update_fest(
    identifier: str,
    fest_data: FestUpdate,
    arvantis_service: ArvantisService = Depends(get_arvantis_service),
):
    return await arvantis_service.update_fest(identifier, fest_data)


@router.delete("/{identifier}", response_model=MessageResponse, summary="Delete a fest")
async def delete_fest(
    identifier: str,
    arvantis_service: ArvantisService = Depends(get_arvantis_service),
):
    return await arvantis_service.delete_fest(identifier)


# ===== PARTNERS & EVENTS =====

@router.post("/{identifier}/partners", response_model=List[Dict[str, Any]], status_code=201)
async def add_partner(
    identifier: str,
    partner_data: PartnerCreate,
    arvantis_service: ArvantisService = Depends(get_arvantis_service),
):
    return await arvantis_service.add_partner(identifier, partner_data)


@router.delete("/{identifier}/partners/{partner_name}", response_model=MessageResponse)
async def remove_partner(
    identifier: str,
    partner_name: str,
    arvantis_service: ArvantisService = Depends(get_arvantis_service),
):
    return await arvantis_service.remove_partner(identifier, partner_name)


@router.post("/{identifier}/events", response_model=List[int])
async def link_event(
    identifier: str,
    link_data: EventLinkRequest,
    arvantis_service: ArvantisService = Depends(get_arvantis_service),
):
    return await arvantis_service.link_event(identifier, link_data.event_id)


@router.delete("/{identifier}/events/{event_id}", response_model=List[int])
async def unlink_event(
    identifier: str,
    event_id: int,
    arvantis_service: ArvantisService = Depends(get_arvantis_service),
):
    return await arvantis_service.unlink_event(identifier, event_id)


# ===== GUIDELINES / PRIZES / GUESTS =====

def _register_item_routes(kind: FestItemKind, create_schema: Type[BaseModel], update_schema: Type[BaseModel]) -> None:
    """Add, update, remove, reorder and move routes for one ordered list."""
    path = f"/{{identifier}}/{kind.value}"
    tag = kind.label

    async def add_item(
        identifier: str,
        payload: create_schema,
        arvantis_service: ArvantisService = Depends(get_arvantis_service),
    ):
        return await arvantis_service.add_item(identifier, kind, payload)

    async def reorder_items(
        identifier: str,
        reorder_data: ReorderRequest,
        arvantis_service: ArvantisService = Depends(get_arvantis_service),
    ):
        return await arvantis_service.reorder_items(identifier, kind, reorder_data.order)

    async def update_item(
        identifier: str,
        item_id: str,
        payload: update_schema,
        arvantis_service: ArvantisService = Depends(get_arvantis_service),
    ):
        return await arvantis_service.update_item(identifier, kind, item_id, payload)

    async def remove_item(
        identifier: str,
        item_id: str,
        arvantis_service: ArvantisService = Depends(get_arvantis_service),
    ):
        return await arvantis_service.remove_item(identifier, kind, item_id)

    async def move_item(
        identifier: str,
        item_id: str,
        move_data: MoveRequest,
        arvantis_service: ArvantisService = Depends(get_arvantis_service),
    ):
        return await arvantis_service.move_item(identifier, kind, item_id, move_data.direction)

    # reorder is registered before the {item_id} routes so it is not taken for an id
    router.add_api_route(path, add_item, methods=["POST"], status_code=201,
                         response_model=Dict[str, Any], summary=f"Add {tag.lower()}", name=f"add_{kind.value}")
    router.add_api_route(f"{path}/reorder", reorder_items, methods=["PUT"],
                         response_model=List[Dict[str, Any]], summary=f"Reorder {kind.value}", name=f"reorder_{kind.value}")
    router.add_api_route(f"{path}/{{item_id}}", update_item, methods=["PUT"],
                         response_model=Dict[str, Any], summary=f"Update {tag.lower()}", name=f"update_{kind.value}")
    router.add_api_route(f"{path}/{{item_id}}", remove_item, methods=["DELETE"],
                         response_model=MessageResponse, summary=f"Remove {tag.lower()}", name=f"remove_{kind.value}")
    router.add_api_route(f"{path}/{{item_id}}/move", move_item, methods=["POST"],
                         response_model=List[Dict[str, Any]], summary=f"Move {tag.lower()} up or down", name=f"move_{kind.value}")


_register_item_routes(FestItemKind.GUIDELINES, GuidelineCreate, GuidelineUpdate)
_register_item_routes(FestItemKind.PRIZES, PrizeCreate, PrizeUpdate)
_register_item_routes(FestItemKind.GUESTS, GuestCreate, GuestUpdate)
