"""Arvantis fest business logic services."""

import csv
import io
import logging
import re
import uuid
from datetime import datetime
from typing import Any, Dict, List, Union

from pydantic import BaseModel

from syntax_club.core.exceptions import (
    BusinessLogicError,
    ConflictError,
    EventNotFoundError,
    FestNotFoundError,
    SubResourceNotFoundError,
)
from syntax_club.models.arvantis import ArvantisFest
from syntax_club.models.base import as_utc, utcnow
from syntax_club.models.enums import FestItemKind, FestStatus, MoveDirection
from syntax_club.repositories.arvantis import ArvantisRepository
from syntax_club.repositories.event import EventRepository
from syntax_club.schemas.arvantis import (
    FestAnalyticsRow,
    FestCreate,
    FestFilterParams,
    FestListResponse,
    FestReport,
    FestResponse,
    FestStatistics,
    FestSummary,
    FestUpdate,
    PartnerCreate,
)
from syntax_club.schemas.shared import MessageResponse, calculate_pages
from syntax_club.utils.messages import get_message
from syntax_club.utils.ordering import find_index, move_by_id, reorder_by_ids

logger = logging.getLogger(__name__)

YEAR_IDENTIFIER = re.compile(r"^\d{4}$")

CSV_COLUMNS = [
    "Year", "Name", "Status", "Start Date", "End Date",
    "Events Count", "Partners Count", "Guests Count", "Prizes Count",
]


class ArvantisService:
    """Service for fest business logic."""

    def __init__(self, fest_repo: ArvantisRepository, event_repo: EventRepository):
        self.fest_repo = fest_repo
        self.event_repo = event_repo

    # ===== HELPERS =====

    async def resolve_fest(self, identifier: Union[str, int]) -> ArvantisFest:
        """Find a fest by year (four digits) or slug."""
        identifier = str(identifier).strip()
        if YEAR_IDENTIFIER.match(identifier):
            fest = await self.fest_repo.get_by_year(int(identifier))
        else:
            fest = await self.fest_repo.get_by_slug(identifier.lower())
        if not fest:
            raise FestNotFoundError(identifier)
        return fest

    @staticmethod
    def _check_dates(start_date: datetime, end_date: datetime) -> None:
        # stored values may come back naive from SQLite
        if as_utc(end_date) < as_utc(start_date):
            raise BusinessLogicError(get_message("fest", "invalid_dates"))

    @staticmethod
    def _items(fest: ArvantisFest, kind: FestItemKind) -> List[Dict[str, Any]]:
        return list(getattr(fest, kind.value) or [])

    def _item_not_found(self, kind: FestItemKind, item_id: str) -> SubResourceNotFoundError:
        return SubResourceNotFoundError(
            get_message("fest_item", "not_found", kind=kind.label, item_id=item_id)
        )

    # ===== CORE FEST MANAGEMENT =====

    async def create_fest(self, fest_data: FestCreate) -> FestResponse:
        """Create a new fest; one per year."""
        if await self.fest_repo.get_by_year(fest_data.year):
            logger.warning(f"Fest creation rejected, year {fest_data.year} already exists")
            raise ConflictError(get_message("fest", "year_exists", year=fest_data.year))
        self._check_dates(fest_data.start_date, fest_data.end_date)

        fest = await self.fest_repo.create(fest_data.model_dump())
        logger.info(f"Fest created: year={fest.year} slug={fest.slug}")
        return FestResponse.model_validate(fest)

    async def get_fests(self, filters: FestFilterParams) -> FestListResponse:
        """Get fests with filters and pagination."""
        fests, total = await self.fest_repo.get_all_filtered(filters)
        return FestListResponse(
            items=[FestSummary.model_validate(fest) for fest in fests],
            total=total,
            page=filters.page,
            size=filters.size,
            pages=calculate_pages(total, filters.size),
        )

    async def get_fest(self, identifier: str) -> FestResponse:
        fest = await self.resolve_fest(identifier)
        return FestResponse.model_validate(fest)

    async def update_fest(self, identifier: str, fest_data: FestUpdate) -> FestResponse:
        """Update fest details; the slug follows name and year."""
        fest = await self.resolve_fest(identifier)
        update_data = {k: v for k, v in fest_data.model_dump().items() if v is not None}

        new_year = update_data.get("year")
        if new_year is not None and new_year != fest.year:
            if await self.fest_repo.get_by_year(new_year):
                raise ConflictError(get_message("fest", "year_exists", year=new_year))

        self._check_dates(
            update_data.get("start_date", fest.start_date),
            update_data.get("end_date", fest.end_date),
        )

        for key, value in update_data.items():
            setattr(fest, key, value)
        if "name" in update_data or "year" in update_data:
            fest.refresh_slug()

        fest = await self.fest_repo.save(fest)
        logger.info(f"Fest updated: year={fest.year} fields={sorted(update_data)}")
        return FestResponse.model_validate(fest)

    async def delete_fest(self, identifier: str) -> MessageResponse:
        fest = await self.resolve_fest(identifier)
        await self.fest_repo.delete(fest.id)
        logger.info(f"Fest deleted: year={fest.year}")
        return MessageResponse(message=get_message("fest", "deleted"))

    async def get_landing_fest(self) -> MessageResponse:
        """Current year's upcoming/ongoing fest, else the most recent completed one."""
        current_year = utcnow().year
        fest = await self.fest_repo.get_for_year_with_status(
            current_year, [FestStatus.UPCOMING, FestStatus.ONGOING]
        )
        if not fest:
            fest = await self.fest_repo.get_latest_with_status(FestStatus.COMPLETED)
        if not fest:
            return MessageResponse(message=get_message("fest", "no_landing_data"), data=None)
        return MessageResponse(
            message="Landing page data retrieved successfully.",
            data=FestResponse.model_validate(fest).model_dump(mode="json"),
        )

    # ===== PARTNERS =====

    async def add_partner(self, identifier: str, partner_data: PartnerCreate) -> List[Dict[str, Any]]:
        fest = await self.resolve_fest(identifier)
        partners = list(fest.partners or [])
        if any(p.get("name") == partner_data.name for p in partners):
            raise ConflictError(get_message("fest_item", "partner_exists", name=partner_data.name))

        partners.append(partner_data.model_dump())
        fest.partners = partners
        fest = await self.fest_repo.save(fest)
        logger.info(f"Partner added to fest {fest.year}: {partner_data.name}")
        return fest.partners

    async def remove_partner(self, identifier: str, partner_name: str) -> MessageResponse:
        fest = await self.resolve_fest(identifier)
        partners = list(fest.partners or [])
        index = find_index(partners, partner_name, key="name")
        if index is None:
            raise SubResourceNotFoundError(get_message("fest_item", "partner_not_found", name=partner_name))

        partners.pop(index)
        fest.partners = partners
        await self.fest_repo.save(fest)
        logger.info(f"Partner removed from fest {fest.year}: {partner_name}")
        return MessageResponse(message=get_message("fest_item", "partner_removed"))

    # ===== EVENT LINKING =====

    async def link_event(self, identifier: str, event_id: int) -> List[int]:
        fest = await self.resolve_fest(identifier)
        if not await self.event_repo.get_by_id(event_id):
            raise EventNotFoundError(event_id)

        events = list(fest.events or [])
        if event_id in events:
            raise ConflictError(get_message("fest_item", "event_linked"))

        events.append(event_id)
        fest.events = events
        fest = await self.fest_repo.save(fest)
        logger.info(f"Event {event_id} linked to fest {fest.year}")
        return fest.events

    async def unlink_event(self, identifier: str, event_id: int) -> List[int]:
        fest = await self.resolve_fest(identifier)
        events = list(fest.events or [])
        if event_id not in events:
            raise SubResourceNotFoundError(get_message("fest_item", "event_not_linked", event_id=event_id))

        fest.events = [e for e in events if e != event_id]
        fest = await self.fest_repo.save(fest)
        return fest.events

    # ===== GUIDELINES / PRIZES / GUESTS =====

    async def add_item(self, identifier: str, kind: FestItemKind, payload: BaseModel) -> Dict[str, Any]:
        """Append a new item with a generated id."""
        fest = await self.resolve_fest(identifier)
        item = {"id": uuid.uuid4().hex, **payload.model_dump()}

        setattr(fest, kind.value, self._items(fest, kind) + [item])
        await self.fest_repo.save(fest)
        logger.info(f"{kind.label} added to fest {fest.year}: {item['id']}")
        return item

    async def update_item(self, identifier: str, kind: FestItemKind, item_id: str, payload: BaseModel) -> Dict[str, Any]:
        fest = await self.resolve_fest(identifier)
        items = self._items(fest, kind)
        index = find_index(items, item_id)
        if index is None:
            raise self._item_not_found(kind, item_id)

        changes = payload.model_dump(exclude_unset=True)
        items[index] = {**items[index], **changes, "id": items[index]["id"]}
        setattr(fest, kind.value, items)
        await self.fest_repo.save(fest)
        return items[index]

    async def remove_item(self, identifier: str, kind: FestItemKind, item_id: str) -> MessageResponse:
        fest = await self.resolve_fest(identifier)
        items = self._items(fest, kind)
        index = find_index(items, item_id)
        if index is None:
            raise self._item_not_found(kind, item_id)

        items.pop(index)
        setattr(fest, kind.value, items)
        await self.fest_repo.save(fest)
        logger.info(f"{kind.label} removed from fest {fest.year}: {item_id}")
        return MessageResponse(message=get_message("fest_item", "removed", kind=kind.label))

    async def reorder_items(self, identifier: str, kind: FestItemKind, order: List[str]) -> List[Dict[str, Any]]:
        """Replace the item order with the given id sequence."""
        fest = await self.resolve_fest(identifier)
        try:
            items = reorder_by_ids(self._items(fest, kind), order)
        except ValueError:
            logger.warning(f"Rejected {kind.value} reorder on fest {fest.year}: {order}")
            raise BusinessLogicError(get_message("fest_item", "invalid_order", kind=kind.label.lower()))

        setattr(fest, kind.value, items)
        await self.fest_repo.save(fest)
        logger.info(f"{kind.label} list reordered on fest {fest.year}")
        return items

    async def move_item(self, identifier: str, kind: FestItemKind, item_id: str, direction: MoveDirection) -> List[Dict[str, Any]]:
        """Move one item a single step; edges are a no-op."""
        fest = await self.resolve_fest(identifier)
        current = self._items(fest, kind)
        try:
            items = move_by_id(current, item_id, direction)
        except KeyError:
            raise self._item_not_found(kind, item_id)

        if items != current:
            setattr(fest, kind.value, items)
            await self.fest_repo.save(fest)
        return items

    # ===== EXPORT & ANALYTICS =====

    async def export_fests_csv(self) -> str:
        """All fests as CSV, newest first."""
        fests = await self.fest_repo.get_all_by_year(descending=True)
        if not fests:
            raise SubResourceNotFoundError(get_message("fest", "no_export_data"))

        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(CSV_COLUMNS)
        for fest in fests:
            writer.writerow([
                fest.year,
                fest.name,
                fest.status.value if isinstance(fest.status, FestStatus) else fest.status,
                fest.start_date.isoformat(),
                fest.end_date.isoformat(),
                len(fest.events or []),
                len(fest.partners or []),
                len(fest.guests or []),
                len(fest.prizes or []),
            ])
        return buffer.getvalue()

    async def get_statistics(self) -> FestStatistics:
        fests = await self.fest_repo.get_all_by_year()
        status_counts: Dict[str, int] = {}
        for fest in fests:
            key = fest.status.value if isinstance(fest.status, FestStatus) else str(fest.status)
            status_counts[key] = status_counts.get(key, 0) + 1

        return FestStatistics(
            total_fests=len(fests),
            total_partners=sum(len(f.partners or []) for f in fests),
            total_events=sum(len(f.events or []) for f in fests),
            total_guests=sum(len(f.guests or []) for f in fests),
            total_prizes=sum(len(f.prizes or []) for f in fests),
            status_counts=status_counts,
        )

    async def get_analytics(self) -> List[FestAnalyticsRow]:
        """Year-over-year counts, oldest year first."""
        fests = await self.fest_repo.get_all_by_year(descending=False)
        rows = []
        for fest in fests:
            partners = fest.partners or []
            rows.append(FestAnalyticsRow(
                year=fest.year,
                event_count=len(fest.events or []),
                partner_count=len(partners),
                sponsor_count=sum(1 for p in partners if p.get("tier") == "sponsor"),
                collaborator_count=sum(1 for p in partners if p.get("tier") == "collaborator"),
                guest_count=len(fest.guests or []),
                prize_count=len(fest.prizes or []),
            ))
        return rows

    async def generate_report(self, identifier: str) -> FestReport:
        fest = await self.resolve_fest(identifier)
        return FestReport(
            fest_details={
                "name": fest.name,
                "year": fest.year,
                "status": fest.status,
                "start_date": fest.start_date,
                "end_date": fest.end_date,
                "location": fest.location,
            },
            events=list(fest.events or []),
            partners=[
                {"name": p.get("name"), "tier": p.get("tier"), "website": p.get("website")}
                for p in fest.partners or []
            ],
            guests=[{"name": g.get("name"), "bio": g.get("bio")} for g in fest.guests or []],
            prizes=list(fest.prizes or []),
        )
