"""Arvantis fest repository for database operations."""

from typing import Iterable, List, Optional, Tuple

from sqlalchemy import select, func, delete
from sqlalchemy.ext.asyncio import AsyncSession

from syntax_club.models.arvantis import ArvantisFest
from syntax_club.models.base import utcnow
from syntax_club.models.enums import FestStatus
from syntax_club.schemas.arvantis import FestFilterParams


class ArvantisRepository:
    """Repository for fest operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, fest_data: dict) -> ArvantisFest:
        """Create a new fest."""
        fest = ArvantisFest(**fest_data)
        fest.refresh_slug()
        self.session.add(fest)
        await self.session.commit()
        await self.session.refresh(fest)
        return fest

    async def get_by_year(self, year: int) -> Optional[ArvantisFest]:
        query = select(ArvantisFest).where(ArvantisFest.year == year)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_by_slug(self, slug: str) -> Optional[ArvantisFest]:
        query = select(ArvantisFest).where(ArvantisFest.slug == slug)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def save(self, fest: ArvantisFest) -> ArvantisFest:
        """Persist changes made to a loaded fest."""
        fest.updated_at = utcnow()
        self.session.add(fest)
        await self.session.commit()
        await self.session.refresh(fest)
        return fest

    async def delete(self, fest_id: int) -> None:
        stmt = delete(ArvantisFest).where(ArvantisFest.id == fest_id)
        await self.session.execute(stmt)
        await self.session.commit()

    async def get_all_filtered(self, filters: FestFilterParams) -> Tuple[List[ArvantisFest], int]:
        """Get fests with filters and pagination."""
        query = select(ArvantisFest)
        count_query = select(func.count(ArvantisFest.id))

        if filters.status:
            query = query.where(ArvantisFest.status == filters.status)
            count_query = count_query.where(ArvantisFest.status == filters.status)

        total_result = await self.session.execute(count_query)
        total = total_result.scalar() or 0

        # Apply sorting
        if filters.sort_by == "name":
            sort_column = ArvantisFest.name
        elif filters.sort_by == "start_date":
            sort_column = ArvantisFest.start_date
        elif filters.sort_by == "status":
            sort_column = ArvantisFest.status
        else:
            sort_column = ArvantisFest.year

        if filters.sort_order == "desc":
            query = query.order_by(sort_column.desc())
        else:
            query = query.order_by(sort_column.asc())

        # Apply pagination
        offset = (filters.page - 1) * filters.size
        query = query.offset(offset).limit(filters.size)

        result = await self.session.execute(query)
        return list(result.scalars().all()), total

    async def get_all_by_year(self, descending: bool = True) -> List[ArvantisFest]:
        column = ArvantisFest.year.desc() if descending else ArvantisFest.year.asc()
        result = await self.session.execute(select(ArvantisFest).order_by(column))
        return list(result.scalars().all())

    async def get_for_year_with_status(self, year: int, statuses: Iterable[FestStatus]) -> Optional[ArvantisFest]:
        query = select(ArvantisFest).where(
            ArvantisFest.year == year,
            ArvantisFest.status.in_(list(statuses)),
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_latest_with_status(self, status: FestStatus) -> Optional[ArvantisFest]:
        query = (
            select(ArvantisFest)
            .where(ArvantisFest.status == status)
            .order_by(ArvantisFest.year.desc())
            .limit(1)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()
