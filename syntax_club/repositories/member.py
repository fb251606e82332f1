"""Member repository for database operations."""

from typing import List, Optional

from sqlalchemy import select, func, update
from sqlalchemy.ext.asyncio import AsyncSession

from syntax_club.models.base import utcnow
from syntax_club.models.enums import MemberStatus
from syntax_club.models.member import Member


class MemberRepository:
    """Repository for member operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    # ===== BASIC CRUD OPERATIONS =====

    async def create(self, member_data: dict) -> Member:
        """Create a new member."""
        member = Member(**member_data)
        self.session.add(member)
        await self.session.commit()
        await self.session.refresh(member)
        return member

    async def get_by_id(self, member_id: int) -> Optional[Member]:
        """Get member by ID, ignoring soft-deleted rows."""
        query = select(Member).where(Member.id == member_id, Member.deleted_at.is_(None))
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def update(self, member_id: int, update_data: dict) -> Optional[Member]:
        """Update member fields."""
        member = await self.get_by_id(member_id)
        if not member:
            return None

        for key, value in update_data.items():
            setattr(member, key, value)
        member.updated_at = utcnow()

        await self.session.commit()
        await self.session.refresh(member)
        return member

    async def soft_delete(self, member_id: int) -> bool:
        """Soft delete member."""
        query = (
            update(Member)
            .where(Member.id == member_id, Member.deleted_at.is_(None))
            .values(deleted_at=utcnow(), updated_at=utcnow())
        )
        result = await self.session.execute(query)
        await self.session.commit()
        return result.rowcount > 0

    # ===== LISTING =====

    async def get_all(self, status: Optional[MemberStatus] = MemberStatus.ACTIVE) -> List[Member]:
        """Get every non-deleted member in directory order."""
        query = select(Member).where(Member.deleted_at.is_(None))
        if status is not None:
            query = query.where(Member.status == status)
        query = query.order_by(Member.member_order.asc(), Member.id.asc())

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_max_member_order(self) -> int:
        """Get the highest member_order in use."""
        query = select(func.max(Member.member_order)).where(Member.deleted_at.is_(None))
        result = await self.session.execute(query)
        return result.scalar() or 0
