"""Member directory business logic."""

import logging
from typing import List

from syntax_club.core.exceptions import BusinessLogicError, MemberNotFoundError
from syntax_club.models.enums import MemberStatus
from syntax_club.repositories.member import MemberRepository
from syntax_club.schemas.member import (
    EnrichedMember,
    MemberAdminResponse,
    MemberBanRequest,
    MemberCreate,
    MemberFilterParams,
    MemberListResponse,
    MemberUpdate,
    TeamDirectoryResponse,
)
from syntax_club.schemas.shared import MessageResponse, calculate_pages
from syntax_club.services.member_search import MemberSearchIndex, enrich_member
from syntax_club.utils.messages import get_message

logger = logging.getLogger(__name__)

# non-null columns; an explicit null for these is ignored
REQUIRED_FIELDS = {"fullname", "member_order"}


class MemberService:
    """Service for member business logic."""

    def __init__(self, member_repo: MemberRepository):
        self.member_repo = member_repo

    async def _build_index(self, status=MemberStatus.ACTIVE) -> MemberSearchIndex:
        members = await self.member_repo.get_all(status=status)
        return MemberSearchIndex.from_records(members)

    async def _get_or_404(self, member_id: int):
        member = await self.member_repo.get_by_id(member_id)
        if not member:
            raise MemberNotFoundError(member_id)
        return member

    # ===== DIRECTORY =====

    async def get_members(self, filters: MemberFilterParams) -> MemberListResponse:
        """Search the directory and paginate the matches."""
        index = await self._build_index(status=filters.status)
        matches = index.search(filters.search)
        if filters.department:
            department = filters.department.strip().lower()
            matches = [m for m in matches if m.primary_department.lower() == department]

        total = len(matches)
        offset = (filters.page - 1) * filters.size
        return MemberListResponse(
            items=matches[offset:offset + filters.size],
            total=total,
            page=filters.page,
            size=filters.size,
            pages=calculate_pages(total, filters.size),
        )

    async def get_team_directory(self, search: str = "") -> TeamDirectoryResponse:
        """Leadership and department sections for the team page."""
        index = await self._build_index()
        return index.browse(search)

    async def get_leaders(self) -> List[EnrichedMember]:
        index = await self._build_index()
        return index.partition().leaders

    async def get_member(self, member_id: int) -> EnrichedMember:
        """Get one enriched member for the profile view."""
        member = await self._get_or_404(member_id)
        return enrich_member(member)

    # ===== MANAGEMENT =====

    async def create_member(self, member_data: MemberCreate) -> MemberAdminResponse:
        """Create a new member."""
        data = member_data.model_dump()
        if data["member_order"] == 0:
            data["member_order"] = await self.member_repo.get_max_member_order() + 1

        member = await self.member_repo.create(data)
        logger.info(f"Member created: id={member.id} fullname={member.fullname}")
        return MemberAdminResponse.model_validate(member)

    async def update_member(self, member_id: int, member_data: MemberUpdate) -> MemberAdminResponse:
        """Update member information."""
        await self._get_or_404(member_id)

        update_data = {
            key: value
            for key, value in member_data.model_dump(exclude_unset=True).items()
            if value is not None or key not in REQUIRED_FIELDS
        }
        updated_member = await self.member_repo.update(member_id, update_data)
        if not updated_member:
            raise MemberNotFoundError(member_id)

        logger.info(f"Member updated: id={member_id} fields={sorted(update_data)}")
        return MemberAdminResponse.model_validate(updated_member)

    async def delete_member(self, member_id: int) -> MessageResponse:
        """Delete member (soft delete)."""
        await self._get_or_404(member_id)
        await self.member_repo.soft_delete(member_id)
        logger.info(f"Member deleted: id={member_id}")
        return MessageResponse(message=get_message("member", "deleted"))

    async def ban_member(self, member_id: int, ban_data: MemberBanRequest) -> MemberAdminResponse:
        """Ban a member; banned members drop out of the public directory."""
        member = await self._get_or_404(member_id)
        if member.is_banned:
            logger.warning(f"Ban rejected, member {member_id} already banned")
            raise BusinessLogicError(get_message("member", "already_banned", member_id=member_id))

        updated_member = await self.member_repo.update(
            member_id, {"status": MemberStatus.BANNED, "ban_reason": ban_data.reason}
        )
        logger.info(f"Member banned: id={member_id} reason={ban_data.reason!r}")
        return MemberAdminResponse.model_validate(updated_member)

    async def unban_member(self, member_id: int) -> MemberAdminResponse:
        """Restore a banned member."""
        member = await self._get_or_404(member_id)
        if not member.is_banned:
            logger.warning(f"Unban rejected, member {member_id} is not banned")
            raise BusinessLogicError(get_message("member", "not_banned", member_id=member_id))

        updated_member = await self.member_repo.update(
            member_id, {"status": MemberStatus.ACTIVE, "ban_reason": None}
        )
        logger.info(f"Member unbanned: id={member_id}")
        return MemberAdminResponse.model_validate(updated_member)
