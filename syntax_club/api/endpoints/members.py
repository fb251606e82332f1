"""Member directory endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from syntax_club.core.config import settings
from syntax_club.core.database import get_db
from syntax_club.models.enums import MemberStatus
from syntax_club.repositories.member import MemberRepository
from syntax_club.services.member import MemberService
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
from syntax_club.schemas.shared import MessageResponse

router = APIRouter()


# ===== DEPENDENCIES =====

async def get_member_repository(session: AsyncSession = Depends(get_db)) -> MemberRepository:
    """Get member repository dependency."""
    return MemberRepository(session)


async def get_member_service(member_repo: MemberRepository = Depends(get_member_repository)) -> MemberService:
    """Get member service dependency."""
    return MemberService(member_repo)


# ===== DIRECTORY ENDPOINTS =====

@router.get("/", response_model=MemberListResponse, summary="Search the member directory")
async def get_members(
    page: int = Query(1, ge=1, description="Page number"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=100, description="Items per page"),
    search: Optional[str] = Query(None, description="Case-insensitive substring search"),
    department: Optional[str] = Query(None, description="Primary department"),
    status: str = Query("active", pattern="^(active|banned|all)$", description="Member status, or all"),
    member_service: MemberService = Depends(get_member_service),
):
    filters = MemberFilterParams(
        page=page,
        size=size,
        search=search,
        department=department,
        status=None if status == "all" else MemberStatus(status),
    )
    return await member_service.get_members(filters)


@router.get("/team", response_model=TeamDirectoryResponse, summary="Team page sections")
async def get_team_directory(
    search: Optional[str] = Query(None, description="Case-insensitive substring search"),
    member_service: MemberService = Depends(get_member_service),
):
    """
    Members arranged for browsing.

    The leadership section comes first when it has members, followed by one
    section per primary department in first-seen order.
    """
    return await member_service.get_team_directory(search or "")


@router.get("/leaders", response_model=List[EnrichedMember], summary="Club leadership")
async def get_leaders(member_service: MemberService = Depends(get_member_service)):
    return await member_service.get_leaders()


@router.get("/{member_id}", response_model=EnrichedMember, summary="Member profile")
async def get_member(
    member_id: int,
    member_service: MemberService = Depends(get_member_service),
):
    return await member_service.get_member(member_id)


# ===== MANAGEMENT ENDPOINTS =====

@router.post("/", response_model=MemberAdminResponse, status_code=201, summary="Create a member")
async def create_member(
    member_data: MemberCreate,
    member_service: MemberService = Depends(get_member_service),
):
    return await member_service.create_member(member_data)


@router.put("/{member_id}", response_model=MemberAdminResponse, summary="Update a member")
async def update_member(
    member_id: int,
    member_data: MemberUpdate,
    member_service: MemberService = Depends(get_member_service),
):
    return await member_service.update_member(member_id, member_data)


@router.delete("/{member_id}", response_model=MessageResponse, summary="Delete a member")
async def delete_member(
    member_id: int,
    member_service: MemberService = Depends(get_member_service),
):
    return await member_service.delete_member(member_id)


@router.post("/{member_id}/ban", response_model=MemberAdminResponse, summary="Ban a member")
async def ban_member(
    member_id: int,
    ban_data: MemberBanRequest,
    member_service: MemberService = Depends(get_member_service),
):
    return await member_service.ban_member(member_id, ban_data)


@router.post("/{member_id}/unban", response_model=MemberAdminResponse, summary="Unban a member")
async def unban_member(
    member_id: int,
    member_service: MemberService = Depends(get_member_service),
):
    return await member_service.unban_member(member_id)
