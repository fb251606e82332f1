"""Club member model for the team directory."""

from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from .base import BaseModel
from .enums import MemberStatus


class Member(BaseModel, SQLModel, table=True):
    """Club member with ordered designations and departments."""

    __tablename__ = "members"

    id: Optional[int] = Field(default=None, primary_key=True)
    fullname: str = Field(max_length=255, nullable=False, index=True)
    email: Optional[str] = Field(default=None, max_length=255, index=True)
    designation: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    department: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    skills: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    social_links: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    bio: Optional[str] = Field(default=None, description="Member biography")
    is_leader: Optional[bool] = Field(default=None, description="Explicit leadership flag")
    primary_department: Optional[str] = Field(default=None, max_length=255)
    primary_role: Optional[str] = Field(default=None, max_length=255)
    profile_image_url: Optional[str] = Field(default=None, max_length=500)
    status: MemberStatus = Field(default=MemberStatus.ACTIVE, index=True)
    ban_reason: Optional[str] = Field(default=None, max_length=500)
    member_order: int = Field(default=0, index=True, description="Display order in the directory")

    def __repr__(self) -> str:
        return f"<Member(id={self.id}, fullname={self.fullname}, status={self.status})>"

    @property
    def is_banned(self) -> bool:
        return self.status == MemberStatus.BANNED
