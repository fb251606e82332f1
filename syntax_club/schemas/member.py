"""Member schemas for the team directory and member management."""

from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, computed_field, field_validator

from syntax_club.core.config import settings
from syntax_club.models.enums import MemberStatus
from syntax_club.schemas.shared import BaseListResponse
from syntax_club.utils.sanitize_html import sanitize_html_content


# ===== NORMALIZATION HELPERS =====

def coerce_text(value: Any) -> str:
    """Return a stripped string, or an empty string for anything unusable."""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def coerce_text_list(value: Any) -> List[str]:
    """Collapse a scalar, list or missing value into an ordered list of non-blank strings."""
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    elif not isinstance(value, (list, tuple, set, frozenset)):
        return []

    items = []
    for item in value:
        text = item.strip() if isinstance(item, str) else ""
        if text:
            items.append(text)
    return items


def coerce_social_links(value: Any) -> List[Dict[str, str]]:
    """Keep only links that carry a url; accepts a list of links or a platform->url mapping."""
    if value is None:
        return []
    if isinstance(value, Mapping):
        value = [{"platform": platform, "url": url} for platform, url in value.items()]
    if not isinstance(value, (list, tuple)):
        return []

    links = []
    for item in value:
        if isinstance(item, BaseModel):
            item = item.model_dump()
        if not isinstance(item, Mapping):
            continue
        url = coerce_text(item.get("url"))
        if not url:
            continue
        links.append({"platform": coerce_text(item.get("platform")), "url": url})
    return links


# ===== BASE SCHEMAS =====

class SocialLink(BaseModel):
    """A single social profile link."""
    platform: str = Field(default="", description="Platform name, e.g. github")
    url: str = Field(..., min_length=1, description="Profile URL")


class MemberProfile(BaseModel):
    """Member fields shared by raw records and enriched members."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: Optional[Union[int, str]] = Field(default=None, validation_alias=AliasChoices("id", "_id"))
    fullname: str = Field(default="", validation_alias=AliasChoices("fullname", "full_name", "name"))
    email: Optional[str] = None
    designation: List[str] = Field(default_factory=list, description="Ordered designations, first is primary")
    department: List[str] = Field(default_factory=list, description="Ordered departments, first is primary")
    skills: List[str] = Field(default_factory=list)
    social_links: List[SocialLink] = Field(
        default_factory=list, validation_alias=AliasChoices("social_links", "socialLinks")
    )
    bio: str = ""
    profile_image_url: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("profile_image_url", "profileImageUrl")
    )

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, value: Any) -> Optional[Union[int, str]]:
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            return None
        return value

    @field_validator("fullname", "bio", mode="before")
    @classmethod
    def validate_text(cls, value: Any) -> str:
        return coerce_text(value)

    @field_validator("email", "profile_image_url", mode="before")
    @classmethod
    def validate_optional_text(cls, value: Any) -> Optional[str]:
        return coerce_text(value) or None

    @field_validator("designation", "department", mode="before")
    @classmethod
    def validate_ordered_list(cls, value: Any) -> List[str]:
        return coerce_text_list(value)

    @field_validator("skills", mode="before")
    @classmethod
    def validate_skills(cls, value: Any) -> List[str]:
        return list(dict.fromkeys(coerce_text_list(value)))

    @field_validator("social_links", mode="before")
    @classmethod
    def validate_social_links(cls, value: Any) -> List[Dict[str, str]]:
        return coerce_social_links(value)


class MemberRecord(MemberProfile):
    """A member as received from the data layer, before enrichment."""

    is_leader: Optional[bool] = Field(default=None, validation_alias=AliasChoices("is_leader", "isLeader"))
    primary_department: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("primary_department", "primaryDepartment")
    )
    primary_role: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("primary_role", "primaryRole")
    )

    @field_validator("is_leader", mode="before")
    @classmethod
    def validate_is_leader(cls, value: Any) -> Optional[bool]:
        return value if isinstance(value, bool) else None

    @field_validator("primary_department", "primary_role", mode="before")
    @classmethod
    def validate_override(cls, value: Any) -> Optional[str]:
        return coerce_text(value) or None


class EnrichedMember(MemberProfile):
    """A member with derived display and search fields. Immutable."""

    model_config = ConfigDict(frozen=True)

    primary_department: str = Field(..., min_length=1)
    primary_role: str = Field(..., min_length=1)
    is_leader: bool = False
    search_haystack: str = Field(default="", exclude=True)


# ===== TEAM DIRECTORY SCHEMAS =====

class DepartmentSection(BaseModel):
    """One browsable section of the team page."""
    name: str
    is_leadership: bool = False
    members: List[EnrichedMember]

    @computed_field
    @property
    def count(self) -> int:
        return len(self.members)


class TeamDirectoryResponse(BaseModel):
    """Team page: leadership section first when non-empty, then departments."""
    query: str = ""
    total_members: int
    total_matches: int
    leadership_count: int
    sections: List[DepartmentSection]


# ===== REQUEST SCHEMAS =====

class MemberBase(BaseModel):
    """Base member schema for writes."""
    fullname: str = Field(..., min_length=1, max_length=255, description="Member full name")
    email: Optional[str] = Field(None, max_length=255)
    designation: List[str] = Field(default_factory=list)
    department: List[str] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    social_links: List[SocialLink] = Field(default_factory=list)
    bio: Optional[str] = Field(None, description="Bio, limited HTML allowed")
    is_leader: Optional[bool] = Field(None, description="Explicit leadership flag")
    primary_department: Optional[str] = Field(None, max_length=255)
    primary_role: Optional[str] = Field(None, max_length=255)
    profile_image_url: Optional[str] = Field(None, max_length=500)
    member_order: int = Field(default=0, ge=0, description="Order for display")

    @field_validator("fullname")
    @classmethod
    def validate_fullname(cls, fullname: str) -> str:
        """Validate and clean name."""
        return fullname.strip()

    @field_validator("designation", "department", "skills", mode="before")
    @classmethod
    def validate_lists(cls, value: Any) -> List[str]:
        return coerce_text_list(value)

    @field_validator("social_links", mode="before")
    @classmethod
    def validate_social_links(cls, value: Any) -> List[Dict[str, str]]:
        return coerce_social_links(value)

    @field_validator("bio")
    @classmethod
    def sanitize_bio(cls, bio: Optional[str]) -> Optional[str]:
        """Sanitize HTML content in bio."""
        return sanitize_html_content(bio) if bio else bio


class MemberCreate(MemberBase):
    """Schema for creating a member."""
    pass


class MemberUpdate(BaseModel):
    """Schema for updating a member."""
    fullname: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    designation: Optional[List[str]] = None
    department: Optional[List[str]] = None
    skills: Optional[List[str]] = None
    social_links: Optional[List[SocialLink]] = None
    bio: Optional[str] = None
    is_leader: Optional[bool] = None
    primary_department: Optional[str] = Field(None, max_length=255)
    primary_role: Optional[str] = Field(None, max_length=255)
    profile_image_url: Optional[str] = Field(None, max_length=500)
    member_order: Optional[int] = Field(None, ge=0)

    @field_validator("fullname")
    @classmethod
    def validate_fullname(cls, fullname: Optional[str]) -> Optional[str]:
        """Validate and clean name if provided."""
        return fullname.strip() if fullname else None

    @field_validator("designation", "department", "skills", mode="before")
    @classmethod
    def validate_lists(cls, value: Any) -> List[str]:
        # explicit null clears the list
        return coerce_text_list(value)

    @field_validator("social_links", mode="before")
    @classmethod
    def validate_social_links(cls, value: Any) -> List[Dict[str, str]]:
        return coerce_social_links(value)

    @field_validator("bio")
    @classmethod
    def sanitize_bio(cls, bio: Optional[str]) -> Optional[str]:
        return sanitize_html_content(bio) if bio else bio


class MemberBanRequest(BaseModel):
    """Reason recorded when banning a member."""
    reason: Optional[str] = Field(None, max_length=500)


# ===== RESPONSE SCHEMAS =====

class MemberListResponse(BaseListResponse[EnrichedMember]):
    """Paginated directory listing."""
    pass


class MemberAdminResponse(BaseModel):
    """Stored member state returned from management endpoints."""
    id: int
    fullname: str
    email: Optional[str] = None
    designation: List[str]
    department: List[str]
    skills: List[str]
    social_links: List[Dict[str, Any]]
    bio: Optional[str] = None
    is_leader: Optional[bool] = None
    primary_department: Optional[str] = None
    primary_role: Optional[str] = None
    profile_image_url: Optional[str] = None
    status: MemberStatus
    ban_reason: Optional[str] = None
    member_order: int

    model_config = ConfigDict(from_attributes=True)


# ===== FILTER SCHEMAS =====

class MemberFilterParams(BaseModel):
    """Filter parameters for member listing."""

    # Pagination
    page: int = Field(default=1, ge=1, description="Page number")
    size: int = Field(default=settings.DEFAULT_PAGE_SIZE, ge=1, le=100, description="Items per page")

    # Search and filtering
    search: Optional[str] = Field(default=None, description="Substring search over name, departments, roles and skills")
    department: Optional[str] = Field(default=None, description="Filter by primary department")
    status: Optional[MemberStatus] = Field(default=MemberStatus.ACTIVE, description="Filter by member status")
