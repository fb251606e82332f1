"""Schemas initialization."""

# Shared schemas
from .shared import (
    BaseListResponse,
    MessageResponse,
    StatusResponse,
)

# Member schemas
from .member import (
    SocialLink,
    MemberProfile,
    MemberRecord,
    EnrichedMember,
    DepartmentSection,
    TeamDirectoryResponse,
    MemberCreate,
    MemberUpdate,
    MemberBanRequest,
    MemberListResponse,
    MemberAdminResponse,
    MemberFilterParams,
)

# Arvantis schemas
from .arvantis import (
    FestCreate,
    FestUpdate,
    FestSummary,
    FestResponse,
    FestListResponse,
    FestFilterParams,
    PartnerCreate,
    GuidelineCreate,
    GuidelineUpdate,
    PrizeCreate,
    PrizeUpdate,
    GuestCreate,
    GuestUpdate,
    EventLinkRequest,
    ReorderRequest,
    MoveRequest,
    FestStatistics,
    FestAnalyticsRow,
    FestReport,
)

# Event schemas
from .event import (
    EventCreate,
    EventUpdate,
    EventResponse,
    EventListResponse,
    EventFilterParams,
    EventStatistics,
)
