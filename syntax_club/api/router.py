"""API router configuration."""

from fastapi import APIRouter

from syntax_club.api.endpoints import members, arvantis, events

# Create main API router
api_router = APIRouter()

# Members - club directory and team page
api_router.include_router(
    members.router,
    prefix="/members",
    tags=["Members"],
    responses={
        404: {"description": "Member not found"},
        422: {"description": "Validation Error"},
    },
)

# Arvantis - fest management, sub-resources and analytics
api_router.include_router(
    arvantis.router,
    prefix="/arvantis",
    tags=["Arvantis"],
    responses={
        404: {"description": "Fest not found"},
        409: {"description": "Conflict"},
        422: {"description": "Validation Error"},
    },
)

# Events - club events that fests link to
api_router.include_router(
    events.router,
    prefix="/events",
    tags=["Events"],
    responses={
        404: {"description": "Event not found"},
        422: {"description": "Validation Error"},
    },
)


# Export for main.py
def get_api_router():
    """Get configured API router with all endpoints."""
    return api_router
