"""Custom exceptions for the application."""

from typing import Optional, Union

from fastapi import HTTPException, status
from ..utils.messages import get_message


class MemberNotFoundError(HTTPException):
    """Exception raised when a member is not found."""

    def __init__(self, member_id: Optional[int] = None):
        message = get_message("member", "not_found_with_id", member_id=member_id) if member_id else get_message("member", "not_found")
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=message
        )


class FestNotFoundError(HTTPException):
    """Exception raised when a fest cannot be resolved by slug or year."""

    def __init__(self, identifier: Union[str, int]):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=get_message("fest", "not_found", identifier=identifier)
        )


class ConflictError(HTTPException):
    """Exception raised when a resource already exists."""

    def __init__(self, message: str):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=message
        )


class SubResourceNotFoundError(HTTPException):
    """Exception raised when a fest guideline, prize, guest or partner is missing."""

    def __init__(self, message: str):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=message
        )


class BusinessLogicError(HTTPException):
    """Exception for business logic violations."""

    def __init__(self, message: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=message
        )


class EventNotFoundError(HTTPException):
    """Exception raised when an event is not found."""

    def __init__(self, event_id: Optional[int] = None):
        message = get_message("event", "not_found_with_id", event_id=event_id) if event_id else get_message("event", "not_found")
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=message
        )
