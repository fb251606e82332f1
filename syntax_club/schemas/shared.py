"""Shared schemas for API responses."""

from typing import Any, List, Optional, TypeVar, Generic
from pydantic import BaseModel, Field

T = TypeVar('T')


class BaseListResponse(BaseModel, Generic[T]):
    """Base list response with pagination."""
    
    items: List[T] = Field(..., description="List of items")
    total: int = Field(..., description="Total number of items")
    page: int = Field(..., description="Current page number")
    size: int = Field(..., description="Items per page")
    pages: int = Field(..., description="Total number of pages")


class MessageResponse(BaseModel):
    """Standard message response."""
    
    message: str = Field(..., description="Response message")
    success: bool = Field(default=True, description="Operation success status")
    data: Optional[Any] = Field(default=None, description="Additional response data")


class StatusResponse(BaseModel):
    """Status check response."""
    
    status: str = Field(..., description="Service status")
    version: Optional[str] = Field(default=None, description="API version")
    timestamp: Optional[str] = Field(default=None, description="Response timestamp")


def calculate_pages(total: int, size: int) -> int:
    """Calculate total pages."""
    return (total + size - 1) // size if size else 0
