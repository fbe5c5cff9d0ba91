"""
Pydantic schemas for study groups and discussion messages.

This module defines request/response schemas for FastAPI endpoints
that handle group operations, providing validation and serialization.
Business rules (name length, membership, message size) are enforced by
the service layer, not here.
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, List


# Request schemas
class GroupCreate(BaseModel):
    """Schema for creating a new group."""
    name: str
    description: str


class MessageCreate(BaseModel):
    """Schema for posting a message to a group."""
    content: str


# Response schemas
class MessageResponse(BaseModel):
    """A discussion message. `timestamp` is milliseconds since the epoch."""
    sender: str
    content: str
    timestamp: int

    class Config:
        from_attributes = True


class GroupSummary(BaseModel):
    """Lightweight group listing without members and messages."""
    id: int
    name: str
    description: str
    creator: str
    member_count: int
    message_count: int

    class Config:
        from_attributes = True
        # Keeps full groups from validating as summaries in the list response
        extra = "forbid"


class GroupResponse(GroupSummary):
    """Full group contents."""
    members: List[str]
    messages: List[MessageResponse]

    class Config:
        from_attributes = True


class GroupCreated(BaseModel):
    """Schema for group creation responses."""
    group_id: int


class StatusResponse(BaseModel):
    """Schema for join and post responses."""
    status: str


class ErrorResponse(BaseModel):
    """Schema for domain error responses."""
    error: str
    detail: str
    details: Dict[str, Any] = Field(default_factory=dict)
