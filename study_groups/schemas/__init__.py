"""
Pydantic schemas package.

This module imports all Pydantic schemas for API request/response validation
and provides a centralized place to access all schema definitions.
"""

from study_groups.schemas.groups import (
    GroupCreate, MessageCreate,
    MessageResponse, GroupSummary, GroupResponse,
    GroupCreated, StatusResponse, ErrorResponse
)

# Export all schemas
__all__ = [
    # Request schemas
    "GroupCreate", "MessageCreate",

    # Response schemas
    "MessageResponse", "GroupSummary", "GroupResponse",
    "GroupCreated", "StatusResponse", "ErrorResponse"
]
