"""
Domain models package.

This module re-exports the study group domain types for easy importing.
"""

from study_groups.models.groups import (
    Group, Message, GroupId, Principal, JoinStatus, PostStatus
)

# Export all models for easy importing
__all__ = [
    "Group",
    "Message",
    "GroupId",
    "Principal",

    # Enums
    "JoinStatus",
    "PostStatus"
]
