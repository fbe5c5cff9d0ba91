"""
Study group API endpoints.

This module provides REST API endpoints for group creation, membership,
message posting and paginated discussion retrieval. Handlers are thin:
they resolve the caller, call the group services and unwrap the
`ServiceResult`. Domain errors are turned into HTTP responses by the
`ServiceError` handler registered in `study_groups.main`.
"""

import enum
from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional, Union

from study_groups.config.settings import Settings
from study_groups.core.dependencies import get_caller, get_group_store, get_message_view, get_settings
from study_groups.models.groups import Principal
from study_groups.schemas.groups import (
    GroupCreate, MessageCreate, GroupCreated, GroupResponse, GroupSummary,
    MessageResponse, StatusResponse, ErrorResponse
)
from study_groups.services.domain.group_store import GroupStore
from study_groups.services.domain.message_view import MessageView

router = APIRouter()

ERROR_RESPONSES = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Group not found"},
    status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ErrorResponse, "description": "Invalid input"},
}


class GroupView(str, enum.Enum):
    """Projection used when listing groups."""
    FULL = "full"
    SUMMARY = "summary"


@router.get("/", response_model=Union[List[GroupResponse], List[GroupSummary]])
def list_groups(
    view: GroupView = Query(GroupView.FULL, description="Full groups or summaries without members and messages"),
    store: GroupStore = Depends(get_group_store)
):
    """
    Retrieve all groups in creation order.

    - **view**: `full` (default) includes members and messages,
      `summary` returns counts only
    """
    groups = store.list_groups().unwrap()
    schema = GroupSummary if view == GroupView.SUMMARY else GroupResponse
    return [schema.model_validate(group) for group in groups]


@router.post("/", response_model=GroupCreated, status_code=status.HTTP_201_CREATED,
             responses={status.HTTP_422_UNPROCESSABLE_ENTITY: ERROR_RESPONSES[status.HTTP_422_UNPROCESSABLE_ENTITY]})
def create_group(
    group_data: GroupCreate,
    caller: Principal = Depends(get_caller),
    store: GroupStore = Depends(get_group_store)
):
    """
    Create a new group.

    The caller becomes the creator and first member of the group.
    """
    group_id = store.create_group(group_data.name, group_data.description, caller).unwrap()
    return GroupCreated(group_id=group_id)


@router.get("/{group_id}", response_model=GroupResponse, responses={
    status.HTTP_404_NOT_FOUND: ERROR_RESPONSES[status.HTTP_404_NOT_FOUND]
})
def get_group(
    group_id: int,
    store: GroupStore = Depends(get_group_store)
):
    """Retrieve a specific group with its members and messages."""
    group = store.get_group(group_id).unwrap()
    return GroupResponse.model_validate(group)


@router.post("/{group_id}/join", response_model=StatusResponse, responses={
    status.HTTP_404_NOT_FOUND: ERROR_RESPONSES[status.HTTP_404_NOT_FOUND],
    status.HTTP_409_CONFLICT: {"model": ErrorResponse, "description": "Group is full"}
})
def join_group(
    group_id: int,
    caller: Principal = Depends(get_caller),
    store: GroupStore = Depends(get_group_store)
):
    """
    Join a group.

    Joining a group you already belong to is a no-op reported as
    `already a member`.
    """
    join_status = store.join_group(group_id, caller).unwrap()
    return StatusResponse(status=join_status.value)


@router.post("/{group_id}/messages", response_model=StatusResponse, status_code=status.HTTP_201_CREATED,
             responses={
                 **ERROR_RESPONSES,
                 status.HTTP_403_FORBIDDEN: {"model": ErrorResponse, "description": "Caller is not a member"}
             })
def post_message(
    group_id: int,
    message: MessageCreate,
    caller: Principal = Depends(get_caller),
    store: GroupStore = Depends(get_group_store)
):
    """Post a message to a group the caller is a member of."""
    post_status = store.post_message(group_id, message.content, caller).unwrap()
    return StatusResponse(status=post_status.value)


@router.get("/{group_id}/messages", response_model=List[MessageResponse], responses=ERROR_RESPONSES)
def get_group_discussions(
    group_id: int,
    skip: int = Query(0, ge=0, description="Number of messages to skip"),
    limit: Optional[int] = Query(None, ge=0, description="Maximum number of messages to return"),
    view: MessageView = Depends(get_message_view),
    settings: Settings = Depends(get_settings)
):
    """
    Retrieve a window of a group's discussion in posting order.

    - **skip**: Number of messages to skip
    - **limit**: Maximum number of messages to return (defaults to the
      configured page size)
    """
    if limit is None:
        limit = settings.default_page_size
    messages = view.get_group_discussions(group_id, skip, limit).unwrap()
    return [MessageResponse.model_validate(message) for message in messages]
