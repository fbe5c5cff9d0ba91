"""
Message View Service

Read-only pagination over a group's discussion log.
"""

from typing import List

from study_groups.models.groups import GroupId, Message
from study_groups.services.base import BaseService, ServiceResult, service_method
from study_groups.services.domain.group_store import GroupStore
from study_groups.services.validation import validate_page_window


class MessageView(BaseService):
    """Service for windowed reads of group discussions."""

    def __init__(self, group_store: GroupStore):
        super().__init__("MessageView")
        self._group_store = group_store

    @service_method
    def get_group_discussions(self, group_id: GroupId, skip: int, limit: int) -> ServiceResult[List[Message]]:
        """
        Return messages[skip:skip + limit] of a group in posting order.

        A window starting past the end of the log, or a zero limit, yields an
        empty list. A missing group is a NotFoundError.
        """
        skip, limit = validate_page_window(skip, limit)

        group_result = self._group_store.get_group(group_id)
        if not group_result.success:
            return group_result

        messages = group_result.data.messages
        if skip >= len(messages):
            return ServiceResult.success_result([], metadata={"total": len(messages)})

        end = min(skip + limit, len(messages))
        return ServiceResult.success_result(
            list(messages[skip:end]),
            metadata={"total": len(messages)}
        )
