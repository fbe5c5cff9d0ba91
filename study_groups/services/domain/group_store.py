"""
Group Store Service

This service owns every study group and the group identifier counter. It
handles group creation, membership and message posting, and enforces the
group invariants: sequential ids, unique bounded membership and an
append-only message log.
"""

import threading
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from study_groups.core.clock import Clock, now_millis
from study_groups.models.groups import Group, GroupId, JoinStatus, Message, PostStatus, Principal
from study_groups.services.base import (
    BaseService, ServiceResult, service_method, NotFoundError, MembershipError, CapacityError
)
from study_groups.services.validation import (
    MAX_MESSAGE_LEN, MAX_NAME_LEN, MIN_NAME_LEN,
    validate_description, validate_group_name, validate_message_content
)

MAX_MEMBERS = 100


@dataclass
class _GroupRecord:
    """Mutable group state. Never leaves the store."""
    id: GroupId
    name: str
    description: str
    creator: Principal
    members: List[Principal] = field(default_factory=list)
    member_index: Set[Principal] = field(default_factory=set)
    messages: List[Message] = field(default_factory=list)

    def add_member(self, principal: Principal) -> None:
        self.members.append(principal)
        self.member_index.add(principal)

    def is_member(self, principal: Principal) -> bool:
        return principal in self.member_index

    def snapshot(self) -> Group:
        return Group(
            id=self.id,
            name=self.name,
            description=self.description,
            creator=self.creator,
            members=tuple(self.members),
            messages=tuple(self.messages)
        )


class GroupStore(BaseService):
    """Service for study group creation, membership and messages."""

    def __init__(self, clock: Clock = None):
        super().__init__("GroupStore")
        self._clock = clock or now_millis
        self._lock = threading.Lock()
        self._groups: Dict[GroupId, _GroupRecord] = {}
        self._next_id: GroupId = 1

    @property
    def max_members(self) -> int:
        return self.get_config("max_group_members", MAX_MEMBERS)

    @service_method
    def create_group(self, name: str, description: str, caller: Principal) -> ServiceResult[GroupId]:
        """Create a group owned by the caller and return its id."""
        trimmed_name = validate_group_name(
            name,
            self.get_config("min_group_name_length", MIN_NAME_LEN),
            self.get_config("max_group_name_length", MAX_NAME_LEN)
        )
        trimmed_description = validate_description(description)

        with self._lock:
            group_id = self._next_id
            record = _GroupRecord(
                id=group_id,
                name=trimmed_name,
                description=trimmed_description,
                creator=caller
            )
            record.add_member(caller)
            self._groups[group_id] = record
            self._next_id += 1

        self.logger.info(f"Group {group_id} '{trimmed_name}' created by {caller}")
        return ServiceResult.success_result(group_id)

    @service_method
    def join_group(self, group_id: GroupId, caller: Principal) -> ServiceResult[JoinStatus]:
        """
        Add the caller to a group.

        Re-joining is idempotent and always allowed, even when the group is
        full; the member limit only applies to new members.
        """
        with self._lock:
            record = self._get_record(group_id)

            if record.is_member(caller):
                return ServiceResult.success_result(JoinStatus.ALREADY_MEMBER)

            if len(record.members) >= self.max_members:
                raise CapacityError(group_id, self.max_members)

            record.add_member(caller)
            member_count = len(record.members)

        self.logger.info(f"{caller} joined group {group_id} ({member_count} members)")
        return ServiceResult.success_result(JoinStatus.JOINED)

    @service_method
    def post_message(self, group_id: GroupId, content: str, caller: Principal) -> ServiceResult[PostStatus]:
        """
        Append a message to a group's discussion.

        Membership is checked before the content, so a non-member posting
        invalid content gets a MembershipError.
        """
        with self._lock:
            record = self._get_record(group_id)

            if not record.is_member(caller):
                raise MembershipError(group_id, caller)

            validated_content = validate_message_content(
                content, self.get_config("max_message_length", MAX_MESSAGE_LEN)
            )

            timestamp = self._clock()
            if record.messages and timestamp < record.messages[-1].timestamp:
                timestamp = record.messages[-1].timestamp

            record.messages.append(
                Message(sender=caller, content=validated_content, timestamp=timestamp)
            )

        self.logger.info(f"{caller} posted to group {group_id}")
        return ServiceResult.success_result(PostStatus.POSTED)

    @service_method
    def list_groups(self) -> ServiceResult[List[Group]]:
        """Return every group in creation order, members and messages included."""
        with self._lock:
            groups = [record.snapshot() for record in self._groups.values()]
        return ServiceResult.success_result(groups, metadata={"total": len(groups)})

    @service_method
    def count_groups(self) -> ServiceResult[int]:
        """Return the number of groups without copying them."""
        with self._lock:
            total = len(self._groups)
        return ServiceResult.success_result(total)

    @service_method
    def get_group(self, group_id: GroupId) -> ServiceResult[Group]:
        """Return a snapshot of one group."""
        with self._lock:
            group = self._get_record(group_id).snapshot()
        return ServiceResult.success_result(group)

    def _get_record(self, group_id: GroupId) -> _GroupRecord:
        record: Optional[_GroupRecord] = self._groups.get(group_id)
        if record is None:
            raise NotFoundError("Group", group_id)
        return record
