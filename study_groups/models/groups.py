"""
Study group domain models.

This module defines the group and message types handed out by the store.
Both are frozen snapshots: the store keeps its own mutable records and
copies them into these types on every read.
"""

from dataclasses import dataclass, field
from typing import Tuple
import enum

# Group identifiers are assigned sequentially starting at 1
GroupId = int

# Opaque caller identity supplied by the host; only compared for equality
Principal = str


class JoinStatus(enum.Enum):
    """Outcome of a successful join request."""
    JOINED = "joined"
    ALREADY_MEMBER = "already a member"


class PostStatus(enum.Enum):
    """Outcome of a successful message post."""
    POSTED = "posted"


@dataclass(frozen=True)
class Message:
    """A single discussion message. Timestamp is in milliseconds."""
    sender: Principal
    content: str
    timestamp: int


@dataclass(frozen=True)
class Group:
    """
    Snapshot of a study group.

    `members` keeps insertion order with the creator first, and `messages`
    is in posting order.
    """
    id: GroupId
    name: str
    description: str
    creator: Principal
    members: Tuple[Principal, ...] = field(default_factory=tuple)
    messages: Tuple[Message, ...] = field(default_factory=tuple)

    @property
    def member_count(self) -> int:
        return len(self.members)

    @property
    def message_count(self) -> int:
        return len(self.messages)
