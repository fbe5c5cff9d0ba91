"""
Domain Services

This module contains business logic services for study groups.

Available Domain Services:
=========================

1. **GroupStore** - Group creation, membership and message posting
2. **MessageView** - Paginated reads of group discussions
"""

from .group_store import GroupStore
from .message_view import MessageView

__all__ = [
    'GroupStore',
    'MessageView'
]
