"""
Service Layer

This module provides the business logic layer between the API endpoints and
the in-memory group state. Every operation returns a `ServiceResult` that
either carries the value or one of the domain errors:

- **ValidationError** - empty or oversized text, negative pagination window
- **NotFoundError** - unknown group id
- **MembershipError** - caller is not a member of the group
- **CapacityError** - group is at its member limit

Usage Example:
=============

```python
from study_groups.services import GroupStore, MessageView

store = GroupStore()
store.initialize({"max_group_members": 100})
view = MessageView(store)
view.initialize()

group_id = store.create_group("Linear Algebra", "Weekly problem sets", "alice").unwrap()
store.join_group(group_id, "bob")
store.post_message(group_id, "Anyone tried 3.4 yet?", "bob")

page = view.get_group_discussions(group_id, skip=0, limit=20)
```
"""

from .base import BaseService, ServiceError, ServiceResult
from .domain import GroupStore, MessageView

__all__ = [
    'BaseService',
    'ServiceError',
    'ServiceResult',
    'GroupStore',
    'MessageView'
]
