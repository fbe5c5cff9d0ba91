"""
Input validation rules shared by the group services.

All text rules trim leading and trailing whitespace first and check
emptiness after trimming. Lengths are counted in characters.
"""

from typing import Tuple

from study_groups.services.base import ValidationError

MIN_NAME_LEN = 3
MAX_NAME_LEN = 50
MAX_MESSAGE_LEN = 1000


def validate_group_name(name: str, min_length: int = MIN_NAME_LEN, max_length: int = MAX_NAME_LEN) -> str:
    """Return the trimmed group name or raise ValidationError."""
    trimmed = (name or "").strip()
    if not trimmed:
        raise ValidationError("Group name is required", field="name", value=name)
    if len(trimmed) < min_length or len(trimmed) > max_length:
        raise ValidationError(
            f"Group name must be between {min_length} and {max_length} characters",
            field="name",
            value=name
        )
    return trimmed


def validate_description(description: str) -> str:
    """Return the trimmed description or raise ValidationError."""
    trimmed = (description or "").strip()
    if not trimmed:
        raise ValidationError("Description is required", field="description", value=description)
    return trimmed


def validate_message_content(content: str, max_length: int = MAX_MESSAGE_LEN) -> str:
    """Return the trimmed message content or raise ValidationError."""
    trimmed = (content or "").strip()
    if not trimmed:
        raise ValidationError("Message content cannot be empty", field="content", value=content)
    if len(trimmed) > max_length:
        # Details carry the length, not the payload
        raise ValidationError(
            f"Message content cannot exceed {max_length} characters",
            field="content",
            value=len(trimmed)
        )
    return trimmed


def validate_page_window(skip: int, limit: int) -> Tuple[int, int]:
    """Check a (skip, limit) pagination window."""
    if skip < 0:
        raise ValidationError("skip must be a non-negative integer", field="skip", value=skip)
    if limit < 0:
        raise ValidationError("limit must be a non-negative integer", field="limit", value=limit)
    return skip, limit
