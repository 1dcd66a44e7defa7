"""Strongly typed identifiers for domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)


def parse_uuid(value: str | UUID) -> UUID | None:
    """Parse a UUID from user input.

    Returns:
        The UUID, or None if the value is not a well-formed UUID
    """
    if isinstance(value, UUID):
        return value
    try:
        return UUID(value)
    except (TypeError, ValueError):
        return None
