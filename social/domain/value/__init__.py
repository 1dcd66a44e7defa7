"""Domain value objects."""

from social.domain.value.common import ValueObject
from social.domain.value.identifiers import CommentId, PostId, UserId, parse_uuid

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "parse_uuid",
    # Base
    "ValueObject",
]
