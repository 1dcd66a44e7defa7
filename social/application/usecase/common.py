"""Helpers shared by use cases."""

from social.domain.error import NotFoundError
from social.domain.value import CommentId, PostId, UserId, parse_uuid


def parse_post_id(value: str) -> PostId:
    """Parse a post id from a request.

    A malformed id cannot match any post, so it is reported as not found.
    """
    parsed = parse_uuid(value)
    if parsed is None:
        raise NotFoundError("Post", value)
    return PostId(parsed)


def parse_comment_id(value: str) -> CommentId:
    """Parse a comment id from a request; malformed ids are not found."""
    parsed = parse_uuid(value)
    if parsed is None:
        raise NotFoundError("Comment", value)
    return CommentId(parsed)


def parse_user_id(value: str) -> UserId:
    """Parse the caller's user id.

    Raises:
        ValueError: If the id is not a UUID (the auth layer vouches for it)
    """
    parsed = parse_uuid(value)
    if parsed is None:
        raise ValueError(f"Invalid user id: {value}")
    return UserId(parsed)
