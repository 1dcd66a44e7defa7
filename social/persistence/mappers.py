"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from social.domain.model import Comment, Like, Post
from social.domain.value import CommentId, PostId, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert a post_likes row to a Like."""
    return Like(user_id=UserId(_uuid(row["user_id"])))


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert a post_comments row to a Comment.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        text=row["text"],
        name=row.get("name") or "",
        avatar=row.get("avatar") or "",
        user_id=UserId(_uuid(row["user_id"])),
        created_at=row["created_at"],
    )


def row_to_post(
    row: Dict[str, Any],
    like_rows: Iterable[Dict[str, Any]] = (),
    comment_rows: Iterable[Dict[str, Any]] = (),
) -> Post:
    """Convert database rows to a Post aggregate.

    Args:
        row: posts row as dict
        like_rows: post_likes rows, newest first
        comment_rows: post_comments rows, newest first

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        text=row["text"],
        name=row.get("name") or "",
        avatar=row.get("avatar") or "",
        user_id=UserId(_uuid(row["user_id"])),
        likes=[row_to_like(r) for r in like_rows],
        comments=[row_to_comment(r) for r in comment_rows],
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to a posts row.

    Likes and comments are stored in their own tables.
    """
    return post.model_dump(exclude={"likes", "comments"})


def like_to_dict(post_id: PostId, like: Like) -> Dict[str, Any]:
    """Convert a Like to a post_likes row."""
    return {"post_id": post_id, "user_id": like.user_id}


def comment_to_dict(post_id: PostId, comment: Comment) -> Dict[str, Any]:
    """Convert a Comment to a post_comments row."""
    return {"post_id": post_id, **comment.model_dump()}
