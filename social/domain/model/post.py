"""Post aggregate root.

A post owns its likes and comments. Both collections are ordered
most-recent-first, and a user appears at most once in ``likes``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from social.domain.model.common import DomainModel
from social.domain.value import CommentId, PostId, UserId


class Like(DomainModel):
    """A single user's like on a post."""

    user_id: UserId


class Comment(DomainModel):
    """Comment embedded in a post.

    Name and avatar are copied from the commenting user at creation time.
    """

    id: CommentId
    text: str = Field(min_length=1)
    name: str = ""
    avatar: str = ""
    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)


class Post(DomainModel):
    """Post aggregate root.

    Mutating helpers return a new Post; the original is never changed.
    """

    id: PostId
    text: str = Field(min_length=1)
    name: str = ""
    avatar: str = ""
    user_id: UserId
    likes: list[Like] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_collections(self) -> "Post":
        """Reject duplicate likers and duplicate comment ids."""
        likers = [like.user_id for like in self.likes]
        if len(likers) != len(set(likers)):
            raise ValueError("A user can like a post at most once")
        comment_ids = [comment.id for comment in self.comments]
        if len(comment_ids) != len(set(comment_ids)):
            raise ValueError("Comment ids must be unique within a post")
        return self

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.user_id == user_id

    def is_liked_by(self, user_id: UserId) -> bool:
        return any(like.user_id == user_id for like in self.likes)

    def find_comment(self, comment_id: CommentId) -> Optional[Comment]:
        for comment in self.comments:
            if comment.id == comment_id:
                return comment
        return None

    def with_like(self, user_id: UserId) -> "Post":
        """Return a copy with the user's like prepended."""
        if self.is_liked_by(user_id):
            raise ValueError(f"User {user_id} already liked post {self.id}")
        return self.model_copy(
            update={"likes": [Like(user_id=user_id), *self.likes]}
        )

    def without_like(self, user_id: UserId) -> "Post":
        """Return a copy with the user's like removed (order of the rest kept)."""
        return self.model_copy(
            update={"likes": [like for like in self.likes if like.user_id != user_id]}
        )

    def with_comment(self, comment: Comment) -> "Post":
        """Return a copy with the comment prepended."""
        if self.find_comment(comment.id) is not None:
            raise ValueError(f"Comment {comment.id} already exists on post {self.id}")
        return self.model_copy(update={"comments": [comment, *self.comments]})

    def without_comment(self, comment_id: CommentId) -> "Post":
        """Return a copy with the first comment matching ``comment_id`` removed."""
        comments = list(self.comments)
        for index, comment in enumerate(comments):
            if comment.id == comment_id:
                del comments[index]
                break
        return self.model_copy(update={"comments": comments})
