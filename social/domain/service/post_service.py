"""Post domain service."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire

from social.config import ValidationSettings
from social.domain.error import (
    AlreadyLikedError,
    InvalidInputError,
    NotAuthorizedError,
    NotFoundError,
    NotLikedError,
)
from social.domain.model.post import Comment, Like, Post
from social.domain.repository import PostRepository, PostSortOrder
from social.domain.validation import ValidationResult, validate_post_input
from social.domain.value import CommentId, PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for creating and mutating posts.

    Every operation takes the acting user's id explicitly. Preconditions are
    checked before any write, so a failed call never leaves a post partially
    changed.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        validation_settings: ValidationSettings | None = None,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            validation_settings: Text length limits for posts and comments
        """
        self.post_repository = post_repository
        self.validation_settings = validation_settings or ValidationSettings()

    def validate(self, data: Mapping[str, Any] | None) -> ValidationResult:
        """Validate a post or comment submission with the configured limits."""
        return validate_post_input(
            data,
            min_length=self.validation_settings.post_text_min_length,
            max_length=self.validation_settings.post_text_max_length,
        )

    async def list_posts(self, sort: PostSortOrder = PostSortOrder.RECENT) -> list[Post]:
        """List all posts, newest first unless ``sort`` says otherwise."""
        with logfire.span("post_service.list_posts", sort=sort.value):
            posts = await self.post_repository.find_all(sort=sort)
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def create_post(
        self, caller_id: UserId, data: Mapping[str, Any] | None
    ) -> Post:
        """Create a post owned by the caller.

        Args:
            caller_id: Authenticated user creating the post
            data: Raw ``{text, name, avatar}`` submission

        Returns:
            The stored post, with no likes or comments

        Raises:
            InvalidInputError: If the submission fails validation
        """
        with logfire.span("post_service.create_post", user_id=str(caller_id)):
            result = self.validate(data)
            if not result.is_valid:
                logfire.info("Post rejected", errors=result.errors)
                raise InvalidInputError(result.errors)

            post = Post(
                id=PostId(uuid4()),
                text=result.data["text"],
                name=result.data["name"],
                avatar=result.data["avatar"],
                user_id=caller_id,
                likes=[],
                comments=[],
                created_at=datetime.now(),
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def delete_post(self, caller_id: UserId, post_id: PostId) -> None:
        """Delete a post. Only its owner may do so.

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If the caller does not own the post
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), user_id=str(caller_id)
        ):
            post = await self.get_post(post_id)
            if not post.is_owned_by(caller_id):
                logfire.warn(
                    "Unauthorized post deletion attempt",
                    post_id=str(post_id),
                    user_id=str(caller_id),
                )
                raise NotAuthorizedError("post", str(post_id), str(caller_id))

            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))

    async def like_post(self, caller_id: UserId, post_id: PostId) -> Post:
        """Like a post.

        Returns:
            The post with the caller's like first in ``likes``

        Raises:
            NotFoundError: If post not found
            AlreadyLikedError: If the caller already liked the post
        """
        with logfire.span(
            "post_service.like_post", post_id=str(post_id), user_id=str(caller_id)
        ):
            post = await self.get_post(post_id)
            if post.is_liked_by(caller_id):
                logfire.info(
                    "Duplicate like attempt", post_id=str(post_id), user_id=str(caller_id)
                )
                raise AlreadyLikedError(str(post_id), str(caller_id))

            # A concurrent like from the same user may land between the check
            # above and this write; the repository refuses the duplicate.
            added = await self.post_repository.add_like(post_id, Like(user_id=caller_id))
            if not added:
                logfire.info(
                    "Duplicate like lost race", post_id=str(post_id), user_id=str(caller_id)
                )
                raise AlreadyLikedError(str(post_id), str(caller_id))

            return await self.get_post(post_id)

    async def unlike_post(self, caller_id: UserId, post_id: PostId) -> Post:
        """Remove the caller's like from a post.

        Raises:
            NotFoundError: If post not found
            NotLikedError: If the caller has not liked the post
        """
        with logfire.span(
            "post_service.unlike_post", post_id=str(post_id), user_id=str(caller_id)
        ):
            post = await self.get_post(post_id)
            if not post.is_liked_by(caller_id):
                raise NotLikedError(str(post_id), str(caller_id))

            removed = await self.post_repository.remove_like(post_id, caller_id)
            if not removed:
                raise NotLikedError(str(post_id), str(caller_id))

            return await self.get_post(post_id)

    async def add_comment(
        self, caller_id: UserId, post_id: PostId, data: Mapping[str, Any] | None
    ) -> Post:
        """Add a comment to a post.

        Args:
            caller_id: Authenticated user commenting
            post_id: Post to comment on
            data: Raw ``{text, name, avatar}`` submission

        Returns:
            The post with the new comment first in ``comments``

        Raises:
            InvalidInputError: If the submission fails validation
            NotFoundError: If post not found
        """
        with logfire.span(
            "post_service.add_comment", post_id=str(post_id), user_id=str(caller_id)
        ):
            result = self.validate(data)
            if not result.is_valid:
                logfire.info("Comment rejected", errors=result.errors)
                raise InvalidInputError(result.errors)

            await self.get_post(post_id)

            comment = Comment(
                id=CommentId(uuid4()),
                text=result.data["text"],
                name=result.data["name"],
                avatar=result.data["avatar"],
                user_id=caller_id,
                created_at=datetime.now(),
            )
            await self.post_repository.add_comment(post_id, comment)
            logfire.info(
                "Comment added", post_id=str(post_id), comment_id=str(comment.id)
            )
            return await self.get_post(post_id)

    async def delete_comment(
        self, caller_id: UserId, post_id: PostId, comment_id: CommentId
    ) -> Post:
        """Delete a comment from a post.

        Any authenticated user may delete a comment; ``caller_id`` is only
        recorded.

        Raises:
            NotFoundError: If the post or the comment does not exist
        """
        with logfire.span(
            "post_service.delete_comment",
            post_id=str(post_id),
            comment_id=str(comment_id),
            user_id=str(caller_id),
        ):
            post = await self.get_post(post_id)
            if post.find_comment(comment_id) is None:
                logfire.warn(
                    "Comment not found", post_id=str(post_id), comment_id=str(comment_id)
                )
                raise NotFoundError("Comment", str(comment_id))

            removed = await self.post_repository.remove_comment(post_id, comment_id)
            if not removed:
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment deleted", post_id=str(post_id), comment_id=str(comment_id)
            )
            return await self.get_post(post_id)
