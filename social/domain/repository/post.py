"""Post repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from social.domain.model.post import Comment, Like, Post
from social.domain.value import CommentId, PostId, UserId


class PostSortOrder(str, Enum):
    """Sort order for post listings."""

    RECENT = "recent"  # Sort by created_at DESC
    OLDEST = "oldest"  # Sort by created_at ASC


class PostRepository(ABC):
    """Repository for the Post aggregate.

    Likes and comments are changed through dedicated primitives rather than
    by saving a modified post. Each primitive is atomic with respect to
    concurrent callers, which is what keeps a user from liking a post twice
    when two requests race.

    Implementations raise ``UnavailableError`` when the backend fails.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post with its likes and comments if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, sort: PostSortOrder = PostSortOrder.RECENT) -> List[Post]:
        """Find all posts.

        Args:
            sort: Sort order by creation date

        Returns:
            List of posts with their likes and comments
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert a post, or update the post's own fields if it exists.

        Likes and comments are written on insert only.

        Args:
            post: Post to save

        Returns:
            The stored post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post with its likes and comments.

        Args:
            post_id: The post's unique identifier
        """
        pass

    @abstractmethod
    async def add_like(self, post_id: PostId, like: Like) -> bool:
        """Prepend a like unless the user already liked the post.

        Args:
            post_id: The post's unique identifier
            like: Like to add

        Returns:
            True if added, False if the user had already liked the post

        Raises:
            NotFoundError: If the post does not exist
        """
        pass

    @abstractmethod
    async def remove_like(self, post_id: PostId, user_id: UserId) -> bool:
        """Remove a user's like.

        Args:
            post_id: The post's unique identifier
            user_id: User whose like to remove

        Returns:
            True if removed, False if there was no like to remove
        """
        pass

    @abstractmethod
    async def add_comment(self, post_id: PostId, comment: Comment) -> None:
        """Prepend a comment to a post.

        Args:
            post_id: The post's unique identifier
            comment: Comment to add

        Raises:
            NotFoundError: If the post does not exist
        """
        pass

    @abstractmethod
    async def remove_comment(self, post_id: PostId, comment_id: CommentId) -> bool:
        """Remove a comment from a post.

        Args:
            post_id: The post's unique identifier
            comment_id: The comment's unique identifier

        Returns:
            True if removed, False if the post has no such comment
        """
        pass
