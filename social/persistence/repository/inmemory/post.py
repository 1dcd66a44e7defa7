"""In-memory post repository for testing."""

from typing import Optional

from social.domain.error import NotFoundError
from social.domain.model.post import Comment, Like, Post
from social.domain.repository.post import PostRepository, PostSortOrder
from social.domain.value import CommentId, PostId, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Each primitive checks and writes without awaiting in between, so it runs
    to completion before any other coroutine touches the same post.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self, sort: PostSortOrder = PostSortOrder.RECENT) -> list[Post]:
        """Find all posts ordered by creation date."""
        return sorted(
            self._posts.values(),
            key=lambda p: p.created_at,
            reverse=sort == PostSortOrder.RECENT,
        )

    async def save(self, post: Post) -> Post:
        """Insert a post or update its own fields."""
        existing = self._posts.get(post.id)
        if existing is not None:
            # Likes and comments only change through their own primitives
            post = post.model_copy(
                update={"likes": existing.likes, "comments": existing.comments}
            )
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        self._posts.pop(post_id, None)

    async def add_like(self, post_id: PostId, like: Like) -> bool:
        """Prepend a like unless the user already liked the post."""
        post = self._require(post_id)
        if post.is_liked_by(like.user_id):
            return False
        self._posts[post_id] = post.with_like(like.user_id)
        return True

    async def remove_like(self, post_id: PostId, user_id: UserId) -> bool:
        """Remove a user's like."""
        post = self._posts.get(post_id)
        if post is None or not post.is_liked_by(user_id):
            return False
        self._posts[post_id] = post.without_like(user_id)
        return True

    async def add_comment(self, post_id: PostId, comment: Comment) -> None:
        """Prepend a comment to a post."""
        post = self._require(post_id)
        self._posts[post_id] = post.with_comment(comment)

    async def remove_comment(self, post_id: PostId, comment_id: CommentId) -> bool:
        """Remove a comment from a post."""
        post = self._posts.get(post_id)
        if post is None or post.find_comment(comment_id) is None:
            return False
        self._posts[post_id] = post.without_comment(comment_id)
        return True

    def _require(self, post_id: PostId) -> Post:
        post = self._posts.get(post_id)
        if post is None:
            raise NotFoundError("Post", str(post_id))
        return post
