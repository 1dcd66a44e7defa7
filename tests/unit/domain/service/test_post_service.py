"""Unit tests for PostService."""

import asyncio
from datetime import datetime, timedelta
from typing import Optional
from uuid import uuid4

import pytest

from social.domain.error import (
    AlreadyLikedError,
    ErrorKind,
    InvalidInputError,
    NotAuthorizedError,
    NotFoundError,
    NotLikedError,
)
from social.domain.model import Like, Post
from social.domain.repository import PostRepository, PostSortOrder
from social.domain.service import PostService
from social.domain.value import CommentId, PostId, UserId
from social.persistence.repository.inmemory import InMemoryPostRepository
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post."""

    @pytest.mark.asyncio
    async def test_create_then_get_returns_fresh_post(self, unit_env):
        """A created post is owned by the caller and has no likes or comments."""
        # Arrange
        post_service = await unit_env.get(PostService)
        user_id = UserId(uuid4())

        # Act
        created = await post_service.create_post(user_id, {"text": "hello"})
        fetched = await post_service.get_post(created.id)

        # Assert
        assert fetched.text == "hello"
        assert fetched.user_id == user_id
        assert fetched.likes == []
        assert fetched.comments == []

    @pytest.mark.asyncio
    async def test_create_keeps_name_and_avatar(self, unit_env):
        """Name and avatar from the submission are stored on the post."""
        post_service = await unit_env.get(PostService)

        post = await post_service.create_post(
            UserId(uuid4()),
            {"text": "hello", "name": "Ada", "avatar": "https://example.com/a.png"},
        )

        assert post.name == "Ada"
        assert post.avatar == "https://example.com/a.png"

    @pytest.mark.asyncio
    async def test_create_invalid_raises_without_saving(self, unit_env):
        """Validation failure returns field errors and stores nothing."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(InvalidInputError) as exc_info:
            await post_service.create_post(UserId(uuid4()), {"text": "   "})

        assert exc_info.value.kind == ErrorKind.INVALID_INPUT
        assert exc_info.value.errors == {"text": "Text field is required"}
        assert await post_service.list_posts() == []


class TestListAndGetPosts:
    """Tests for list_posts and get_post."""

    @pytest.mark.asyncio
    async def test_list_posts_newest_first(self, unit_env):
        """Posts are listed by creation date, newest first."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        base = datetime(2024, 1, 1)
        old = await post_repo.save(make_post(text="old", created_at=base))
        new = await post_repo.save(
            make_post(text="new", created_at=base + timedelta(days=1))
        )

        posts = await post_service.list_posts()

        assert [p.id for p in posts] == [new.id, old.id]

    @pytest.mark.asyncio
    async def test_list_posts_oldest_first(self, unit_env):
        """The oldest sort order reverses the listing."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        base = datetime(2024, 1, 1)
        old = await post_repo.save(make_post(created_at=base))
        new = await post_repo.save(make_post(created_at=base + timedelta(hours=1)))

        posts = await post_service.list_posts(sort=PostSortOrder.OLDEST)

        assert [p.id for p in posts] == [old.id, new.id]

    @pytest.mark.asyncio
    async def test_get_missing_post_raises(self, unit_env):
        """Getting an unknown post raises NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError) as exc_info:
            await post_service.get_post(PostId(uuid4()))

        assert exc_info.value.kind == ErrorKind.NOT_FOUND


class TestDeletePost:
    """Tests for delete_post."""

    @pytest.mark.asyncio
    async def test_owner_can_delete(self, unit_env):
        """The owner's delete removes the post."""
        post_service = await unit_env.get(PostService)
        owner = UserId(uuid4())
        post = await post_service.create_post(owner, {"text": "bye"})

        await post_service.delete_post(owner, post.id)

        with pytest.raises(NotFoundError):
            await post_service.get_post(post.id)

    @pytest.mark.asyncio
    async def test_non_owner_is_forbidden_and_post_unchanged(self, unit_env):
        """A non-owner's delete is refused and the post is left as it was."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(UserId(uuid4()), {"text": "mine"})
        await post_service.like_post(UserId(uuid4()), post.id)
        before = await post_service.get_post(post.id)

        with pytest.raises(NotAuthorizedError) as exc_info:
            await post_service.delete_post(UserId(uuid4()), post.id)

        assert exc_info.value.kind == ErrorKind.FORBIDDEN
        assert await post_service.get_post(post.id) == before

    @pytest.mark.asyncio
    async def test_delete_missing_post_raises(self, unit_env):
        """Deleting an unknown post raises NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.delete_post(UserId(uuid4()), PostId(uuid4()))


class TestLikes:
    """Tests for like_post and unlike_post."""

    @pytest.mark.asyncio
    async def test_like_then_like_again_conflicts(self, unit_env):
        """The first like succeeds and the second is a conflict."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(UserId(uuid4()), {"text": "hello"})
        liker = UserId(uuid4())

        liked = await post_service.like_post(liker, post.id)
        assert liked.likes == [Like(user_id=liker)]

        with pytest.raises(AlreadyLikedError) as exc_info:
            await post_service.like_post(liker, post.id)

        assert exc_info.value.kind == ErrorKind.CONFLICT
        assert (await post_service.get_post(post.id)).likes == [Like(user_id=liker)]

    @pytest.mark.asyncio
    async def test_like_is_prepended(self, unit_env):
        """The newest like comes first."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(UserId(uuid4()), {"text": "hello"})
        first, second = UserId(uuid4()), UserId(uuid4())

        await post_service.like_post(first, post.id)
        result = await post_service.like_post(second, post.id)

        assert [like.user_id for like in result.likes] == [second, first]

    @pytest.mark.asyncio
    async def test_duplicate_detected_among_other_likers(self, unit_env):
        """A repeat like is a conflict even when other users also liked."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(UserId(uuid4()), {"text": "hello"})
        liker = UserId(uuid4())
        await post_service.like_post(liker, post.id)
        await post_service.like_post(UserId(uuid4()), post.id)

        with pytest.raises(AlreadyLikedError):
            await post_service.like_post(liker, post.id)

    @pytest.mark.asyncio
    async def test_like_then_unlike_restores_likes(self, unit_env):
        """Unliking after liking restores likes exactly, order included."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(UserId(uuid4()), {"text": "hello"})
        for _ in range(3):
            await post_service.like_post(UserId(uuid4()), post.id)
        before = (await post_service.get_post(post.id)).likes
        liker = UserId(uuid4())

        await post_service.like_post(liker, post.id)
        after = await post_service.unlike_post(liker, post.id)

        assert after.likes == before

    @pytest.mark.asyncio
    async def test_unlike_without_like_conflicts(self, unit_env):
        """Unliking a post not liked by the caller is a conflict."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(UserId(uuid4()), {"text": "hello"})
        await post_service.like_post(UserId(uuid4()), post.id)

        with pytest.raises(NotLikedError):
            await post_service.unlike_post(UserId(uuid4()), post.id)

    @pytest.mark.asyncio
    async def test_like_missing_post_raises(self, unit_env):
        """Liking an unknown post raises NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.like_post(UserId(uuid4()), PostId(uuid4()))



class TestComments:
    """Tests for add_comment and delete_comment."""

    @pytest.mark.asyncio
    async def test_add_then_delete_comment(self, unit_env):
        """A comment is added by its author and deletable by anyone."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(UserId(uuid4()), {"text": "hello"})
        commenter = UserId(uuid4())

        commented = await post_service.add_comment(commenter, post.id, {"text": "nice"})

        assert len(commented.comments) == 1
        comment = commented.comments[0]
        assert comment.user_id == commenter
        assert comment.text == "nice"

        result = await post_service.delete_comment(UserId(uuid4()), post.id, comment.id)

        assert result.comments == []

    @pytest.mark.asyncio
    async def test_comments_newest_first(self, unit_env):
        """The newest comment comes first."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(UserId(uuid4()), {"text": "hello"})

        await post_service.add_comment(UserId(uuid4()), post.id, {"text": "first"})
        result = await post_service.add_comment(
            UserId(uuid4()), post.id, {"text": "second"}
        )

        assert [c.text for c in result.comments] == ["second", "first"]

    @pytest.mark.asyncio
    async def test_invalid_comment_raises_before_lookup(self, unit_env):
        """An invalid comment is rejected even for an unknown post."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(InvalidInputError):
            await post_service.add_comment(UserId(uuid4()), PostId(uuid4()), {})

    @pytest.mark.asyncio
    async def test_comment_on_missing_post_raises(self, unit_env):
        """Commenting on an unknown post raises NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.add_comment(
                UserId(uuid4()), PostId(uuid4()), {"text": "hi"}
            )

    @pytest.mark.asyncio
    async def test_delete_unknown_comment_leaves_comments(self, unit_env):
        """Deleting an unknown comment raises and leaves comments unchanged."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(UserId(uuid4()), {"text": "hello"})
        commented = await post_service.add_comment(
            UserId(uuid4()), post.id, {"text": "stay"}
        )

        with pytest.raises(NotFoundError) as exc_info:
            await post_service.delete_comment(
                UserId(uuid4()), post.id, CommentId(uuid4())
            )

        assert exc_info.value.resource == "Comment"
        assert (await post_service.get_post(post.id)).comments == commented.comments


class YieldingPostRepository(InMemoryPostRepository):
    """In-memory repository that suspends after each read.

    Every racing caller reads the same snapshot before any of them writes.
    """

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        post = await super().find_by_id(post_id)
        await asyncio.sleep(0)
        return post


class TestConcurrentMutations:
    """Racing calls that all pass the read check before any of them writes."""

    @pytest.fixture
    def racing_service(self):
        return PostService(YieldingPostRepository())

    @pytest.mark.asyncio
    async def test_concurrent_likes_from_same_user_store_one(self, racing_service):
        """Racing likes from one user leave a single like and two conflicts."""
        post = await racing_service.create_post(UserId(uuid4()), {"text": "hello"})
        liker = UserId(uuid4())

        results = await asyncio.gather(
            *(racing_service.like_post(liker, post.id) for _ in range(3)),
            return_exceptions=True,
        )

        assert [type(r).__name__ for r in results] == [
            "Post",
            "AlreadyLikedError",
            "AlreadyLikedError",
        ]
        assert (await racing_service.get_post(post.id)).likes == [Like(user_id=liker)]

    @pytest.mark.asyncio
    async def test_concurrent_likes_from_different_users_all_land(self, racing_service):
        """Racing likes from distinct users are all stored."""
        post = await racing_service.create_post(UserId(uuid4()), {"text": "hello"})
        likers = [UserId(uuid4()) for _ in range(3)]

        await asyncio.gather(*(racing_service.like_post(u, post.id) for u in likers))

        stored = (await racing_service.get_post(post.id)).likes
        assert {like.user_id for like in stored} == set(likers)

    @pytest.mark.asyncio
    async def test_concurrent_unlikes_remove_once(self, racing_service):
        """Of two racing unlikes, the second finds nothing to remove."""
        post = await racing_service.create_post(UserId(uuid4()), {"text": "hello"})
        liker = UserId(uuid4())
        await racing_service.like_post(liker, post.id)

        results = await asyncio.gather(
            racing_service.unlike_post(liker, post.id),
            racing_service.unlike_post(liker, post.id),
            return_exceptions=True,
        )

        assert not isinstance(results[0], Exception)
        assert isinstance(results[1], NotLikedError)
        assert (await racing_service.get_post(post.id)).likes == []

    @pytest.mark.asyncio
    async def test_concurrent_comment_deletes_remove_once(self, racing_service):
        """Of two racing deletes of one comment, the second is not found."""
        post = await racing_service.create_post(UserId(uuid4()), {"text": "hello"})
        commented = await racing_service.add_comment(
            UserId(uuid4()), post.id, {"text": "going"}
        )
        comment_id = commented.comments[0].id

        results = await asyncio.gather(
            racing_service.delete_comment(UserId(uuid4()), post.id, comment_id),
            racing_service.delete_comment(UserId(uuid4()), post.id, comment_id),
            return_exceptions=True,
        )

        assert not isinstance(results[0], Exception)
        assert isinstance(results[1], NotFoundError)
        assert results[1].resource == "Comment"
        assert (await racing_service.get_post(post.id)).comments == []
