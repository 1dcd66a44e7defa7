"""Integration tests for PostgresPostRepository.

Require a migrated PostgreSQL database reachable at DATABASE__URL.
"""

import os
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from social.domain.error import NotFoundError
from social.domain.model import Like
from social.domain.repository import PostRepository
from social.domain.value import CommentId, PostId, UserId
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ, reason="DATABASE__URL not set"
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


class TestPostRepositoryIntegration:
    """Integration tests for PostgresPostRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find_round_trip(self, integration_env):
        """A saved post is found with its own fields intact."""
        post_repo = await integration_env.get(PostRepository)
        post = make_post(text="stored")

        await post_repo.save(post)
        found = await post_repo.find_by_id(post.id)

        assert found is not None
        assert found.text == "stored"
        assert found.user_id == post.user_id
        assert found.likes == []

    @pytest.mark.asyncio
    async def test_add_like_twice_stores_one(self, integration_env):
        """The unique constraint turns the second like into a no-op."""
        post_repo = await integration_env.get(PostRepository)
        post = await post_repo.save(make_post())
        like = Like(user_id=UserId(uuid4()))

        assert await post_repo.add_like(post.id, like) is True
        assert await post_repo.add_like(post.id, like) is False

        found = await post_repo.find_by_id(post.id)
        assert found.likes == [like]

    @pytest.mark.asyncio
    async def test_likes_and_comments_newest_first(self, integration_env):
        """Children are read back in reverse insertion order."""
        post_repo = await integration_env.get(PostRepository)
        post = await post_repo.save(make_post())
        first, second = Like(user_id=UserId(uuid4())), Like(user_id=UserId(uuid4()))
        older, newer = make_comment(minutes=0), make_comment(minutes=1)

        await post_repo.add_like(post.id, first)
        await post_repo.add_like(post.id, second)
        await post_repo.add_comment(post.id, older)
        await post_repo.add_comment(post.id, newer)

        found = await post_repo.find_by_id(post.id)
        assert found.likes == [second, first]
        assert [c.id for c in found.comments] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_add_like_to_missing_post_raises(self, integration_env):
        """The foreign key failure surfaces as NotFoundError."""
        post_repo = await integration_env.get(PostRepository)

        with pytest.raises(NotFoundError) as exc_info:
            await post_repo.add_like(PostId(uuid4()), Like(user_id=UserId(uuid4())))

        assert isinstance(exc_info.value.__cause__, IntegrityError)

    @pytest.mark.asyncio
    async def test_add_comment_to_missing_post_raises(self, integration_env):
        """A comment on a missing post keeps the driver error as its cause."""
        post_repo = await integration_env.get(PostRepository)

        with pytest.raises(NotFoundError) as exc_info:
            await post_repo.add_comment(PostId(uuid4()), make_comment())

        assert isinstance(exc_info.value.__cause__, IntegrityError)

    @pytest.mark.asyncio
    async def test_remove_comment_and_delete_post(self, integration_env):
        """Comments are removed by id and deleting a post removes it."""
        post_repo = await integration_env.get(PostRepository)
        post = await post_repo.save(make_post())
        comment = make_comment()
        await post_repo.add_comment(post.id, comment)

        assert await post_repo.remove_comment(post.id, CommentId(uuid4())) is False
        assert await post_repo.remove_comment(post.id, comment.id) is True

        await post_repo.delete(post.id)
        assert await post_repo.find_by_id(post.id) is None
