"""Unit tests for AddCommentUseCase and DeleteCommentUseCase."""

from uuid import uuid4

import pytest

from social.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from social.application.usecase.post import CreatePostRequest, CreatePostUseCase
from social.domain.error import InvalidInputError, NotFoundError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCommentUseCases:
    """Tests for commenting through use cases."""

    @pytest.mark.asyncio
    async def test_add_and_delete_comment(self, unit_env):
        """A comment is returned with its author and removed by anyone."""
        create_post = await unit_env.get(CreatePostUseCase)
        add_comment = await unit_env.get(AddCommentUseCase)
        delete_comment = await unit_env.get(DeleteCommentUseCase)
        post = await create_post.execute(
            CreatePostRequest(user_id=str(uuid4()), text="hello")
        )
        commenter = str(uuid4())

        commented = await add_comment.execute(
            AddCommentRequest(
                post_id=post.post_id, user_id=commenter, text="nice", name="Bo"
            )
        )

        assert len(commented.comments) == 1
        comment = commented.comments[0]
        assert comment.user_id == commenter
        assert comment.name == "Bo"

        result = await delete_comment.execute(
            DeleteCommentRequest(
                post_id=post.post_id,
                comment_id=comment.comment_id,
                user_id=str(uuid4()),
            )
        )
        assert result.comments == []

    @pytest.mark.asyncio
    async def test_comment_too_long_fails(self, unit_env):
        """Comments follow the same length rule as posts."""
        create_post = await unit_env.get(CreatePostUseCase)
        add_comment = await unit_env.get(AddCommentUseCase)
        post = await create_post.execute(
            CreatePostRequest(user_id=str(uuid4()), text="hello")
        )

        with pytest.raises(InvalidInputError) as exc_info:
            await add_comment.execute(
                AddCommentRequest(
                    post_id=post.post_id, user_id=str(uuid4()), text="x" * 301
                )
            )

        assert "text" in exc_info.value.errors

    @pytest.mark.asyncio
    async def test_delete_malformed_comment_id_is_not_found(self, unit_env):
        """Malformed comment ids are treated as absent comments."""
        create_post = await unit_env.get(CreatePostUseCase)
        delete_comment = await unit_env.get(DeleteCommentUseCase)
        post = await create_post.execute(
            CreatePostRequest(user_id=str(uuid4()), text="hello")
        )

        with pytest.raises(NotFoundError) as exc_info:
            await delete_comment.execute(
                DeleteCommentRequest(
                    post_id=post.post_id, comment_id="nope", user_id=str(uuid4())
                )
            )

        assert exc_info.value.resource == "Comment"
