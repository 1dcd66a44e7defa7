"""Add comment use case."""

import logfire
from pydantic import BaseModel

from social.application.usecase.common import parse_post_id, parse_user_id
from social.application.usecase.post.view import PostResponse
from social.domain.service import PostService


class AddCommentRequest(BaseModel):
    """Add comment request."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    text: str | None = None
    name: str | None = None
    avatar: str | None = None


class AddCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize add comment use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: AddCommentRequest) -> PostResponse:
        """Execute add comment flow.

        Steps:
        1. Validate the submission (no lookup happens if it is invalid)
        2. Verify the post exists
        3. Prepend the comment with a fresh id

        Returns:
            The post with the new comment first

        Raises:
            InvalidInputError: If validation fails
            NotFoundError: If post not found
        """
        with logfire.span(
            "add_comment.execute", post_id=request.post_id, user_id=request.user_id
        ):
            post = await self.post_service.add_comment(
                parse_user_id(request.user_id),
                parse_post_id(request.post_id),
                request.model_dump(include={"text", "name", "avatar"}),
            )
            return PostResponse.from_post(post)
