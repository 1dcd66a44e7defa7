"""Delete comment use case."""

from pydantic import BaseModel

from social.application.usecase.common import (
    parse_comment_id,
    parse_post_id,
    parse_user_id,
)
from social.application.usecase.post.view import PostResponse
from social.domain.service import PostService


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class DeleteCommentUseCase:
    """Use case for removing a comment from a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete comment use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeleteCommentRequest) -> PostResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the post or comment does not exist
        """
        post = await self.post_service.delete_comment(
            parse_user_id(request.user_id),
            parse_post_id(request.post_id),
            parse_comment_id(request.comment_id),
        )
        return PostResponse.from_post(post)
