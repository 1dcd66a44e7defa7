"""Delete post use case."""

from pydantic import BaseModel

from social.application.usecase.common import parse_post_id, parse_user_id
from social.domain.service import PostService


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be owner)


class DeletePostResponse(BaseModel):
    """Delete post response."""

    success: bool


class DeletePostUseCase:
    """Use case for deleting a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If user doesn't own the post
        """
        await self.post_service.delete_post(
            parse_user_id(request.user_id), parse_post_id(request.post_id)
        )
        return DeletePostResponse(success=True)
