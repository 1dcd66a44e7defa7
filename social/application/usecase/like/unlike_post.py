"""Unlike post use case."""

from pydantic import BaseModel

from social.application.usecase.common import parse_post_id, parse_user_id
from social.application.usecase.post.view import PostResponse
from social.domain.service import PostService


class UnlikePostRequest(BaseModel):
    """Unlike post request."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class UnlikePostUseCase:
    """Use case for removing a like from a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize unlike post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UnlikePostRequest) -> PostResponse:
        """Execute unlike post flow.

        Raises:
            NotFoundError: If post not found
            NotLikedError: If the user has not liked the post
        """
        post = await self.post_service.unlike_post(
            parse_user_id(request.user_id), parse_post_id(request.post_id)
        )
        return PostResponse.from_post(post)
