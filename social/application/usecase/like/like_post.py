"""Like post use case."""

from pydantic import BaseModel

from social.application.usecase.common import parse_post_id, parse_user_id
from social.application.usecase.post.view import PostResponse
from social.domain.service import PostService


class LikePostRequest(BaseModel):
    """Like post request."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class LikePostUseCase:
    """Use case for liking a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize like post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: LikePostRequest) -> PostResponse:
        """Execute like post flow.

        Returns:
            The post with the new like first

        Raises:
            NotFoundError: If post not found
            AlreadyLikedError: If the user already liked the post
        """
        post = await self.post_service.like_post(
            parse_user_id(request.user_id), parse_post_id(request.post_id)
        )
        return PostResponse.from_post(post)
