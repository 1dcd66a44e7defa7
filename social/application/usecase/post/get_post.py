"""Get post use case."""

from pydantic import BaseModel

from social.application.usecase.common import parse_post_id
from social.application.usecase.post.view import PostResponse
from social.domain.service import PostService


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string


class GetPostUseCase:
    """Use case for retrieving a post by ID."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If the id is malformed or no such post exists
        """
        post = await self.post_service.get_post(parse_post_id(request.post_id))
        return PostResponse.from_post(post)
