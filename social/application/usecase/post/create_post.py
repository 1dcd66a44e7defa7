"""Create post use case."""

import logfire
from pydantic import BaseModel

from social.application.usecase.common import parse_user_id
from social.application.usecase.post.view import PostResponse
from social.domain.service import PostService


class CreatePostRequest(BaseModel):
    """Create post request.

    Fields are left unvalidated here; the domain validator normalizes them
    and reports every failing field at once.
    """

    user_id: str  # User ID from authenticated user
    text: str | None = None
    name: str | None = None
    avatar: str | None = None


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The created post

        Raises:
            InvalidInputError: If validation fails
        """
        with logfire.span("create_post.execute", user_id=request.user_id):
            post = await self.post_service.create_post(
                parse_user_id(request.user_id),
                request.model_dump(include={"text", "name", "avatar"}),
            )
            return PostResponse.from_post(post)
