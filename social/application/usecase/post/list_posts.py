"""List posts use case."""

import logfire
from pydantic import BaseModel

from social.application.usecase.post.view import PostResponse
from social.domain.repository import PostSortOrder
from social.domain.service import PostService


class ListPostsRequest(BaseModel):
    """List posts request."""

    sort: PostSortOrder = PostSortOrder.RECENT


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostResponse]
    total: int


class ListPostsUseCase:
    """Use case for listing all posts."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: List posts request

        Returns:
            All posts in the requested order

        Raises:
            UnavailableError: If storage fails
        """
        with logfire.span("list_posts.execute", sort=request.sort.value):
            posts = await self.post_service.list_posts(sort=request.sort)
            return ListPostsResponse(
                posts=[PostResponse.from_post(post) for post in posts],
                total=len(posts),
            )
