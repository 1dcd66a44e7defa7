"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel

from social.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostResponse,
)
from social.domain.repository import PostSortOrder
from social.domain.service import JWTService
from social.interface.api.auth import require_caller

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post.

    Length rules are enforced by the domain validator so that every field
    error is reported in one response.
    """

    text: str | None = None
    name: str | None = None
    avatar: str | None = None


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    sort: PostSortOrder = PostSortOrder.RECENT,
) -> ListPostsResponse:
    """List all posts, newest first by default."""
    return await list_posts_use_case.execute(ListPostsRequest(sort=sort))


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostResponse:
    """Get a post by ID.

    Malformed ids are reported as not found.
    """
    return await get_post_use_case.execute(GetPostRequest(post_id=post_id))


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> PostResponse:
    """Create a new post owned by the caller.

    Name and avatar fall back to the caller's token claims when omitted.
    """
    caller = require_caller(jwt_service, authorization)

    return await create_post_use_case.execute(
        CreatePostRequest(
            user_id=str(caller.user_id),
            text=request.text,
            name=request.name if request.name is not None else caller.name,
            avatar=request.avatar if request.avatar is not None else caller.avatar,
        )
    )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> DeletePostResponse:
    """Delete a post. Only its owner may do so."""
    caller = require_caller(jwt_service, authorization)

    return await delete_post_use_case.execute(
        DeletePostRequest(post_id=post_id, user_id=str(caller.user_id))
    )
