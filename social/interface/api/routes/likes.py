"""Like routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from social.application.usecase.like import (
    LikePostRequest,
    LikePostUseCase,
    UnlikePostRequest,
    UnlikePostUseCase,
)
from social.application.usecase.post import PostResponse
from social.domain.service import JWTService
from social.interface.api.auth import require_caller

router = APIRouter(prefix="/posts", tags=["likes"], route_class=DishkaRoute)


@router.post("/{post_id}/like", response_model=PostResponse)
async def like_post(
    post_id: str,
    like_post_use_case: FromDishka[LikePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> PostResponse:
    """Like a post.

    Returns 409 if the caller already liked it.
    """
    caller = require_caller(jwt_service, authorization)

    return await like_post_use_case.execute(
        LikePostRequest(post_id=post_id, user_id=str(caller.user_id))
    )


@router.delete("/{post_id}/like", response_model=PostResponse)
async def unlike_post(
    post_id: str,
    unlike_post_use_case: FromDishka[UnlikePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> PostResponse:
    """Remove the caller's like from a post.

    Returns 409 if the caller has not liked it.
    """
    caller = require_caller(jwt_service, authorization)

    return await unlike_post_use_case.execute(
        UnlikePostRequest(post_id=post_id, user_id=str(caller.user_id))
    )
