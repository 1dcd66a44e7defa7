"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel

from social.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from social.application.usecase.post import PostResponse
from social.domain.service import JWTService
from social.interface.api.auth import require_caller

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class AddCommentAPIRequest(BaseModel):
    """API request for commenting on a post."""

    text: str | None = None
    name: str | None = None
    avatar: str | None = None


@router.post(
    "/{post_id}/comments",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    post_id: str,
    request: AddCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> PostResponse:
    """Add a comment to a post.

    Name and avatar fall back to the caller's token claims when omitted.
    """
    caller = require_caller(jwt_service, authorization)

    return await add_comment_use_case.execute(
        AddCommentRequest(
            post_id=post_id,
            user_id=str(caller.user_id),
            text=request.text,
            name=request.name if request.name is not None else caller.name,
            avatar=request.avatar if request.avatar is not None else caller.avatar,
        )
    )


@router.delete("/{post_id}/comments/{comment_id}", response_model=PostResponse)
async def delete_comment(
    post_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> PostResponse:
    """Delete a comment from a post.

    Any authenticated user may delete any comment.
    """
    caller = require_caller(jwt_service, authorization)

    return await delete_comment_use_case.execute(
        DeleteCommentRequest(
            post_id=post_id, comment_id=comment_id, user_id=str(caller.user_id)
        )
    )
