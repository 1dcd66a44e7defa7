"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .view import CommentResponse, LikeResponse, PostResponse

__all__ = [
    "CommentResponse",
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "LikeResponse",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostResponse",
]
