"""Comment use cases."""

from .add_comment import AddCommentRequest, AddCommentUseCase
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
]
