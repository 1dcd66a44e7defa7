"""Application layer DI providers."""

from dishka import Scope, provide

from social.application.usecase.comment import AddCommentUseCase, DeleteCommentUseCase
from social.application.usecase.like import LikePostUseCase, UnlikePostUseCase
from social.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
)
from social.domain.service import PostService
from social.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_like_post_use_case(self, post_service: PostService) -> LikePostUseCase:
        """Provide like post use case."""
        return LikePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_unlike_post_use_case(self, post_service: PostService) -> UnlikePostUseCase:
        """Provide unlike post use case."""
        return UnlikePostUseCase(post_service=post_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(self, post_service: PostService) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, post_service: PostService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(post_service=post_service)
