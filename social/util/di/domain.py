"""Domain layer DI providers."""

from dishka import Scope, provide

from social.config import AuthSettings, ValidationSettings
from social.domain.repository import PostRepository
from social.domain.service import JWTService, PostService
from social.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        validation_settings: ValidationSettings,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            validation_settings=validation_settings,
        )
