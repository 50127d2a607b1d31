"""Domain layer DI providers."""

from dishka import Scope, provide

from snip.config import AuthSettings, CommentSettings
from snip.domain.repository import (
    CommentFlagRepository,
    CommentRepository,
    SnippetRepository,
)
from snip.domain.service import AccessPolicy, CommentService, FlagService, JWTService
from snip.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_access_policy(self) -> AccessPolicy:
        """Provide the stateless access policy."""
        return AccessPolicy()

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        snippet_repository: SnippetRepository,
        access_policy: AccessPolicy,
        settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            snippet_repository=snippet_repository,
            access_policy=access_policy,
            settings=settings,
        )

    @provide
    def get_flag_service(
        self,
        flag_repository: CommentFlagRepository,
        comment_service: CommentService,
        access_policy: AccessPolicy,
        settings: CommentSettings,
    ) -> FlagService:
        """Provide flag domain service."""
        return FlagService(
            flag_repository=flag_repository,
            comment_service=comment_service,
            access_policy=access_policy,
            settings=settings,
        )
