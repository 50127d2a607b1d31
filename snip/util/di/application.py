"""Application layer DI providers."""

from dishka import Scope, provide

from snip.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    FlagCommentUseCase,
    GetCommentUseCase,
    ListCommentsUseCase,
    ListFlagsUseCase,
    UnflagCommentUseCase,
    UpdateCommentUseCase,
)
from snip.domain.service import CommentService, FlagService
from snip.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_service: CommentService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Flag use cases
    @provide(scope=Scope.REQUEST)
    def get_flag_comment_use_case(self, flag_service: FlagService) -> FlagCommentUseCase:
        """Provide flag comment use case."""
        return FlagCommentUseCase(flag_service=flag_service)

    @provide(scope=Scope.REQUEST)
    def get_unflag_comment_use_case(
        self, flag_service: FlagService
    ) -> UnflagCommentUseCase:
        """Provide unflag comment use case."""
        return UnflagCommentUseCase(flag_service=flag_service)

    @provide(scope=Scope.REQUEST)
    def get_list_flags_use_case(self, flag_service: FlagService) -> ListFlagsUseCase:
        """Provide list flags use case."""
        return ListFlagsUseCase(flag_service=flag_service)
