"""Application layer DI providers."""

from dishka import Scope, provide

from commentary.application.notifier import CommentNotifier
from commentary.application.usecase.comment import (
    CountCommentsUseCase,
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentListUseCase,
    GetCommentTreeUseCase,
    ListCommentsUseCase,
    ListLatestCommentsUseCase,
    ListPostCommentsUseCase,
    UpdateCommentStatusUseCase,
)
from commentary.config import AdminSettings, CommentSettings
from commentary.domain.service import CommentService
from commentary.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Public use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        notifier: CommentNotifier,
        admin_settings: AdminSettings,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            notifier=notifier,
            admin_settings=admin_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_tree_use_case(
        self, comment_service: CommentService, comment_settings: CommentSettings
    ) -> GetCommentTreeUseCase:
        """Provide get comment tree use case."""
        return GetCommentTreeUseCase(
            comment_service=comment_service, comment_settings=comment_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_list_use_case(
        self, comment_service: CommentService, comment_settings: CommentSettings
    ) -> GetCommentListUseCase:
        """Provide get comment list use case."""
        return GetCommentListUseCase(
            comment_service=comment_service, comment_settings=comment_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_count_comments_use_case(
        self, comment_service: CommentService
    ) -> CountCommentsUseCase:
        """Provide count comments use case."""
        return CountCommentsUseCase(comment_service=comment_service)

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService, comment_settings: CommentSettings
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service, comment_settings=comment_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_list_latest_comments_use_case(
        self, comment_service: CommentService
    ) -> ListLatestCommentsUseCase:
        """Provide list latest comments use case."""
        return ListLatestCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_post_comments_use_case(
        self, comment_service: CommentService
    ) -> ListPostCommentsUseCase:
        """Provide list post comments use case."""
        return ListPostCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_status_use_case(
        self, comment_service: CommentService, notifier: CommentNotifier
    ) -> UpdateCommentStatusUseCase:
        """Provide update comment status use case."""
        return UpdateCommentStatusUseCase(
            comment_service=comment_service, notifier=notifier
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)
