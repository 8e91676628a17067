"""Notification infrastructure providers."""

from dishka import Scope, provide

from commentary.adapter.notification import LogfireCommentNotifier
from commentary.application.notifier import CommentNotifier
from commentary.util.di.base import ProviderBase


class NotificationProvider(ProviderBase):
    """Notification component base."""

    __mock_component__ = "notification"


class ProdNotificationProvider(NotificationProvider):
    """Production notifier emitting Logfire events."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_comment_notifier(self) -> CommentNotifier:
        """Provide comment notifier."""
        return LogfireCommentNotifier()
