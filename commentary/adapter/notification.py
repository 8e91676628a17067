"""Comment notifier implementations."""

import logfire

from commentary.application.notifier import CommentEvent, CommentNotifier
from commentary.domain.model import Comment


class LogfireCommentNotifier(CommentNotifier):
    """Records comment notifications as structured Logfire events.

    Mail or webhook delivery can hook into these events downstream.
    """

    async def notify(self, event: CommentEvent, comment: Comment) -> None:
        """Emit one notification event."""
        logfire.info(
            "Comment notification",
            notification=event.value,
            comment_id=comment.id,
            post_id=comment.post_id,
            parent_id=comment.parent_id,
            author=comment.author,
        )


class InMemoryCommentNotifier(CommentNotifier):
    """Collects notifications in memory for testing."""

    def __init__(self) -> None:
        self.sent: list[tuple[CommentEvent, Comment]] = []

    async def notify(self, event: CommentEvent, comment: Comment) -> None:
        """Record the notification."""
        self.sent.append((event, comment))

    @property
    def events(self) -> list[CommentEvent]:
        return [event for event, _ in self.sent]
