"""Comment notification port.

Comment writes report their consequences as CommentEffects; this module
turns them into notifier calls. Implementations live in the adapter layer.
"""

from abc import ABC, abstractmethod
from enum import Enum

from commentary.domain.model import Comment
from commentary.domain.value import CommentEffects


class CommentEvent(str, Enum):
    """Kinds of comment notifications."""

    NEW = "comment_new"  # Guest opened a new thread
    REPLY = "comment_reply"  # Someone replied to a comment
    PASS = "comment_pass"  # Comment was approved


class CommentNotifier(ABC):
    """Delivers comment notifications (mail, webhooks, logs...)."""

    @abstractmethod
    async def notify(self, event: CommentEvent, comment: Comment) -> None:
        """Deliver one notification.

        Args:
            event: What happened
            comment: Comment the event is about
        """
        pass


def events_for(effects: CommentEffects) -> list[CommentEvent]:
    """Translate comment effects into notification events."""
    events = []
    if effects.is_new_guest_thread:
        events.append(CommentEvent.NEW)
    if effects.is_reply:
        events.append(CommentEvent.REPLY)
    if effects.is_passed:
        events.append(CommentEvent.PASS)
    return events


async def dispatch(
    notifier: CommentNotifier, comment: Comment, effects: CommentEffects
) -> list[CommentEvent]:
    """Send every notification a comment write calls for.

    Returns:
        Events that were dispatched
    """
    if effects.is_empty:
        return []

    events = events_for(effects)
    for event in events:
        await notifier.notify(event, comment)
    return events
