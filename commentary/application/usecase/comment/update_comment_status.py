"""Update comment status use case."""

from pydantic import BaseModel

from commentary.application.notifier import CommentNotifier, dispatch
from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import CommentService
from commentary.domain.value import CommentId, CommentStatus


class UpdateCommentStatusRequest(BaseModel):
    """Update comment status request."""

    comment_id: int
    status: CommentStatus


class UpdateCommentStatusResponse(BaseModel):
    """Update comment status response."""

    comment_id: int
    post_id: int
    status: CommentStatus
    notifications: list[str]


class UpdateCommentStatusUseCase(BaseUseCase):
    """Use case for moderating a comment (approve, recycle, back to audit)."""

    def __init__(
        self, comment_service: CommentService, notifier: CommentNotifier
    ) -> None:
        """Initialize update comment status use case.

        Args:
            comment_service: Comment domain service
            notifier: Notification port for approved comments
        """
        self.comment_service = comment_service
        self.notifier = notifier

    async def execute(
        self, request: UpdateCommentStatusRequest
    ) -> UpdateCommentStatusResponse:
        """Execute update comment status flow.

        Args:
            request: Comment and target status

        Returns:
            Updated status and dispatched notifications

        Raises:
            NotFoundError: If comment not found
        """
        comment, effects = await self.comment_service.update_status(
            CommentId(request.comment_id), request.status
        )
        events = await dispatch(self.notifier, comment, effects)

        return UpdateCommentStatusResponse(
            comment_id=comment.id,
            post_id=comment.post_id,
            status=comment.status,
            notifications=[event.value for event in events],
        )
