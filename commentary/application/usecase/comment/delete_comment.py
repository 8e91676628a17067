"""Delete comment use case."""

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import CommentService
from commentary.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: int


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: int
    post_id: int


class DeleteCommentUseCase(BaseUseCase):
    """Use case for permanently removing a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If comment not found
        """
        comment = await self.comment_service.delete_by_id(CommentId(request.comment_id))
        return DeleteCommentResponse(comment_id=comment.id, post_id=comment.post_id)
