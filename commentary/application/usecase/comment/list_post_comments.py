"""List post comments use case (admin)."""

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import CommentService
from commentary.domain.value import CommentStatus, PostId


class PostCommentItem(BaseModel):
    """Comment item in response."""

    comment_id: int
    parent_id: int
    author: str
    email: str
    content: str
    status: CommentStatus


class ListPostCommentsRequest(BaseModel):
    """List post comments request."""

    post_id: int


class ListPostCommentsResponse(BaseModel):
    """Every comment of a post, oldest first."""

    post_id: int
    comments: list[PostCommentItem]
    total: int


class ListPostCommentsUseCase(BaseUseCase):
    """Use case for listing all comments of a post regardless of status."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ListPostCommentsRequest) -> ListPostCommentsResponse:
        comments = await self.comment_service.list_by_post(PostId(request.post_id))
        comments = sorted(comments, key=lambda c: (c.created_at, c.id))

        items = [
            PostCommentItem(
                comment_id=comment.id,
                parent_id=comment.parent_id,
                author=comment.author,
                email=comment.email,
                content=comment.content,
                status=comment.status,
            )
            for comment in comments
        ]
        return ListPostCommentsResponse(
            post_id=request.post_id, comments=items, total=len(items)
        )
