"""List latest comments use case."""

from pydantic import BaseModel, Field

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import CommentService
from commentary.domain.view import CommentWithPost


class ListLatestCommentsRequest(BaseModel):
    """List latest comments request."""

    top: int = Field(default=10, gt=0, le=100)


class ListLatestCommentsResponse(BaseModel):
    """Newest comments, whatever their status."""

    comments: list[CommentWithPost]
    total: int


class ListLatestCommentsUseCase(BaseUseCase):
    """Use case for the dashboard's latest comments widget."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(
        self, request: ListLatestCommentsRequest
    ) -> ListLatestCommentsResponse:
        page = await self.comment_service.page_latest(request.top)
        return ListLatestCommentsResponse(
            comments=page.content,
            total=page.total_elements,
        )
