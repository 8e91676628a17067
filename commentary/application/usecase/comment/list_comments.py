"""List comments use case (admin)."""

from pydantic import BaseModel, Field

from commentary.application.usecase.base import BaseUseCase
from commentary.config import CommentSettings
from commentary.domain.service import CommentService
from commentary.domain.value import CommentQuery, CommentStatus, PageRequest
from commentary.domain.view import CommentWithPost


class ListCommentsRequest(BaseModel):
    """List comments request."""

    status: CommentStatus | None = None
    keyword: str | None = None  # Matches author, content or email
    page: int = Field(default=0, ge=0)
    size: int | None = Field(default=None, gt=0)


class ListCommentsResponse(BaseModel):
    """Page of comments for moderation."""

    comments: list[CommentWithPost]
    page: int
    size: int
    total: int
    total_pages: int


class ListCommentsUseCase(BaseUseCase):
    """Use case for the moderation listing, newest comments first."""

    def __init__(
        self,
        comment_service: CommentService,
        comment_settings: CommentSettings,
    ) -> None:
        self.comment_service = comment_service
        self.comment_settings = comment_settings

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Args:
            request: Filters and page window

        Returns:
            Matching comments with their posts
        """
        page_request = PageRequest(
            page_number=request.page,
            page_size=request.size or self.comment_settings.default_page_size,
        )
        query = CommentQuery(status=request.status, keyword=request.keyword)

        page = await self.comment_service.page_by_query(query, page_request)

        return ListCommentsResponse(
            comments=page.content,
            page=page.page_number,
            size=page.page_size,
            total=page.total_elements,
            total_pages=page.total_pages,
        )
