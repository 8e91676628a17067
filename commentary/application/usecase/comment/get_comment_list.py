"""Get comment list use case."""

from pydantic import BaseModel, Field

from commentary.application.usecase.base import BaseUseCase
from commentary.config import CommentSettings
from commentary.domain.service import CommentService
from commentary.domain.value import PageRequest, PostId, SortDirection
from commentary.domain.view import CommentWithParent


class GetCommentListRequest(BaseModel):
    """Get comment list request."""

    post_id: int
    page: int = Field(default=0, ge=0)
    size: int | None = Field(default=None, gt=0)
    direction: SortDirection | None = None


class GetCommentListResponse(BaseModel):
    """One flat page of comments, replies carrying their parent."""

    post_id: int
    comments: list[CommentWithParent]
    page: int
    size: int
    total: int
    total_pages: int


class GetCommentListUseCase(BaseUseCase):
    """Use case for reading a post's comments as a flat list."""

    def __init__(
        self,
        comment_service: CommentService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize get comment list use case.

        Args:
            comment_service: Comment domain service
            comment_settings: Pagination defaults
        """
        self.comment_service = comment_service
        self.comment_settings = comment_settings

    async def execute(self, request: GetCommentListRequest) -> GetCommentListResponse:
        """Execute get comment list flow.

        Args:
            request: Post and page window

        Returns:
            Page of published comments with parents attached
        """
        page_request = PageRequest(
            page_number=request.page,
            page_size=request.size or self.comment_settings.default_page_size,
            direction=request.direction or self.comment_settings.default_sort_direction,
        )

        page = await self.comment_service.page_with_parent_views(
            PostId(request.post_id), page_request
        )

        return GetCommentListResponse(
            post_id=request.post_id,
            comments=page.content,
            page=page.page_number,
            size=page.page_size,
            total=page.total_elements,
            total_pages=page.total_pages,
        )
