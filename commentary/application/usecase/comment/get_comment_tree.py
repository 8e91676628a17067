"""Get comment tree use case."""

from pydantic import BaseModel, Field

from commentary.application.usecase.base import BaseUseCase
from commentary.config import CommentSettings
from commentary.domain.service import CommentService
from commentary.domain.value import PageRequest, PostId, SortDirection
from commentary.domain.view import CommentNode


class GetCommentTreeRequest(BaseModel):
    """Get comment tree request.

    Page size and direction fall back to the configured defaults.
    """

    post_id: int
    page: int = Field(default=0, ge=0)
    size: int | None = Field(default=None, gt=0)
    direction: SortDirection | None = None


class GetCommentTreeResponse(BaseModel):
    """One page of top-level threads with nested replies."""

    post_id: int
    comments: list[CommentNode]
    page: int
    size: int
    total: int  # Published comments of the post
    total_top_level: int  # Threads, the population that is paginated
    total_pages: int


class GetCommentTreeUseCase(BaseUseCase):
    """Use case for reading a post's comments as reply trees."""

    def __init__(
        self,
        comment_service: CommentService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize get comment tree use case.

        Args:
            comment_service: Comment domain service
            comment_settings: Pagination defaults
        """
        self.comment_service = comment_service
        self.comment_settings = comment_settings

    async def execute(self, request: GetCommentTreeRequest) -> GetCommentTreeResponse:
        """Execute get comment tree flow.

        Args:
            request: Post and page window

        Returns:
            Page of threads, siblings ordered by creation time
        """
        page_request = PageRequest(
            page_number=request.page,
            page_size=request.size or self.comment_settings.default_page_size,
            direction=request.direction or self.comment_settings.default_sort_direction,
        )

        page = await self.comment_service.page_tree_views(
            PostId(request.post_id), page_request
        )

        return GetCommentTreeResponse(
            post_id=request.post_id,
            comments=page.content,
            page=page.page_number,
            size=page.page_size,
            total=page.total_elements,
            total_top_level=page.total_top_level_elements,
            total_pages=page.total_pages,
        )
