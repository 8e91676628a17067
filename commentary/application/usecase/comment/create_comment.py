"""Create comment use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from commentary.application.notifier import CommentNotifier, dispatch
from commentary.application.usecase.base import BaseUseCase
from commentary.config import AdminSettings
from commentary.domain.service import CommentDraft, CommentService
from commentary.domain.value import ROOT_COMMENT_ID, CommentId, CommentStatus, PostId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: int
    content: str
    author: str | None = None  # Ignored for admin comments
    email: str | None = None  # Ignored for admin comments
    author_url: str | None = None
    parent_id: int = Field(default=0, ge=0)  # 0 for top-level
    ip_address: str | None = None
    user_agent: str | None = None
    as_admin: bool = False  # Written by the blog owner


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: int
    post_id: int
    parent_id: int
    author: str
    content: str
    status: CommentStatus
    is_admin: bool
    created_at: datetime
    notifications: list[str]


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        notifier: CommentNotifier,
        admin_settings: AdminSettings,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            notifier: Notification port for new comments and replies
            admin_settings: Blog owner identity for admin comments
        """
        self.comment_service = comment_service
        self.notifier = notifier
        self.admin_settings = admin_settings

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Create comment via comment service (validates post and parent)
        2. Dispatch the notifications the creation calls for

        Args:
            request: Create comment request

        Returns:
            Created comment details

        Raises:
            ValueError: If a guest comment lacks author or email
            NotFoundError: If post or parent comment not found
            ValidationError: If parent comment belongs to another post
        """
        admin = self.admin_settings if request.as_admin else None
        if admin is None and not (request.author and request.email):
            raise ValueError("Author and email are required for guest comments")

        draft = CommentDraft(
            post_id=PostId(request.post_id),
            author=request.author or self.admin_settings.display_name,
            email=request.email or self.admin_settings.email,
            content=request.content,
            author_url=request.author_url,
            parent_id=CommentId(request.parent_id or ROOT_COMMENT_ID),
            ip_address=request.ip_address,
            user_agent=request.user_agent,
        )

        comment, effects = await self.comment_service.create_comment(draft, admin=admin)
        events = await dispatch(self.notifier, comment, effects)

        return CreateCommentResponse(
            comment_id=comment.id,
            post_id=comment.post_id,
            parent_id=comment.parent_id,
            author=comment.author,
            content=comment.content,
            status=comment.status,
            is_admin=comment.is_admin,
            created_at=comment.created_at,
            notifications=[event.value for event in events],
        )
