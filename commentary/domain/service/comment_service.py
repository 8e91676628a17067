"""Comment domain service."""

import hashlib
from datetime import datetime
from typing import Collection

import logfire
from pydantic import BaseModel

from commentary.config import AdminSettings, CommentSettings
from commentary.domain.error import NotFoundError, ValidationError
from commentary.domain.model import Comment
from commentary.domain.repository import CommentRepository, PostRepository
from commentary.domain.value import (
    ROOT_COMMENT_ID,
    CommentEffects,
    CommentId,
    CommentOrder,
    CommentQuery,
    CommentStatus,
    Page,
    PageRequest,
    PostId,
    SortDirection,
    CommentTreePage,
)
from commentary.domain.view import (
    CommentNode,
    CommentWithParent,
    CommentWithPost,
    PostMinimal,
)

from .base import Service
from .comment_tree import build_forest, slice_flat_with_parents, slice_top_level


class CommentDraft(BaseModel):
    """Data submitted for a new comment."""

    post_id: PostId
    author: str
    email: str
    content: str
    author_url: str | None = None
    parent_id: CommentId = ROOT_COMMENT_ID
    ip_address: str | None = None
    user_agent: str | None = None


def gravatar_hash(email: str) -> str:
    """MD5 hex digest of an email, as expected by Gravatar."""
    return hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository
            comment_settings: Comment behaviour settings
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.settings = comment_settings

    async def get_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment entity

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span("comment_service.get_by_id", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def list_by_post(self, post_id: PostId) -> list[Comment]:
        """List every comment of a post, whatever its status."""
        with logfire.span("comment_service.list_by_post", post_id=post_id):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post", post_id=post_id, count=len(comments)
            )
            return comments

    async def count_by_post_ids(
        self, post_ids: Collection[PostId]
    ) -> dict[PostId, int]:
        """Count comments for several posts.

        Args:
            post_ids: Post IDs

        Returns:
            Mapping of post id to comment count (posts without comments absent)
        """
        if not post_ids:
            return {}
        with logfire.span("comment_service.count_by_post_ids", count=len(post_ids)):
            return await self.comment_repository.count_by_post_ids(post_ids)

    async def page_latest(self, top: int) -> Page[CommentWithPost]:
        """Get the most recent comments across all posts.

        Args:
            top: Number of comments to return

        Returns:
            Newest comments with their posts

        Raises:
            ValidationError: If top is not positive
        """
        if top <= 0:
            raise ValidationError("Top number must be greater than 0")

        with logfire.span("comment_service.page_latest", top=top):
            page = await self.comment_repository.find_page(
                PageRequest(page_number=0, page_size=top, direction=SortDirection.DESC)
            )
            return await self._with_posts(page)

    async def page_by_status(
        self, status: CommentStatus, page_request: PageRequest
    ) -> Page[CommentWithPost]:
        """Get a page of comments in a given status, newest first by default."""
        return await self.page_by_query(CommentQuery(status=status), page_request)

    async def page_by_query(
        self, query: CommentQuery, page_request: PageRequest
    ) -> Page[CommentWithPost]:
        """Get a page of comments matching an admin query.

        Args:
            query: Status and keyword filter
            page_request: Page window

        Returns:
            Page of comments with their posts
        """
        with logfire.span(
            "comment_service.page_by_query",
            status=query.status.value if query.status else None,
            keyword=query.keyword,
            page_number=page_request.page_number,
            page_size=page_request.page_size,
        ):
            page = await self.comment_repository.find_page(page_request, query)
            return await self._with_posts(page)

    async def create_comment(
        self,
        draft: CommentDraft,
        admin: AdminSettings | None = None,
    ) -> tuple[Comment, CommentEffects]:
        """Create a comment on a post or a reply to another comment.

        Comments written by the blog owner are published right away and
        carry the owner's identity. Guest comments wait for moderation when
        ``new_need_check`` is enabled.

        Args:
            draft: Submitted comment data
            admin: Blog owner identity when written from the admin area

        Returns:
            Saved comment and the notifications it calls for

        Raises:
            NotFoundError: If the post or the parent comment does not exist
            ValidationError: If the parent comment belongs to another post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=draft.post_id,
            parent_id=draft.parent_id,
            is_admin=admin is not None,
        ):
            if not await self.post_repository.exists_by_id(draft.post_id):
                logfire.warn("Post not found", post_id=draft.post_id)
                raise NotFoundError("Post", str(draft.post_id))

            if draft.parent_id != ROOT_COMMENT_ID:
                parent = await self.comment_repository.find_by_id(draft.parent_id)
                if parent is None:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=draft.parent_id,
                        post_id=draft.post_id,
                    )
                    raise NotFoundError("Comment", str(draft.parent_id))
                if parent.post_id != draft.post_id:
                    logfire.error(
                        "Parent comment does not belong to post",
                        parent_id=draft.parent_id,
                        parent_post_id=parent.post_id,
                        target_post_id=draft.post_id,
                    )
                    raise ValidationError("Parent comment does not belong to this post")

            if admin is not None:
                author = admin.display_name
                email = admin.email
                author_url = admin.blog_url
                status = CommentStatus.PUBLISHED
            else:
                author = draft.author
                email = draft.email
                author_url = draft.author_url
                status = (
                    CommentStatus.AUDITING
                    if self.settings.new_need_check
                    else CommentStatus.PUBLISHED
                )

            now = datetime.now()
            comment = Comment(
                post_id=draft.post_id,
                parent_id=draft.parent_id,
                author=author,
                email=email,
                author_url=author_url,
                content=draft.content,
                status=status,
                ip_address=draft.ip_address,
                user_agent=draft.user_agent,
                gravatar_md5=gravatar_hash(email),
                is_admin=admin is not None,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            effects = CommentEffects(
                is_new_guest_thread=not saved.is_reply and admin is None,
                is_reply=saved.is_reply,
            )
            logfire.info(
                "Comment created",
                comment_id=saved.id,
                post_id=saved.post_id,
                status=saved.status.value,
                is_reply=saved.is_reply,
            )
            return saved, effects

    async def page_tree_views(
        self, post_id: PostId, page_request: PageRequest
    ) -> CommentTreePage[CommentNode]:
        """Get one page of a post's published comment threads.

        All published comments of the post are assembled into reply trees,
        then the page window is taken over the top-level threads.

        Args:
            post_id: Post ID
            page_request: Page window and sibling sort direction

        Returns:
            Page of top-level comment nodes with nested replies
        """
        with logfire.span(
            "comment_service.page_tree_views",
            post_id=post_id,
            page_number=page_request.page_number,
            page_size=page_request.page_size,
        ):
            comments = await self.comment_repository.find_by_post(
                post_id, status=CommentStatus.PUBLISHED
            )

            top_level = build_forest(
                comments,
                order=CommentOrder(direction=page_request.direction),
                reply_template=self.settings.reply_template,
                strict=self.settings.strict_tree,
            )

            return slice_top_level(
                top_level,
                page_number=page_request.page_number,
                page_size=page_request.page_size,
                total_elements=len(comments),
            )

    async def page_with_parent_views(
        self, post_id: PostId, page_request: PageRequest
    ) -> Page[CommentWithParent]:
        """Get one flat page of a post's published comments with their parents.

        Args:
            post_id: Post ID
            page_request: Page window and sort direction

        Returns:
            Page of comments, each carrying the comment it replies to
        """
        with logfire.span(
            "comment_service.page_with_parent_views",
            post_id=post_id,
            page_number=page_request.page_number,
            page_size=page_request.page_size,
        ):
            page = await self.comment_repository.find_page_by_post(
                post_id, CommentStatus.PUBLISHED, page_request
            )

            async def resolve_parents(parent_ids):
                parents = await self.comment_repository.find_all_by_ids(parent_ids)
                return {parent.id: parent for parent in parents}

            return await slice_flat_with_parents(page, resolve_parents)

    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> tuple[Comment, CommentEffects]:
        """Move a comment to another moderation status.

        Args:
            comment_id: Comment ID
            status: New status

        Returns:
            Updated comment and the notifications it calls for

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span(
            "comment_service.update_status",
            comment_id=comment_id,
            status=status.value,
        ):
            updated = await self.comment_repository.update_status(comment_id, status)
            if updated is None:
                logfire.warn("Comment not found for status update", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment status updated", comment_id=comment_id, status=status.value
            )
            return updated, CommentEffects(is_passed=status is CommentStatus.PUBLISHED)

    async def delete_by_id(self, comment_id: CommentId) -> Comment:
        """Delete a comment.

        Replies of the deleted comment are kept; they no longer appear in
        reply trees since their parent is gone.

        Args:
            comment_id: Comment ID

        Returns:
            The deleted comment

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span("comment_service.delete_by_id", comment_id=comment_id):
            comment = await self.get_by_id(comment_id)
            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=comment_id)
            return comment

    async def _with_posts(self, page: Page[Comment]) -> Page[CommentWithPost]:
        """Attach post summaries to a page of comments with one post lookup."""
        if not page.content:
            return page.map(self._to_admin_view)

        post_ids = {comment.post_id for comment in page.content}
        posts = await self.post_repository.find_all_by_ids(post_ids)
        post_map = {post.id: PostMinimal.from_domain(post) for post in posts}

        return page.map(
            lambda comment: self._to_admin_view(comment, post_map.get(comment.post_id))
        )

    @staticmethod
    def _to_admin_view(
        comment: Comment, post: PostMinimal | None = None
    ) -> CommentWithPost:
        return CommentWithPost.from_domain(
            comment,
            email=comment.email,
            ip_address=comment.ip_address,
            user_agent=comment.user_agent,
            post=post,
        )
