"""In-memory comment repository for testing."""

from collections import Counter
from datetime import datetime
from typing import Collection, Iterable, Optional

from commentary.domain.model.comment import Comment
from commentary.domain.repository.comment import CommentRepository
from commentary.domain.value import (
    CommentId,
    CommentQuery,
    CommentStatus,
    Page,
    PageRequest,
    PostId,
)


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    @staticmethod
    def _paginate(
        comments: Iterable[Comment], page_request: PageRequest
    ) -> Page[Comment]:
        """Order by creation time (id as tiebreaker) and cut one page."""
        ordered = sorted(
            comments,
            key=lambda c: (c.created_at, c.id),
            reverse=not page_request.direction.is_ascending,
        )
        start = page_request.offset
        return Page(
            content=ordered[start : start + page_request.page_size],
            page_number=page_request.page_number,
            page_size=page_request.page_size,
            total_elements=len(ordered),
        )

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_all_by_ids(self, comment_ids: Collection[CommentId]) -> list[Comment]:
        """Find all comments whose id is in the given collection."""
        return [self._comments[cid] for cid in comment_ids if cid in self._comments]

    async def find_by_post(
        self,
        post_id: PostId,
        status: Optional[CommentStatus] = None,
    ) -> list[Comment]:
        """Find all comments of a post, in insertion order."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]

        # Filter status
        if status is not None:
            comments = [c for c in comments if c.status == status]

        return comments

    async def find_page_by_post(
        self,
        post_id: PostId,
        status: CommentStatus,
        page_request: PageRequest,
    ) -> Page[Comment]:
        """Find one page of a post's comments ordered by creation time."""
        comments = await self.find_by_post(post_id, status=status)
        return self._paginate(comments, page_request)

    async def find_page(
        self,
        page_request: PageRequest,
        query: Optional[CommentQuery] = None,
    ) -> Page[Comment]:
        """Find one page of comments across all posts."""
        comments = list(self._comments.values())

        if query is not None and query.status is not None:
            comments = [c for c in comments if c.status == query.status]

        if query is not None and query.keyword:
            keyword = query.keyword.lower()
            comments = [
                c
                for c in comments
                if keyword in c.author.lower()
                or keyword in c.content.lower()
                or keyword in c.email.lower()
            ]

        return self._paginate(comments, page_request)

    async def count_by_post_ids(
        self, post_ids: Collection[PostId]
    ) -> dict[PostId, int]:
        """Count comments per post."""
        wanted = set(post_ids)
        return dict(
            Counter(c.post_id for c in self._comments.values() if c.post_id in wanted)
        )

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment, assigning an id to new ones."""
        if comment.id is None:
            # 0 is the virtual root, ids start at 1
            next_id = max(self._comments, default=0) + 1
            comment = comment.model_copy(update={"id": CommentId(next_id)})
        self._comments[comment.id] = comment
        return comment

    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Change the status of a comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        # Create updated comment (since comments are immutable)
        updated = comment.model_copy(
            update={"status": status, "updated_at": datetime.now()}
        )
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        self._comments.pop(comment_id, None)
