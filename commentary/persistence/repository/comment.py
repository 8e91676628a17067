"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import Collection, Dict, List, Optional

import logfire
from sqlalchemy import Select, asc, desc, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from commentary.domain.model import Comment
from commentary.domain.repository import CommentRepository
from commentary.domain.value import (
    CommentId,
    CommentQuery,
    CommentStatus,
    Page,
    PageRequest,
    PostId,
)
from commentary.persistence.mappers import comment_to_dict, row_to_comment
from commentary.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_page(self, stmt: Select, page_request: PageRequest) -> Page[Comment]:
        """Run a filtered select as one page ordered by creation time.

        Args:
            stmt: Select with filters applied, no ordering or limit
            page_request: Page window and sort direction

        Returns:
            Page of comments with the filtered total
        """
        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = (await self.session.execute(count_stmt)).scalar() or 0

        order = asc if page_request.direction.is_ascending else desc
        stmt = (
            stmt.order_by(order(comments_table.c.created_at), order(comments_table.c.id))
            .limit(page_request.page_size)
            .offset(page_request.offset)
        )
        result = await self.session.execute(stmt)

        return Page(
            content=[row_to_comment(row._asdict()) for row in result.fetchall()],
            page_number=page_request.page_number,
            page_size=page_request.page_size,
            total_elements=total,
        )

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_all_by_ids(self, comment_ids: Collection[CommentId]) -> List[Comment]:
        """Find all comments whose id is in the given collection."""
        if not comment_ids:
            return []
        stmt = select(comments_table).where(comments_table.c.id.in_(list(comment_ids)))
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_post(
        self,
        post_id: PostId,
        status: Optional[CommentStatus] = None,
    ) -> List[Comment]:
        """Find all comments of a post."""
        stmt = select(comments_table).where(comments_table.c.post_id == post_id)

        if status is not None:
            stmt = stmt.where(comments_table.c.status == status.value)

        # Insertion order keeps sibling ties stable in the tree builder
        stmt = stmt.order_by(comments_table.c.id)

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_page_by_post(
        self,
        post_id: PostId,
        status: CommentStatus,
        page_request: PageRequest,
    ) -> Page[Comment]:
        """Find one page of a post's comments ordered by creation time."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.status == status.value)
        )
        return await self._fetch_page(stmt, page_request)

    async def find_page(
        self,
        page_request: PageRequest,
        query: Optional[CommentQuery] = None,
    ) -> Page[Comment]:
        """Find one page of comments across all posts."""
        with logfire.span(
            "comment_repository.find_page",
            page_number=page_request.page_number,
            page_size=page_request.page_size,
        ):
            stmt = select(comments_table)

            if query is not None and query.status is not None:
                stmt = stmt.where(comments_table.c.status == query.status.value)

            if query is not None and query.keyword:
                like = f"%{query.keyword}%"
                stmt = stmt.where(
                    or_(
                        comments_table.c.author.ilike(like),
                        comments_table.c.content.ilike(like),
                        comments_table.c.email.ilike(like),
                    )
                )

            return await self._fetch_page(stmt, page_request)

    async def count_by_post_ids(
        self, post_ids: Collection[PostId]
    ) -> Dict[PostId, int]:
        """Count comments per post."""
        if not post_ids:
            return {}
        stmt = (
            select(comments_table.c.post_id, func.count().label("count"))
            .where(comments_table.c.post_id.in_(list(post_ids)))
            .group_by(comments_table.c.post_id)
        )
        result = await self.session.execute(stmt)
        return {PostId(row.post_id): row.count for row in result.fetchall()}

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)

        if comment.id is None:
            stmt = comments_table.insert().values(**comment_dict).returning(comments_table)
        else:
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
                .returning(comments_table)
            )

        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()

        if row is None:
            # Update of a comment that was never inserted
            stmt = comments_table.insert().values(**comment_dict).returning(comments_table)
            row = (await self.session.execute(stmt)).fetchone()
            await self.session.flush()

        return row_to_comment(row._asdict())

    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Change the status of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(status=status.value, updated_at=datetime.now())
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()
