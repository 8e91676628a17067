"""PostgreSQL implementation of Post repository."""

from typing import Collection, List, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from commentary.domain.model import Post
from commentary.domain.repository import PostRepository
from commentary.domain.value import PostId
from commentary.persistence.mappers import post_to_dict, row_to_post
from commentary.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_all_by_ids(self, post_ids: Collection[PostId]) -> List[Post]:
        """Find all posts whose id is in the given collection."""
        if not post_ids:
            return []
        stmt = select(posts_table).where(posts_table.c.id.in_(list(post_ids)))
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def exists_by_id(self, post_id: PostId) -> bool:
        """Check whether a post exists."""
        stmt = select(posts_table.c.id).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        post_dict = post_to_dict(post)
        stmt = (
            insert(posts_table)
            .values(**post_dict)
            .on_conflict_do_update(
                index_elements=[posts_table.c.id],
                set_={k: v for k, v in post_dict.items() if k != "id"},
            )
            .returning(posts_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_post(row._asdict())
