"""PostgreSQL repository implementations."""

from commentary.persistence.repository.comment import PostgresCommentRepository
from commentary.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresPostRepository",
]
