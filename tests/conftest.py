"""Test configuration and fixtures."""

from datetime import datetime, timedelta

from commentary.domain.model import Comment, Post
from commentary.domain.value import CommentId, CommentStatus, PostId

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_comment(
    comment_id: int | None,
    parent_id: int = 0,
    minute: int = 0,
    post_id: int = 1,
    author: str | None = None,
    content: str | None = None,
    status: CommentStatus = CommentStatus.PUBLISHED,
    email: str = "guest@example.com",
) -> Comment:
    """Helper to build a comment record for tests.

    Args:
        comment_id: Comment ID (None for unsaved comments)
        parent_id: Parent comment ID (0 for top-level)
        minute: Creation time as minutes after BASE_TIME
        post_id: Post the comment belongs to
        author: Author name (defaults to "user<id>")
        content: Comment text (defaults to "comment <id>")
        status: Moderation status
        email: Author email

    Returns:
        Comment entity
    """
    created_at = BASE_TIME + timedelta(minutes=minute)
    return Comment(
        id=CommentId(comment_id) if comment_id is not None else None,
        post_id=PostId(post_id),
        parent_id=CommentId(parent_id),
        author=author or f"user{comment_id}",
        email=email,
        content=content or f"comment {comment_id}",
        status=status,
        created_at=created_at,
        updated_at=created_at,
    )


def make_post(post_id: int = 1, title: str = "Hello world") -> Post:
    """Helper to build a post for tests."""
    return Post(
        id=PostId(post_id),
        title=title,
        url=f"/posts/{post_id}",
        created_at=BASE_TIME,
    )
