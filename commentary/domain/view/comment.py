"""Comment view objects.

Views are what callers render: plain, mutable pydantic models built fresh
for every call from immutable Comment entities.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from commentary.domain.model import Comment, Post
from commentary.domain.value import CommentId, CommentStatus, PostId


class CommentView(BaseModel):
    """Public representation of a comment."""

    id: CommentId
    post_id: PostId
    parent_id: CommentId
    author: str
    author_url: str | None
    content: str
    status: CommentStatus
    gravatar_md5: str | None
    is_admin: bool
    created_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment, **extra):
        """Build a view from a persisted comment.

        Args:
            comment: Comment entity (must have an id)
            **extra: Additional fields of the concrete view class

        Returns:
            View instance
        """
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            parent_id=comment.parent_id,
            author=comment.author,
            author_url=comment.author_url,
            content=comment.content,
            status=comment.status,
            gravatar_md5=comment.gravatar_md5,
            is_admin=comment.is_admin,
            created_at=comment.created_at,
            **extra,
        )


class CommentNode(CommentView):
    """Comment inside a reply tree.

    ``rendered_content`` equals ``content`` for top-level comments and embeds
    the direct parent's author for replies.
    """

    rendered_content: str
    children: list["CommentNode"] = Field(default_factory=list)


class CommentWithParent(CommentView):
    """Comment in a flat listing, carrying the comment it replies to."""

    parent: Optional["CommentWithParent"] = None


class PostMinimal(BaseModel):
    """Post summary shown next to a comment."""

    id: PostId
    title: str
    url: str | None
    created_at: datetime

    @classmethod
    def from_domain(cls, post: Post) -> "PostMinimal":
        return cls(
            id=post.id,
            title=post.title,
            url=post.url,
            created_at=post.created_at,
        )


class CommentWithPost(CommentView):
    """Admin representation of a comment with its post."""

    email: str
    ip_address: str | None
    user_agent: str | None
    post: PostMinimal | None = None
