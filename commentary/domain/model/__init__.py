"""Domain model entities for commentary."""

from commentary.domain.model.comment import Comment
from commentary.domain.model.post import Post

__all__ = [
    "Comment",
    "Post",
]
