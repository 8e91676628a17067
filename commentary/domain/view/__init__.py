"""View objects built from domain entities."""

from commentary.domain.view.comment import (
    CommentNode,
    CommentView,
    CommentWithParent,
    CommentWithPost,
    PostMinimal,
)

__all__ = [
    "CommentNode",
    "CommentView",
    "CommentWithParent",
    "CommentWithPost",
    "PostMinimal",
]
