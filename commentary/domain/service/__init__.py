"""Domain services."""

from .base import Service
from .comment_service import CommentDraft, CommentService
from .comment_tree import (
    build_forest,
    render_content,
    slice_flat_with_parents,
    slice_top_level,
)

__all__ = [
    "CommentDraft",
    "CommentService",
    "Service",
    "build_forest",
    "render_content",
    "slice_flat_with_parents",
    "slice_top_level",
]
