"""Domain value objects for commentary."""

from commentary.domain.value.identifiers import ROOT_COMMENT_ID, CommentId, PostId
from commentary.domain.value.page import CommentTreePage, Page
from commentary.domain.value.types import (
    CommentEffects,
    CommentOrder,
    CommentQuery,
    CommentSortField,
    CommentStatus,
    PageRequest,
    SortDirection,
)

__all__ = [
    # Identifiers
    "CommentId",
    "PostId",
    "ROOT_COMMENT_ID",
    # Types
    "CommentEffects",
    "CommentOrder",
    "CommentQuery",
    "CommentSortField",
    "CommentStatus",
    "PageRequest",
    "SortDirection",
    # Pages
    "Page",
    "CommentTreePage",
]
