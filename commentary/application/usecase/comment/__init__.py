"""Comment use cases."""

from .count_comments import (
    CountCommentsRequest,
    CountCommentsResponse,
    CountCommentsUseCase,
)
from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comment_list import (
    GetCommentListRequest,
    GetCommentListResponse,
    GetCommentListUseCase,
)
from .get_comment_tree import (
    GetCommentTreeRequest,
    GetCommentTreeResponse,
    GetCommentTreeUseCase,
)
from .list_comments import (
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from .list_latest_comments import (
    ListLatestCommentsRequest,
    ListLatestCommentsResponse,
    ListLatestCommentsUseCase,
)
from .list_post_comments import (
    ListPostCommentsRequest,
    ListPostCommentsResponse,
    ListPostCommentsUseCase,
)
from .update_comment_status import (
    UpdateCommentStatusRequest,
    UpdateCommentStatusResponse,
    UpdateCommentStatusUseCase,
)

__all__ = [
    "CountCommentsRequest",
    "CountCommentsResponse",
    "CountCommentsUseCase",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentListRequest",
    "GetCommentListResponse",
    "GetCommentListUseCase",
    "GetCommentTreeRequest",
    "GetCommentTreeResponse",
    "GetCommentTreeUseCase",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
    "ListLatestCommentsRequest",
    "ListLatestCommentsResponse",
    "ListLatestCommentsUseCase",
    "ListPostCommentsRequest",
    "ListPostCommentsResponse",
    "ListPostCommentsUseCase",
    "UpdateCommentStatusRequest",
    "UpdateCommentStatusResponse",
    "UpdateCommentStatusUseCase",
]
