"""Public comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Request, status
from pydantic import BaseModel, Field

from commentary.application.usecase.comment import (
    CountCommentsRequest,
    CountCommentsResponse,
    CountCommentsUseCase,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentListRequest,
    GetCommentListResponse,
    GetCommentListUseCase,
    GetCommentTreeRequest,
    GetCommentTreeResponse,
    GetCommentTreeUseCase,
)
from commentary.domain.error import (
    MalformedTreeError,
    NotFoundError,
    ValidationError,
)
from commentary.domain.value import SortDirection

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    author: str = Field(min_length=1, max_length=50)
    email: str = Field(min_length=1, max_length=255)
    author_url: str | None = Field(default=None, max_length=127)
    content: str = Field(min_length=1, max_length=1023)
    parent_id: int = Field(default=0, ge=0)  # 0 for top-level


@router.get("/{post_id}/comments/tree", response_model=GetCommentTreeResponse)
async def get_comment_tree(
    post_id: int,
    get_comment_tree_use_case: FromDishka[GetCommentTreeUseCase],
    page: int = Query(default=0, ge=0),
    size: int | None = Query(default=None, gt=0, le=100),
    direction: SortDirection | None = None,
) -> GetCommentTreeResponse:
    """Get a page of a post's published comments as reply trees.

    Pagination applies to top-level threads; each thread comes with all its
    replies.

    Args:
        post_id: Post ID
        get_comment_tree_use_case: Get comment tree use case from DI
        page: Zero-based page number
        size: Threads per page (configured default when omitted)
        direction: Sibling order by creation time

    Returns:
        Page of comment threads

    Raises:
        HTTPException: If strict tree checking finds published replies whose
            parent is not published
    """
    request = GetCommentTreeRequest(
        post_id=post_id, page=page, size=size, direction=direction
    )
    try:
        return await get_comment_tree_use_case.execute(request)
    except MalformedTreeError as e:
        logfire.error(
            "Comment tree unavailable - malformed",
            post_id=post_id,
            unreachable_ids=e.unreachable_ids,
        )
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )


@router.get("/{post_id}/comments/list", response_model=GetCommentListResponse)
async def get_comment_list(
    post_id: int,
    get_comment_list_use_case: FromDishka[GetCommentListUseCase],
    page: int = Query(default=0, ge=0),
    size: int | None = Query(default=None, gt=0, le=100),
    direction: SortDirection | None = None,
) -> GetCommentListResponse:
    """Get a flat page of a post's published comments.

    Replies carry the comment they answer.

    Args:
        post_id: Post ID
        get_comment_list_use_case: Get comment list use case from DI
        page: Zero-based page number
        size: Comments per page (configured default when omitted)
        direction: Order by creation time

    Returns:
        Page of comments with parents
    """
    request = GetCommentListRequest(
        post_id=post_id, page=page, size=size, direction=direction
    )
    return await get_comment_list_use_case.execute(request)


@router.get("/comment-counts", response_model=CountCommentsResponse)
async def count_comments(
    count_comments_use_case: FromDishka[CountCommentsUseCase],
    post_ids: list[int] = Query(default=[]),
) -> CountCommentsResponse:
    """Get comment counts for several posts."""
    return await count_comments_use_case.execute(
        CountCommentsRequest(post_ids=post_ids)
    )


@router.post(
    "/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: int,
    payload: CreateCommentAPIRequest,
    request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Comment on a post or reply to a comment as a guest.

    Args:
        post_id: Post ID
        payload: Comment data
        request: Incoming request (client address and user agent)
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment details

    Raises:
        HTTPException: If post or parent not found, or validation fails
    """
    try:
        use_case_request = CreateCommentRequest(
            post_id=post_id,
            author=payload.author,
            email=payload.email,
            author_url=payload.author_url,
            content=payload.content,
            parent_id=payload.parent_id,
            ip_address=request.client.host if request.client else None,
            user_agent=request.headers.get("user-agent"),
        )
        return await create_comment_use_case.execute(use_case_request)
    except NotFoundError as e:
        logfire.warn("Comment creation failed - not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except (ValidationError, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
