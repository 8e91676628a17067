"""Comment moderation routes.

Access control for these routes belongs to the hosting deployment.
"""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from commentary.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    ListLatestCommentsRequest,
    ListLatestCommentsResponse,
    ListLatestCommentsUseCase,
    ListPostCommentsRequest,
    ListPostCommentsResponse,
    ListPostCommentsUseCase,
    UpdateCommentStatusRequest,
    UpdateCommentStatusResponse,
    UpdateCommentStatusUseCase,
)
from commentary.domain.error import NotFoundError, ValidationError
from commentary.domain.value import CommentStatus

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class AdminCommentAPIRequest(BaseModel):
    """API request for a comment written by the blog owner."""

    post_id: int
    content: str = Field(min_length=1, max_length=1023)
    parent_id: int = Field(default=0, ge=0)


@router.get("/comments", response_model=ListCommentsResponse)
async def list_comments(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    comment_status: CommentStatus | None = Query(default=None, alias="status"),
    keyword: str | None = None,
    page: int = Query(default=0, ge=0),
    size: int | None = Query(default=None, gt=0, le=100),
) -> ListCommentsResponse:
    """List comments for moderation, newest first.

    Args:
        list_comments_use_case: List comments use case from DI
        comment_status: Only comments in this status
        keyword: Case-insensitive match on author, content or email
        page: Zero-based page number
        size: Comments per page

    Returns:
        Page of comments with their posts
    """
    request = ListCommentsRequest(
        status=comment_status, keyword=keyword, page=page, size=size
    )
    return await list_comments_use_case.execute(request)


@router.get("/comments/latest", response_model=ListLatestCommentsResponse)
async def list_latest_comments(
    list_latest_comments_use_case: FromDishka[ListLatestCommentsUseCase],
    top: int = Query(default=10, gt=0, le=100),
) -> ListLatestCommentsResponse:
    """Get the newest comments across all posts."""
    return await list_latest_comments_use_case.execute(
        ListLatestCommentsRequest(top=top)
    )


@router.get("/posts/{post_id}/comments", response_model=ListPostCommentsResponse)
async def list_post_comments(
    post_id: int,
    list_post_comments_use_case: FromDishka[ListPostCommentsUseCase],
) -> ListPostCommentsResponse:
    """Get every comment of a post, whatever its status."""
    return await list_post_comments_use_case.execute(
        ListPostCommentsRequest(post_id=post_id)
    )


@router.post(
    "/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_admin_comment(
    payload: AdminCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Comment or reply as the blog owner.

    The comment is published immediately under the configured admin identity.

    Raises:
        HTTPException: If post or parent not found, or validation fails
    """
    try:
        request = CreateCommentRequest(
            post_id=payload.post_id,
            content=payload.content,
            parent_id=payload.parent_id,
            as_admin=True,
        )
        return await create_comment_use_case.execute(request)
    except NotFoundError as e:
        logfire.warn("Admin comment creation failed - not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except (ValidationError, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.put(
    "/comments/{comment_id}/status/{comment_status}",
    response_model=UpdateCommentStatusResponse,
)
async def update_comment_status(
    comment_id: int,
    comment_status: CommentStatus,
    update_comment_status_use_case: FromDishka[UpdateCommentStatusUseCase],
) -> UpdateCommentStatusResponse:
    """Move a comment to another moderation status.

    Args:
        comment_id: Comment ID
        comment_status: Target status
        update_comment_status_use_case: Update status use case from DI

    Returns:
        New status and dispatched notifications

    Raises:
        HTTPException: If comment not found
    """
    try:
        request = UpdateCommentStatusRequest(
            comment_id=comment_id, status=comment_status
        )
        return await update_comment_status_use_case.execute(request)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: int,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> DeleteCommentResponse:
    """Delete a comment permanently.

    Raises:
        HTTPException: If comment not found
    """
    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
