"""Count comments use case."""

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import CommentService
from commentary.domain.value import PostId


class CountCommentsRequest(BaseModel):
    """Count comments request."""

    post_ids: list[int]


class CountCommentsResponse(BaseModel):
    """Comment count per requested post (0 for posts without comments)."""

    counts: dict[int, int]


class CountCommentsUseCase(BaseUseCase):
    """Use case for showing comment counts next to post listings."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: CountCommentsRequest) -> CountCommentsResponse:
        post_ids = [PostId(post_id) for post_id in request.post_ids]
        counts = await self.comment_service.count_by_post_ids(post_ids)
        return CountCommentsResponse(
            counts={post_id: counts.get(post_id, 0) for post_id in post_ids}
        )
