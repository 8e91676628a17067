"""In-memory post repository for testing."""

from typing import Collection, Optional

from commentary.domain.model.post import Post
from commentary.domain.repository.post import PostRepository
from commentary.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all_by_ids(self, post_ids: Collection[PostId]) -> list[Post]:
        """Find all posts whose id is in the given collection."""
        return [self._posts[pid] for pid in post_ids if pid in self._posts]

    async def exists_by_id(self, post_id: PostId) -> bool:
        """Check whether a post exists."""
        return post_id in self._posts

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post
