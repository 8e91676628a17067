"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Collection, List, Optional

from commentary.domain.model.post import Post
from commentary.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post entity.

    The comment subsystem only reads posts; ``save`` exists for seeding.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        pass

    @abstractmethod
    async def find_all_by_ids(self, post_ids: Collection[PostId]) -> List[Post]:
        """Find all posts whose id is in the given collection."""
        pass

    @abstractmethod
    async def exists_by_id(self, post_id: PostId) -> bool:
        """Check whether a post exists."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        pass
