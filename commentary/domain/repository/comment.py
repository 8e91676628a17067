"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Collection, Dict, List, Optional

from commentary.domain.model.comment import Comment
from commentary.domain.value import (
    CommentId,
    CommentQuery,
    CommentStatus,
    Page,
    PageRequest,
    PostId,
)


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all_by_ids(self, comment_ids: Collection[CommentId]) -> List[Comment]:
        """Find all comments whose id is in the given collection.

        Unknown ids are skipped.

        Args:
            comment_ids: Comment ids to look up

        Returns:
            Found comments, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_post(
        self,
        post_id: PostId,
        status: Optional[CommentStatus] = None,
    ) -> List[Comment]:
        """Find all comments of a post.

        Args:
            post_id: The post ID
            status: Only return comments in this status (None for all)

        Returns:
            Comments of the post, in no particular order
        """
        pass

    @abstractmethod
    async def find_page_by_post(
        self,
        post_id: PostId,
        status: CommentStatus,
        page_request: PageRequest,
    ) -> Page[Comment]:
        """Find one page of a post's comments ordered by creation time.

        Args:
            post_id: The post ID
            status: Comment status to filter on
            page_request: Page window and sort direction

        Returns:
            Page of comments
        """
        pass

    @abstractmethod
    async def find_page(
        self,
        page_request: PageRequest,
        query: Optional[CommentQuery] = None,
    ) -> Page[Comment]:
        """Find one page of comments across all posts ordered by creation time.

        The keyword filter matches author, content or email, ignoring case.

        Args:
            page_request: Page window and sort direction
            query: Optional status/keyword filter

        Returns:
            Page of comments
        """
        pass

    @abstractmethod
    async def count_by_post_ids(
        self, post_ids: Collection[PostId]
    ) -> Dict[PostId, int]:
        """Count comments per post.

        Posts without comments are absent from the result.

        Args:
            post_ids: Posts to count comments for

        Returns:
            Mapping of post id to comment count
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Comments without an id are inserted and get an id assigned.

        Args:
            comment: The comment to save

        Returns:
            The saved comment (with id populated)
        """
        pass

    @abstractmethod
    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Change the status of a comment.

        Args:
            comment_id: Comment ID
            status: New status

        Returns:
            Updated comment, None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete).

        Args:
            comment_id: The comment ID to delete
        """
        pass
