"""Repository interfaces for the commentary domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from commentary.domain.repository.comment import CommentRepository
from commentary.domain.repository.post import PostRepository

__all__ = [
    "CommentRepository",
    "PostRepository",
]
