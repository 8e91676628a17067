"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from commentary.domain.model import Comment, Post
from commentary.domain.value import CommentId, CommentStatus, PostId


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        post_id=PostId(row["post_id"]),
        parent_id=CommentId(row.get("parent_id") or 0),
        author=row["author"],
        email=row["email"],
        author_url=row.get("author_url"),
        content=row["content"],
        status=CommentStatus(row["status"]),
        ip_address=row.get("ip_address"),
        user_agent=row.get("user_agent"),
        gravatar_md5=row.get("gravatar_md5"),
        is_admin=row["is_admin"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    The id is left out for new comments so the database assigns one.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = comment.model_dump(mode="python", exclude_none=False)
    data["status"] = comment.status.value
    if comment.id is None:
        data.pop("id")
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        url=row.get("url"),
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()
