"""Comment entity.

Comments belong to a post and may reply to another comment of the same post.
Threading is stored as a plain parent pointer; trees are assembled in memory.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from commentary.domain.model.common import DomainModel
from commentary.domain.value import ROOT_COMMENT_ID, CommentId, CommentStatus, PostId


class Comment(DomainModel):
    """Comment entity.

    - id: Assigned by the repository on first save (None before that)
    - parent_id: Direct parent comment (0 for top-level)
    - status: Moderation state, only published comments are shown publicly
    """

    id: Optional[CommentId] = None
    post_id: PostId
    parent_id: CommentId = Field(default=ROOT_COMMENT_ID, ge=0)
    author: str = Field(min_length=1, max_length=50)
    email: str = Field(min_length=1, max_length=255)
    author_url: Optional[str] = Field(default=None, max_length=127)
    content: str = Field(min_length=1, max_length=1023)
    status: CommentStatus = CommentStatus.AUDITING
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    gravatar_md5: Optional[str] = None
    is_admin: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_reply(self) -> bool:
        """Whether this comment answers another comment."""
        return self.parent_id != ROOT_COMMENT_ID
