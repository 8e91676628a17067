"""Post entity.

Only the post fields the comment subsystem needs: existence checks and the
minimal post summary shown next to comments in the admin area.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from commentary.domain.model.common import DomainModel
from commentary.domain.value import PostId


class Post(DomainModel):
    """Blog post that comments attach to."""

    id: PostId
    title: str = Field(min_length=1, max_length=100)
    url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
