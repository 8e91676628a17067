"""Domain value objects for commentary.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import Field, field_validator

from commentary.domain.value.common import ValueObject


class CommentStatus(str, Enum):
    """Moderation status of a comment."""

    PUBLISHED = "published"
    AUDITING = "auditing"
    RECYCLE = "recycle"


class SortDirection(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"

    @property
    def is_ascending(self) -> bool:
        return self is SortDirection.ASC


class CommentSortField(str, Enum):
    """Comment attribute siblings can be ordered by."""

    CREATED_AT = "created_at"
    ID = "id"


class CommentOrder(ValueObject):
    """Sibling order used when building comment trees.

    Defaults to newest first.
    """

    field: CommentSortField = CommentSortField.CREATED_AT
    direction: SortDirection = SortDirection.DESC


class CommentQuery(ValueObject):
    """Filter for the admin comment listing."""

    status: CommentStatus | None = None
    keyword: str | None = None

    @field_validator("keyword")
    @classmethod
    def strip_keyword(cls, v: str | None) -> str | None:
        """Blank keywords mean no keyword filter."""
        if v is None:
            return None
        v = v.strip()
        return v or None


class PageRequest(ValueObject):
    """Requested page window.

    Page numbers are zero-based.
    """

    page_number: int = Field(default=0, ge=0)
    page_size: int = Field(default=10, gt=0)
    direction: SortDirection = SortDirection.DESC

    @property
    def offset(self) -> int:
        return self.page_number * self.page_size


class CommentEffects(ValueObject):
    """Notification-worthy consequences of a comment write.

    The domain only reports what happened; callers decide how to notify.
    """

    is_new_guest_thread: bool = False  # Guest started a new top-level thread
    is_reply: bool = False  # Comment replies to another comment
    is_passed: bool = False  # Comment moved to published

    @property
    def is_empty(self) -> bool:
        return not (self.is_new_guest_thread or self.is_reply or self.is_passed)
