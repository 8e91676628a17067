"""Page envelopes returned by listing operations."""

from typing import Callable, Generic, TypeVar

from pydantic import Field

from commentary.domain.value.common import ValueObject

T = TypeVar("T")
U = TypeVar("U")


class Page(ValueObject, Generic[T]):
    """One page window over an ordered population.

    Attributes:
        content: Items in the window (at most page_size)
        page_number: Zero-based page number
        page_size: Requested page size
        total_elements: Size of the whole population
    """

    content: list[T] = Field(default_factory=list)
    page_number: int = 0
    page_size: int = 10
    total_elements: int = 0

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return -(-self.total_elements // self.page_size)

    @property
    def has_next(self) -> bool:
        return self.page_number + 1 < self.total_pages

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        """Convert every item, keeping the page metadata."""
        return Page(
            content=[fn(item) for item in self.content],
            page_number=self.page_number,
            page_size=self.page_size,
            total_elements=self.total_elements,
        )


class CommentTreePage(Page[T], Generic[T]):
    """Page over top-level threads.

    ``total_elements`` counts every comment in the tree while
    ``total_top_level_elements`` counts the threads that were paginated.
    """

    total_top_level_elements: int = 0

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return -(-self.total_top_level_elements // self.page_size)
