"""Comment tree construction and pagination.

Everything here works on comments the caller already loaded and keeps no
state between calls: every call builds its own index, nodes and parent
cache.

Two presentation modes are supported:

- Tree mode: ``build_forest`` nests every comment under its parent and
  ``slice_top_level`` pages over the top-level threads.
- Flat mode: ``slice_flat_with_parents`` takes one page of comments as
  stored and attaches the comment each one replies to.
"""

from collections import defaultdict, deque
from typing import Awaitable, Callable, Iterable, Mapping, Sequence, Set

import logfire

from commentary.domain.error import MalformedTreeError
from commentary.domain.model import Comment
from commentary.domain.value import (
    ROOT_COMMENT_ID,
    CommentId,
    CommentOrder,
    CommentSortField,
    Page,
    CommentTreePage,
)
from commentary.domain.view import CommentNode, CommentWithParent

DEFAULT_REPLY_TEMPLATE = "replying to {parent_author}: {content}"

ParentResolver = Callable[[Set[CommentId]], Awaitable[Mapping[CommentId, Comment]]]


def render_content(
    comment: Comment,
    parent: CommentNode | None,
    reply_template: str = DEFAULT_REPLY_TEMPLATE,
) -> str:
    """Render the displayed content of a comment.

    Replies mention their direct parent; top-level comments are unchanged.

    Args:
        comment: Comment to render
        parent: Node of the direct parent (None for top-level comments)
        reply_template: Format string with {parent_id}, {parent_author}
            and {content} placeholders

    Returns:
        Rendered content
    """
    if parent is None or not comment.is_reply:
        return comment.content
    return reply_template.format(
        parent_id=parent.id,
        parent_author=parent.author,
        content=comment.content,
    )


def _sort_key(order: CommentOrder) -> Callable[[CommentNode], object]:
    if order.field is CommentSortField.ID:
        return lambda node: node.id
    return lambda node: node.created_at


def build_forest(
    comments: Iterable[Comment],
    order: CommentOrder = CommentOrder(),
    reply_template: str = DEFAULT_REPLY_TEMPLATE,
    strict: bool = False,
) -> list[CommentNode]:
    """Build the reply forest of a set of comments.

    Comments are grouped by parent id once, then attached level by level
    starting at the virtual root (id 0). Each bucket is popped when its
    parent is attached, so a comment lands in exactly one children list.
    Siblings are sorted by ``order``; the sort is stable, comments with
    equal keys keep their input order in either direction.

    Comments that cannot be reached from the root (missing parent, reply
    cycles) are left out and logged. In strict mode they raise instead.

    Args:
        comments: Flat comments of one post, in any order
        order: Sibling sort field and direction
        reply_template: Format string for reply content
        strict: Raise MalformedTreeError on unreachable comments

    Returns:
        Top-level nodes with their descendants populated

    Raises:
        MalformedTreeError: If strict and some comments are unreachable
    """
    children_by_parent: dict[CommentId, list[Comment]] = defaultdict(list)
    total = 0
    for comment in comments:
        children_by_parent[comment.parent_id].append(comment)
        total += 1

    key = _sort_key(order)
    reverse = not order.direction.is_ascending

    def attach(parent: CommentNode | None, parent_id: CommentId) -> list[CommentNode]:
        batch = children_by_parent.pop(parent_id, [])
        nodes = [
            CommentNode.from_domain(
                comment,
                rendered_content=render_content(comment, parent, reply_template),
            )
            for comment in batch
        ]
        nodes.sort(key=key, reverse=reverse)
        return nodes

    top_level = attach(None, ROOT_COMMENT_ID)

    # Breadth-first so deep reply chains don't hit the recursion limit
    pending = deque(top_level)
    while pending:
        node = pending.popleft()
        node.children = attach(node, node.id)
        pending.extend(node.children)

    unreachable = [
        comment.id for bucket in children_by_parent.values() for comment in bucket
    ]
    if unreachable:
        if strict:
            logfire.error(
                "Comment tree is malformed",
                unreachable_count=len(unreachable),
                unreachable_ids=unreachable,
            )
            raise MalformedTreeError(unreachable)
        logfire.warn(
            "Dropped comments unreachable from root",
            unreachable_count=len(unreachable),
            unreachable_ids=unreachable,
        )

    logfire.debug(
        "Built comment forest",
        total=total,
        top_level=len(top_level),
        dropped=len(unreachable),
    )
    return top_level


def slice_top_level(
    top_level: Sequence[CommentNode],
    page_number: int,
    page_size: int,
    total_elements: int,
) -> CommentTreePage[CommentNode]:
    """Cut one page out of the top-level threads.

    Out-of-range windows give an empty page rather than an error. Page
    number and size are expected to be validated by the caller.

    Args:
        top_level: Ordered top-level nodes (from build_forest)
        page_number: Zero-based page number
        page_size: Threads per page
        total_elements: Number of comments in the whole tree

    Returns:
        Tree page with both the comment and the thread totals
    """
    start = page_number * page_size
    if start < 0 or start >= len(top_level):
        content: list[CommentNode] = []
    else:
        end = min(start + page_size, len(top_level))
        logfire.debug(
            "Slicing top-level comments",
            top_level=len(top_level),
            start=start,
            end=end,
        )
        content = list(top_level[start:end])

    return CommentTreePage(
        content=content,
        page_number=page_number,
        page_size=page_size,
        total_elements=total_elements,
        total_top_level_elements=len(top_level),
    )


async def slice_flat_with_parents(
    page: Page[Comment],
    resolve_parents: ParentResolver,
) -> Page[CommentWithParent]:
    """Attach the parent comment to every comment of a stored page.

    Parents are looked up with a single batched call. Each parent view is
    built once and every child gets its own copy of it.

    Args:
        page: One page of comments as returned by the repository
        resolve_parents: Batched lookup from parent ids to comments

    Returns:
        Page with the same metadata, parents attached where found
    """
    parent_ids = {
        comment.parent_id for comment in page.content if comment.is_reply
    }
    parents = await resolve_parents(parent_ids) if parent_ids else {}

    parent_views: dict[CommentId, CommentWithParent] = {}

    def with_parent(comment: Comment) -> CommentWithParent:
        view = CommentWithParent.from_domain(comment)

        parent_view = parent_views.get(comment.parent_id)
        if parent_view is None:
            parent = parents.get(comment.parent_id)
            if parent is not None:
                parent_view = CommentWithParent.from_domain(parent)
                parent_views[comment.parent_id] = parent_view

        view.parent = parent_view.model_copy(deep=True) if parent_view else None
        return view

    return page.map(with_parent)
