"""Unit tests for comment tree construction and pagination."""

from collections import Counter

import pytest

from commentary.domain.error import MalformedTreeError
from commentary.domain.service import (
    build_forest,
    render_content,
    slice_flat_with_parents,
    slice_top_level,
)
from commentary.domain.value import (
    CommentId,
    CommentOrder,
    CommentSortField,
    Page,
    SortDirection,
)
from tests.conftest import make_comment

ASC = CommentOrder(direction=SortDirection.ASC)
DESC = CommentOrder(direction=SortDirection.DESC)


def all_ids(nodes):
    """Ids of every node in a forest, descendants included."""
    ids = []
    pending = list(nodes)
    while pending:
        node = pending.pop()
        ids.append(node.id)
        pending.extend(node.children)
    return ids


def sample_thread():
    """Two threads with nested replies, shuffled input order."""
    return [
        make_comment(5, parent_id=2, minute=5),
        make_comment(1, minute=1),
        make_comment(3, parent_id=1, minute=3),
        make_comment(2, minute=2),
        make_comment(6, parent_id=3, minute=6),
        make_comment(4, parent_id=1, minute=4),
    ]


class TestBuildForest:
    """Tests for build_forest."""

    def test_every_record_appears_exactly_once(self):
        """Forest ids equal input ids, no duplicates and nothing lost."""
        comments = sample_thread()

        forest = build_forest(comments)

        assert Counter(all_ids(forest)) == Counter(c.id for c in comments)
        assert len(all_ids(forest)) == len(comments)

    def test_children_count_sums_to_records(self):
        """Top-level plus all children lists account for every record."""
        comments = sample_thread()

        forest = build_forest(comments)

        children_total = 0
        pending = list(forest)
        while pending:
            node = pending.pop()
            children_total += len(node.children)
            pending.extend(node.children)
        assert children_total + len(forest) == len(comments)

    def test_children_attached_to_direct_parent(self):
        """Replies end up under their own parent, at any depth."""
        forest = build_forest(sample_thread(), order=ASC)

        first, second = forest
        assert first.id == 1
        assert [child.id for child in first.children] == [3, 4]
        assert [child.id for child in first.children[0].children] == [6]
        assert second.id == 2
        assert [child.id for child in second.children] == [5]

    def test_descending_order_is_newest_first(self):
        """Default order puts newer siblings first."""
        forest = build_forest(sample_thread())

        assert [node.id for node in forest] == [2, 1]
        assert [child.id for child in forest[1].children] == [4, 3]
        timestamps = [node.created_at for node in forest]
        assert timestamps == sorted(timestamps, reverse=True)

    def test_reversing_direction_reverses_siblings(self):
        """Ascending order is the exact reverse of descending for distinct keys."""
        comments = [make_comment(i, minute=i) for i in range(1, 6)]

        desc_ids = [node.id for node in build_forest(comments, order=DESC)]
        asc_ids = [node.id for node in build_forest(comments, order=ASC)]

        assert asc_ids == [1, 2, 3, 4, 5]
        assert desc_ids == list(reversed(asc_ids))

    @pytest.mark.parametrize("order", [ASC, DESC])
    def test_equal_keys_keep_input_order(self, order):
        """Siblings with the same timestamp stay in input order in both directions."""
        comments = [
            make_comment(7, minute=0),
            make_comment(3, minute=0),
            make_comment(9, minute=0),
            make_comment(10, parent_id=3, minute=1),
            make_comment(12, parent_id=3, minute=1),
            make_comment(11, parent_id=3, minute=1),
        ]

        forest = build_forest(comments, order=order)

        assert [node.id for node in forest] == [7, 3, 9]
        assert [child.id for child in forest[1].children] == [10, 12, 11]

    def test_sort_by_id(self):
        """Siblings can be ordered by id instead of creation time."""
        comments = [
            make_comment(3, minute=1),
            make_comment(1, minute=3),
            make_comment(2, minute=2),
        ]

        forest = build_forest(
            comments,
            order=CommentOrder(field=CommentSortField.ID, direction=SortDirection.ASC),
        )

        assert [node.id for node in forest] == [1, 2, 3]

    def test_reply_content_is_rendered_with_parent_author(self):
        """Replies mention their direct parent, top-level content is unchanged."""
        comments = [
            make_comment(10, author="alice", content="hi", minute=0),
            make_comment(11, parent_id=10, author="bob", content="hello", minute=1),
        ]

        forest = build_forest(comments)

        assert len(forest) == 1
        alice = forest[0]
        assert alice.id == 10
        assert alice.rendered_content == "hi"
        assert [child.id for child in alice.children] == [11]
        assert alice.children[0].rendered_content == "replying to alice: hello"
        # Stored content is left as is
        assert alice.children[0].content == "hello"

    def test_nested_reply_mentions_direct_parent_only(self):
        """A reply to a reply renders with its own parent's author."""
        comments = [
            make_comment(1, author="alice", content="hi", minute=0),
            make_comment(2, parent_id=1, author="bob", content="yo", minute=1),
            make_comment(3, parent_id=2, author="carol", content="hey", minute=2),
        ]

        forest = build_forest(comments)

        carol = forest[0].children[0].children[0]
        assert carol.rendered_content == "replying to bob: hey"

    def test_custom_reply_template(self):
        """Reply rendering follows the given template."""
        comments = [
            make_comment(1, author="alice", content="hi"),
            make_comment(2, parent_id=1, author="bob", content="yo", minute=1),
        ]

        forest = build_forest(
            comments, reply_template="@{parent_author} (#{parent_id}) {content}"
        )

        assert forest[0].children[0].rendered_content == "@alice (#1) yo"

    def test_two_cycle_is_omitted(self):
        """Comments replying to each other are unreachable from the root."""
        comments = [
            make_comment(1, parent_id=2),
            make_comment(2, parent_id=1),
        ]

        assert build_forest(comments) == []

    def test_orphans_and_cycles_dropped_alongside_valid_threads(self):
        """Unreachable comments are left out without affecting the rest."""
        comments = [
            make_comment(1, minute=1),
            make_comment(2, parent_id=3, minute=2),
            make_comment(3, parent_id=2, minute=3),
            make_comment(4, parent_id=99, minute=4),
            make_comment(5, parent_id=1, minute=5),
        ]

        forest = build_forest(comments)

        assert sorted(all_ids(forest)) == [1, 5]
        assert len(all_ids(forest)) == 2

    def test_strict_mode_raises_on_unreachable(self):
        """Strict mode reports unreachable comment ids."""
        comments = [
            make_comment(1, parent_id=2),
            make_comment(2, parent_id=1),
            make_comment(3),
        ]

        with pytest.raises(MalformedTreeError) as exc_info:
            build_forest(comments, strict=True)

        assert sorted(exc_info.value.unreachable_ids) == [1, 2]

    def test_empty_input(self):
        """No comments give an empty forest."""
        assert build_forest([]) == []

    def test_deep_reply_chain(self):
        """Long reply chains are built without recursion limits."""
        depth = 3000
        comments = [make_comment(1, minute=0)] + [
            make_comment(i, parent_id=i - 1, minute=i) for i in range(2, depth + 1)
        ]

        forest = build_forest(comments)

        assert len(all_ids(forest)) == depth

    def test_each_call_builds_fresh_nodes(self):
        """Two builds from the same input share no node objects."""
        comments = sample_thread()

        first = build_forest(comments)
        second = build_forest(comments)

        assert first[0] is not second[0]
        first[0].children.clear()
        assert len(second[0].children) == 1


class TestRenderContent:
    """Tests for render_content."""

    def test_top_level_comment_unchanged(self):
        comment = make_comment(1, content="hi")

        assert render_content(comment, None) == "hi"

    def test_reply_without_parent_node_unchanged(self):
        comment = make_comment(2, parent_id=1, content="hi")

        assert render_content(comment, None) == "hi"


class TestSliceTopLevel:
    """Tests for slice_top_level."""

    @staticmethod
    def make_nodes(count):
        comments = [make_comment(i, minute=i) for i in range(1, count + 1)]
        return build_forest(comments, order=ASC)

    def test_last_partial_page(self):
        """Page 2 of size 2 over 5 threads holds only the fifth."""
        nodes = self.make_nodes(5)

        page = slice_top_level(nodes, page_number=2, page_size=2, total_elements=5)

        assert [node.id for node in page.content] == [5]
        assert page.total_top_level_elements == 5
        assert page.total_elements == 5
        assert page.page_number == 2
        assert page.page_size == 2

    @pytest.mark.parametrize(
        "page_number,expected",
        [(0, [1, 2]), (1, [3, 4]), (2, [5]), (3, []), (50, [])],
    )
    def test_page_windows(self, page_number, expected):
        """Pages never exceed the size and are empty past the end."""
        nodes = self.make_nodes(5)

        page = slice_top_level(
            nodes, page_number=page_number, page_size=2, total_elements=5
        )

        assert [node.id for node in page.content] == expected
        assert len(page.content) <= 2
        assert page.total_top_level_elements == 5

    def test_total_elements_counts_replies(self):
        """Total elements is the caller's full count, pages count threads."""
        comments = [
            make_comment(1, minute=1),
            make_comment(2, parent_id=1, minute=2),
            make_comment(3, parent_id=1, minute=3),
            make_comment(4, minute=4),
        ]
        forest = build_forest(comments)

        page = slice_top_level(
            forest, page_number=0, page_size=1, total_elements=len(comments)
        )

        assert page.total_elements == 4
        assert page.total_top_level_elements == 2
        assert page.total_pages == 2
        assert page.has_next

    def test_empty_forest(self):
        page = slice_top_level([], page_number=0, page_size=10, total_elements=0)

        assert page.content == []
        assert page.total_top_level_elements == 0
        assert page.total_pages == 0


class TestSliceFlatWithParents:
    """Tests for slice_flat_with_parents."""

    @staticmethod
    def recording_resolver(known):
        calls = []

        async def resolve(parent_ids):
            calls.append(set(parent_ids))
            return {cid: known[cid] for cid in parent_ids if cid in known}

        return resolve, calls

    @pytest.mark.asyncio
    async def test_shared_parent_resolved_once(self):
        """Three replies to the same comment trigger a single lookup."""
        parent = make_comment(10, author="alice", content="hi")
        replies = [make_comment(i, parent_id=10, minute=i) for i in (11, 12, 13)]
        page = Page(content=replies, page_number=0, page_size=3, total_elements=3)
        resolve, calls = self.recording_resolver({CommentId(10): parent})

        result = await slice_flat_with_parents(page, resolve)

        assert calls == [{10}]
        assert [view.parent.id for view in result.content] == [10, 10, 10]
        assert all(view.parent.author == "alice" for view in result.content)

    @pytest.mark.asyncio
    async def test_distinct_parents_batched_in_one_call(self):
        """All distinct parent ids go in the same lookup."""
        known = {
            CommentId(1): make_comment(1),
            CommentId(2): make_comment(2),
        }
        content = [
            make_comment(3, parent_id=1),
            make_comment(4, parent_id=2),
            make_comment(5, parent_id=1),
            make_comment(6),
        ]
        page = Page(content=content, page_number=0, page_size=10, total_elements=4)
        resolve, calls = self.recording_resolver(known)

        result = await slice_flat_with_parents(page, resolve)

        assert calls == [{1, 2}]
        assert [view.parent.id if view.parent else None for view in result.content] == [
            1,
            2,
            1,
            None,
        ]

    @pytest.mark.asyncio
    async def test_parent_copies_are_independent(self):
        """Children sharing a parent each get their own copy of it."""
        parent = make_comment(10, content="original")
        replies = [make_comment(11, parent_id=10), make_comment(12, parent_id=10)]
        page = Page(content=replies, page_number=0, page_size=2, total_elements=2)
        resolve, _ = self.recording_resolver({CommentId(10): parent})

        result = await slice_flat_with_parents(page, resolve)

        first, second = result.content
        assert first.parent is not second.parent
        first.parent.content = "changed"
        assert second.parent.content == "original"

    @pytest.mark.asyncio
    async def test_missing_parent_yields_none(self):
        """Unknown parents are not an error."""
        page = Page(
            content=[make_comment(11, parent_id=10)],
            page_number=0,
            page_size=1,
            total_elements=1,
        )
        resolve, calls = self.recording_resolver({})

        result = await slice_flat_with_parents(page, resolve)

        assert calls == [{10}]
        assert result.content[0].parent is None

    @pytest.mark.asyncio
    async def test_no_lookup_without_replies(self):
        """Pages of top-level comments never call the resolver."""
        page = Page(
            content=[make_comment(1), make_comment(2)],
            page_number=0,
            page_size=2,
            total_elements=2,
        )
        resolve, calls = self.recording_resolver({})

        result = await slice_flat_with_parents(page, resolve)

        assert calls == []
        assert all(view.parent is None for view in result.content)

    @pytest.mark.asyncio
    async def test_page_metadata_is_kept(self):
        """The flat page keeps the stored page's window and totals."""
        page = Page(
            content=[make_comment(5)],
            page_number=3,
            page_size=1,
            total_elements=7,
        )
        resolve, _ = self.recording_resolver({})

        result = await slice_flat_with_parents(page, resolve)

        assert result.page_number == 3
        assert result.page_size == 1
        assert result.total_elements == 7
        assert [view.id for view in result.content] == [5]
