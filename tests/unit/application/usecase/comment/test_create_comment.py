"""Unit tests for CreateCommentUseCase."""

import pytest

from commentary.application.notifier import CommentEvent, CommentNotifier
from commentary.application.usecase.comment.create_comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from commentary.config import AdminSettings
from commentary.domain.error import NotFoundError
from commentary.domain.repository import CommentRepository, PostRepository
from commentary.domain.value import CommentStatus
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_guest_comment_notifies_new_thread(self, unit_env):
        """A top-level guest comment sends a new-comment notification."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        notifier = await unit_env.get(CommentNotifier)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post(1))

        request = CreateCommentRequest(
            post_id=1,
            author="alice",
            email="alice@example.com",
            content="Nice post",
            user_agent="pytest",
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.comment_id is not None
        assert response.post_id == 1
        assert response.parent_id == 0
        assert response.author == "alice"
        assert response.status == CommentStatus.AUDITING
        assert response.notifications == ["comment_new"]
        assert notifier.events == [CommentEvent.NEW]

    @pytest.mark.asyncio
    async def test_reply_notifies_reply(self, unit_env):
        """Replies send a reply notification only."""
        use_case = await unit_env.get(CreateCommentUseCase)
        notifier = await unit_env.get(CommentNotifier)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        await post_repo.save(make_post(1))
        parent = await comment_repo.save(make_comment(None))

        request = CreateCommentRequest(
            post_id=1,
            author="bob",
            email="bob@example.com",
            content="Agreed",
            parent_id=parent.id,
        )

        response = await use_case.execute(request)

        assert response.parent_id == parent.id
        assert response.notifications == ["comment_reply"]
        assert notifier.events == [CommentEvent.REPLY]
        _, notified_comment = notifier.sent[0]
        assert notified_comment.id == response.comment_id

    @pytest.mark.asyncio
    async def test_admin_comment_uses_configured_identity(self, unit_env):
        """Admin comments need no author or email and are published."""
        use_case = await unit_env.get(CreateCommentUseCase)
        notifier = await unit_env.get(CommentNotifier)
        admin_settings = await unit_env.get(AdminSettings)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post(1))

        request = CreateCommentRequest(post_id=1, content="Welcome", as_admin=True)

        response = await use_case.execute(request)

        assert response.author == admin_settings.display_name
        assert response.is_admin is True
        assert response.status == CommentStatus.PUBLISHED
        assert response.notifications == []
        assert notifier.sent == []

    @pytest.mark.asyncio
    async def test_guest_without_email_rejected(self, unit_env):
        """Guests must give an author and an email."""
        use_case = await unit_env.get(CreateCommentUseCase)

        request = CreateCommentRequest(post_id=1, author="alice", content="hi")

        with pytest.raises(ValueError, match="Author and email are required"):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_unknown_post_sends_nothing(self, unit_env):
        """Failed creations dispatch no notification."""
        use_case = await unit_env.get(CreateCommentUseCase)
        notifier = await unit_env.get(CommentNotifier)

        request = CreateCommentRequest(
            post_id=9, author="alice", email="alice@example.com", content="hi"
        )

        with pytest.raises(NotFoundError):
            await use_case.execute(request)
        assert notifier.sent == []
