"""Unit tests for GetCommentsUseCase."""

from uuid import uuid4

import pytest

from board.application.usecase.comment import GetCommentsUseCase
from board.domain.repository import CommentRepository, UserRepository
from board.domain.value import CommentId
from tests.conftest import make_comment, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_returns_nested_forest_with_authors(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        user_repo = await unit_env.get(UserRepository)
        comment_repo = await unit_env.get(CommentRepository)

        alex = await user_repo.save(make_user("Alex"))
        george = await user_repo.save(make_user("George"))
        root = make_comment(alex.id, minutes=0, content="root")
        reply = make_comment(george.id, parent_id=root.id, minutes=5, content="reply")
        second = make_comment(george.id, minutes=10, content="second root")
        for comment in (second, reply, root):
            await comment_repo.save(comment)

        # Act
        response = await use_case.execute()

        # Assert
        assert response.total == 3
        assert [c.content for c in response.comments] == ["root", "second root"]
        first = response.comments[0]
        assert first.author.name == "Alex"
        assert first.author.email is None  # Email only in the created response
        assert [r.content for r in first.replies] == ["reply"]
        assert first.replies[0].author.name == "George"
        assert first.replies[0].parent_id == str(root.id)

    @pytest.mark.asyncio
    async def test_orphans_are_not_counted(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)
        user_repo = await unit_env.get(UserRepository)
        comment_repo = await unit_env.get(CommentRepository)

        user = await user_repo.save(make_user())
        await comment_repo.save(make_comment(user.id, content="root"))
        await comment_repo.save(
            make_comment(user.id, parent_id=CommentId(uuid4()), content="orphan")
        )

        response = await use_case.execute()

        assert response.total == 1
        assert [c.content for c in response.comments] == ["root"]

    @pytest.mark.asyncio
    async def test_deleted_author_renders_as_none(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment(make_user().id, content="ghost"))

        response = await use_case.execute()

        assert response.comments[0].author is None

    @pytest.mark.asyncio
    async def test_empty_board(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute()

        assert response.comments == []
        assert response.total == 0
