"""Integration tests for CommentRepository.

These run against whichever persistence the fixture provides: in-memory by
default, PostgreSQL with unmock={"persistence"} and a running database.
"""

from uuid import uuid4

import pytest

from board.domain.repository import CommentRepository, UserRepository
from board.domain.value import CommentId, Content
from tests.conftest import make_comment, make_user
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture()


class TestCommentRepositoryIntegration:
    """Ordering and lookups the tree builder and cascade rely on."""

    @pytest.mark.asyncio
    async def test_find_all_orders_by_created_at(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        comment_repo = await integration_env.get(CommentRepository)
        user = await user_repo.save(make_user())
        late = make_comment(user.id, minutes=30, content="late")
        early = make_comment(user.id, minutes=0, content="early")
        middle = make_comment(user.id, minutes=10, content="middle")
        for comment in (late, early, middle):
            await comment_repo.save(comment)

        comments = await comment_repo.find_all()

        assert [c.content.root for c in comments] == ["early", "middle", "late"]

    @pytest.mark.asyncio
    async def test_find_children_returns_direct_replies_only(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        comment_repo = await integration_env.get(CommentRepository)
        user = await user_repo.save(make_user())
        root = await comment_repo.save(make_comment(user.id, minutes=0))
        second = await comment_repo.save(
            make_comment(user.id, parent_id=root.id, minutes=2)
        )
        first = await comment_repo.save(
            make_comment(user.id, parent_id=root.id, minutes=1)
        )
        await comment_repo.save(make_comment(user.id, parent_id=first.id, minutes=3))

        children = await comment_repo.find_children(root.id)

        assert [c.id for c in children] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_save_updates_content_in_place(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        comment_repo = await integration_env.get(CommentRepository)
        user = await user_repo.save(make_user())
        comment = await comment_repo.save(make_comment(user.id, content="before"))

        await comment_repo.save(comment.model_copy(update={"content": Content("after")}))

        stored = await comment_repo.find_by_id(comment.id)
        assert stored.content.root == "after"
        assert await comment_repo.count() == 1

    @pytest.mark.asyncio
    async def test_delete_and_missing_lookup(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        comment_repo = await integration_env.get(CommentRepository)
        user = await user_repo.save(make_user())
        comment = await comment_repo.save(make_comment(user.id))

        await comment_repo.delete(comment.id)

        assert await comment_repo.find_by_id(comment.id) is None
        assert await comment_repo.find_by_id(CommentId(uuid4())) is None
