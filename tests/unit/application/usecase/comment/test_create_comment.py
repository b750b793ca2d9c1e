"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from board.application.usecase.comment import CreateCommentRequest, CreateCommentUseCase
from board.domain.error import NotFoundError, ValidationError
from board.domain.model import CommentCreatedEvent
from board.domain.repository import CommentRepository, UserRepository
from board.domain.service import CommentService, UserService
from tests.conftest import RecordingBroadcaster, RecordingUnitOfWork, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _use_case(
    unit_env, unit_of_work: RecordingUnitOfWork | None = None
) -> tuple[CreateCommentUseCase, RecordingBroadcaster]:
    unit_of_work = unit_of_work or RecordingUnitOfWork()
    broadcaster = RecordingBroadcaster(log=unit_of_work.log)
    use_case = CreateCommentUseCase(
        comment_service=await unit_env.get(CommentService),
        user_service=await unit_env.get(UserService),
        unit_of_work=unit_of_work,
        broadcaster=broadcaster,
    )
    return use_case, broadcaster


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_returns_populated_comment(self, unit_env):
        """Response carries the author, email included, and no replies."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("Alex"))
        use_case, _ = await _use_case(unit_env)

        # Act
        response = await use_case.execute(
            CreateCommentRequest(author_id=str(user.id), content=" First! ")
        )

        # Assert
        assert response.content == "First!"
        assert response.parent_id is None
        assert response.replies == []
        assert response.author.user_id == str(user.id)
        assert response.author.name == "Alex"
        assert response.author.email == "alex@example.com"

    @pytest.mark.asyncio
    async def test_create_comment_publishes_one_created_event(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("George"))
        use_case, broadcaster = await _use_case(unit_env)

        response = await use_case.execute(
            CreateCommentRequest(author_id=str(user.id), content="hello")
        )

        assert len(broadcaster.events) == 1
        event = broadcaster.events[0]
        assert isinstance(event, CommentCreatedEvent)
        assert str(event.comment.id) == response.comment_id
        assert event.author.name == "George"

    @pytest.mark.asyncio
    async def test_commits_before_publishing(self, unit_env):
        """Subscribers are only told about a comment that is already stored."""
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())
        use_case, broadcaster = await _use_case(unit_env)

        await use_case.execute(
            CreateCommentRequest(author_id=str(user.id), content="hello")
        )

        assert broadcaster.log == ["commit", "publish"]

    @pytest.mark.asyncio
    async def test_failed_commit_publishes_nothing(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())
        use_case, broadcaster = await _use_case(
            unit_env, RecordingUnitOfWork(fail=True)
        )

        with pytest.raises(RuntimeError):
            await use_case.execute(
                CreateCommentRequest(author_id=str(user.id), content="hello")
            )

        assert broadcaster.events == []

    @pytest.mark.asyncio
    async def test_reply_records_parent(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())
        use_case, _ = await _use_case(unit_env)
        parent = await use_case.execute(
            CreateCommentRequest(author_id=str(user.id), content="parent")
        )

        reply = await use_case.execute(
            CreateCommentRequest(
                author_id=str(user.id), content="reply", parent_id=parent.comment_id
            )
        )

        assert reply.parent_id == parent.comment_id

    @pytest.mark.asyncio
    async def test_missing_parent_raises_and_publishes_nothing(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        comment_repo = await unit_env.get(CommentRepository)
        user = await user_repo.save(make_user())
        use_case, broadcaster = await _use_case(unit_env)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    author_id=str(user.id), content="reply", parent_id=str(uuid4())
                )
            )

        assert broadcaster.events == []
        assert await comment_repo.count() == 0

    @pytest.mark.asyncio
    async def test_blank_content_raises_and_publishes_nothing(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())
        use_case, broadcaster = await _use_case(unit_env)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(author_id=str(user.id), content="   ")
            )

        assert broadcaster.events == []

    @pytest.mark.asyncio
    async def test_unknown_author_raises_not_found(self, unit_env):
        use_case, _ = await _use_case(unit_env)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(author_id=str(uuid4()), content="hello")
            )

    @pytest.mark.asyncio
    async def test_malformed_parent_id_raises_value_error(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())
        use_case, _ = await _use_case(unit_env)

        with pytest.raises(ValueError):
            await use_case.execute(
                CreateCommentRequest(
                    author_id=str(user.id), content="reply", parent_id="not-a-uuid"
                )
            )
