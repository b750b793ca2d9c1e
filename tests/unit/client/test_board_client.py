"""Tests for BoardClient against the API app."""

import httpx
import pytest

from board.client import BoardClient, BoardClientError
from board.domain.repository import UserRepository
from tests.conftest import make_token, make_user
from tests.harness import create_app_fixture

test_app = create_app_fixture()


async def _saved_user(app, name: str):
    user_repo = await app.state.dishka_container.get(UserRepository)
    return await user_repo.save(make_user(name))


def _client(app, token: str | None = None) -> BoardClient:
    return BoardClient(
        "http://testserver", token=token, transport=httpx.ASGITransport(app=app)
    )


class TestBoardClient:
    """Round trips through the HTTP API."""

    @pytest.mark.asyncio
    async def test_create_reply_fetch_and_delete(self, test_app):
        alex = await _saved_user(test_app, "Alex")

        async with _client(test_app, make_token(alex)) as client:
            root = await client.create_comment("root")
            reply = await client.create_comment("reply", parent_id=root.comment_id)

            forest = await client.fetch_forest()
            assert forest.total == 2
            assert forest.comments[0].comment_id == root.comment_id
            assert forest.comments[0].replies[0].comment_id == reply.comment_id

            deleted = await client.delete_comment(root.comment_id)
            assert deleted.deleted_count == 2
            assert (await client.fetch_forest()).total == 0

    @pytest.mark.asyncio
    async def test_anonymous_client_can_read_but_not_write(self, test_app):
        async with _client(test_app) as client:
            assert (await client.fetch_forest()).comments == []

            with pytest.raises(BoardClientError) as exc_info:
                await client.create_comment("hello")

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_rejection_carries_api_detail(self, test_app):
        alex = await _saved_user(test_app, "Alex")
        george = await _saved_user(test_app, "George")

        async with _client(test_app, make_token(alex)) as alex_client:
            comment = await alex_client.create_comment("mine")

        async with _client(test_app, make_token(george)) as george_client:
            with pytest.raises(BoardClientError) as exc_info:
                await george_client.delete_comment(comment.comment_id)

        assert exc_info.value.status_code == 403
        assert exc_info.value.detail == "Not authorized to delete this comment"

    @pytest.mark.asyncio
    async def test_current_user(self, test_app):
        julia = await _saved_user(test_app, "Julia")

        async with _client(test_app, make_token(julia)) as client:
            me = await client.current_user()
        async with _client(test_app, "bad-token") as client:
            nobody = await client.current_user()

        assert me.name == "Julia"
        assert me.user_id == str(julia.id)
        assert nobody is None
