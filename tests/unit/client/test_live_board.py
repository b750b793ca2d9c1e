"""Unit tests for LiveBoard."""

import json

import pytest

from board.application.usecase.comment import DeleteCommentResponse, GetCommentsResponse
from board.client import BoardClientError, LiveBoard
from tests.conftest import make_node


class FakeBoardClient:
    """Stands in for BoardClient; serves a mutable forest."""

    def __init__(self, forest=None) -> None:
        self.forest = forest or []
        self.fetches = 0
        self.created: list[tuple[str, str | None]] = []
        self.deleted: list[str] = []
        self.reject_create = False
        self.failing_fetches: set[int] = set()

    async def fetch_forest(self) -> GetCommentsResponse:
        self.fetches += 1
        if self.fetches in self.failing_fetches:
            raise BoardClientError(503, "Service Unavailable")
        return GetCommentsResponse(comments=self.forest, total=len(self.forest))

    async def create_comment(self, content: str, parent_id: str | None = None):
        if self.reject_create:
            raise BoardClientError(404, "Comment not found")
        self.created.append((content, parent_id))
        return make_node(content)

    async def delete_comment(self, comment_id: str) -> DeleteCommentResponse:
        self.deleted.append(comment_id)
        return DeleteCommentResponse(
            message="Comment deleted successfully",
            comment_id=comment_id,
            deleted_count=1,
        )


class FakeSession:
    """One live channel connection replaying scripted messages."""

    def __init__(self, script) -> None:
        self.script = script

    async def __aenter__(self) -> "FakeSession":
        if isinstance(self.script, Exception):
            raise self.script
        return self

    async def __aexit__(self, *exc_info) -> bool:
        return False

    async def _messages(self):
        for message in self.script:
            yield message

    def __aiter__(self):
        return self._messages()


class FakeChannel:
    """Connector handing out scripted sessions; refuses once they run out."""

    def __init__(self, *scripts) -> None:
        self.scripts = list(scripts)
        self.urls: list[str] = []

    def __call__(self, url: str) -> FakeSession:
        self.urls.append(url)
        script = self.scripts.pop(0) if self.scripts else OSError("connection refused")
        return FakeSession(script)


def _message(message_type: str, data=None) -> str:
    return json.dumps({"type": message_type, "data": data, "timestamp": "now"})


def _board(client, channel=None, **kwargs) -> LiveBoard:
    return LiveBoard(
        client=client,
        socket_url="ws://board.test/ws/comments",
        viewer_id="user-1",
        reconnection_delay=0,
        connector=channel or FakeChannel(),
        **kwargs,
    )


class TestRun:
    """Tests for following the live channel."""

    @pytest.mark.asyncio
    async def test_refetches_on_connect_and_on_every_event(self):
        client = FakeBoardClient()
        channel = FakeChannel(
            [
                _message("connected"),
                _message("comment_created", {"comment_id": "x"}),
                "not json",
                _message("comment_deleted", "x"),
                _message("something_else"),
            ]
        )
        board = _board(client, channel, reconnection_attempts=2)

        await board.run()

        # One fetch on connect, one per comment event
        assert client.fetches == 3
        # The session, then two refused reconnects
        assert len(channel.urls) == 3
        assert channel.urls[0] == "ws://board.test/ws/comments"

    @pytest.mark.asyncio
    async def test_successful_reconnect_resets_attempts_and_refetches(self):
        client = FakeBoardClient()
        channel = FakeChannel([], [])
        board = _board(client, channel, reconnection_attempts=1)

        await board.run()

        assert client.fetches == 2
        assert len(channel.urls) == 3

    @pytest.mark.asyncio
    async def test_gives_up_after_bounded_attempts(self):
        client = FakeBoardClient()
        channel = FakeChannel()
        board = _board(client, channel, reconnection_attempts=3)

        await board.run()

        assert client.fetches == 0
        assert len(channel.urls) == 4

    @pytest.mark.asyncio
    async def test_failed_event_refetch_reconnects_and_resyncs(self):
        """A rejected refetch drops the session; the next connect refetches."""
        client = FakeBoardClient()
        client.failing_fetches = {2}
        channel = FakeChannel(
            [
                _message("comment_created", {"comment_id": "x"}),
                _message("comment_deleted", "x"),
            ],
            [],
        )
        board = _board(client, channel, reconnection_attempts=1)
        client.forest = [make_node("after the outage")]

        await board.run()

        # Connect, failed event refetch, then the refetch on reconnect
        assert client.fetches == 3
        assert len(channel.urls) == 3
        assert [node.content for node in board.forest] == ["after the outage"]

    @pytest.mark.asyncio
    async def test_failed_refetch_on_connect_counts_as_lost_channel(self):
        client = FakeBoardClient()
        client.failing_fetches = {1}
        channel = FakeChannel([], [])
        board = _board(client, channel, reconnection_attempts=1)

        await board.run()

        assert client.fetches == 2
        assert len(channel.urls) == 3


class TestRefresh:
    """Tests for refetch and reconciliation."""

    @pytest.mark.asyncio
    async def test_refresh_keeps_surviving_state_and_notifies(self):
        kept = make_node("kept", make_node("reply"))
        gone = make_node("gone")
        client = FakeBoardClient([kept, gone])
        rendered = []
        board = _board(client, on_change=rendered.append)
        await board.refresh()
        board.state.toggle_replies(kept.comment_id)
        board.state.toggle_replies(gone.comment_id)

        client.forest = [kept]
        await board.refresh()

        assert gone.comment_id not in board.state
        assert board.state.peek(kept.comment_id).expanded
        assert board.total == 1
        assert [card.content for card in rendered[-1]] == ["kept", "reply"]

    @pytest.mark.asyncio
    async def test_connected_ack_does_not_refetch(self):
        client = FakeBoardClient()
        board = _board(client)

        assert await board.handle_message(_message("connected")) is False
        assert client.fetches == 0


class TestMutations:
    """Tests for posting and deleting through the board."""

    @pytest.mark.asyncio
    async def test_submit_comment_trims_and_refetches(self):
        client = FakeBoardClient()
        board = _board(client)

        await board.submit_comment("  hello  ")

        assert client.created == [("hello", None)]
        assert client.fetches == 1

    @pytest.mark.asyncio
    async def test_blank_comment_is_rejected_locally(self):
        client = FakeBoardClient()
        board = _board(client)

        with pytest.raises(ValueError):
            await board.submit_comment("   ")

        assert client.created == []

    @pytest.mark.asyncio
    async def test_submit_reply_clears_draft_and_closes_form(self):
        root = make_node("root")
        client = FakeBoardClient([root])
        board = _board(client)
        board.state.toggle_reply_form(root.comment_id)
        board.state.set_draft(root.comment_id, " my reply ")

        await board.submit_reply(root.comment_id)

        assert client.created == [("my reply", root.comment_id)]
        state = board.state.peek(root.comment_id)
        assert state.reply_draft == ""
        assert not state.reply_form_open
        assert client.fetches == 1

    @pytest.mark.asyncio
    async def test_rejected_reply_keeps_draft(self):
        root = make_node("root")
        client = FakeBoardClient([root])
        client.reject_create = True
        board = _board(client)
        board.state.toggle_reply_form(root.comment_id)
        board.state.set_draft(root.comment_id, "my reply")

        with pytest.raises(BoardClientError):
            await board.submit_reply(root.comment_id)

        state = board.state.peek(root.comment_id)
        assert state.reply_draft == "my reply"
        assert state.reply_form_open

    @pytest.mark.asyncio
    async def test_blank_reply_draft_is_rejected(self):
        root = make_node("root")
        client = FakeBoardClient([root])
        board = _board(client)

        with pytest.raises(ValueError):
            await board.submit_reply(root.comment_id)

        assert client.created == []

    @pytest.mark.asyncio
    async def test_delete_refetches(self):
        root = make_node("root")
        client = FakeBoardClient([root])
        board = _board(client)

        response = await board.delete(root.comment_id)

        assert response.deleted_count == 1
        assert client.deleted == [root.comment_id]
        assert client.fetches == 1
