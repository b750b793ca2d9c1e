"""Live board: keeps a rendered tree in step with the server.

Every event, and every (re)connect, triggers a full refetch. The fresh
forest is reconciled against the view state so expanded threads, reply
pages and drafts survive for comments that still exist.
"""

import asyncio
import json
from collections.abc import Callable, Sequence
from contextlib import AbstractAsyncContextManager
from typing import Any

import logfire
from websockets.asyncio.client import connect
from websockets.exceptions import ConnectionClosed, InvalidHandshake

from board.application.usecase.comment import (
    CommentNodeResponse,
    DeleteCommentResponse,
)
from board.config import ClientSettings
from board.domain.value import CommentEventType

from .api import BoardClient, BoardClientError
from .render import RenderedComment, TreeRenderer
from .state import ViewStateStore

Connector = Callable[[str], AbstractAsyncContextManager[Any]]

REFRESH_EVENTS = {CommentEventType.CREATED.value, CommentEventType.DELETED.value}


class LiveBoard:
    """Client-side view of the board fed by the live channel."""

    def __init__(
        self,
        client: BoardClient,
        socket_url: str,
        viewer_id: str | None = None,
        page_size: int = 5,
        max_distinguished_depth: int = 3,
        reconnection_attempts: int = 5,
        reconnection_delay: float = 1.0,
        connector: Connector = connect,
        on_change: Callable[[list[RenderedComment]], None] | None = None,
    ) -> None:
        """Initialize live board.

        Args:
            client: Board API client
            socket_url: Live channel URL, e.g. ws://localhost:8000/ws/comments
            viewer_id: Signed-in user's ID, None when anonymous
            page_size: Replies revealed per page
            max_distinguished_depth: Depth from which cards are highlighted
            reconnection_attempts: Consecutive failed connects before giving up
            reconnection_delay: Seconds to wait between connects
            connector: Opens the live channel; websockets' connect by default
            on_change: Called with the rendered cards after every refresh
        """
        self.client = client
        self.socket_url = socket_url
        self.viewer_id = viewer_id
        self.state = ViewStateStore(page_size=page_size)
        self.renderer = TreeRenderer(
            page_size=page_size, max_distinguished_depth=max_distinguished_depth
        )
        self.reconnection_attempts = reconnection_attempts
        self.reconnection_delay = reconnection_delay
        self.forest: list[CommentNodeResponse] = []
        self.total = 0
        self._connector = connector
        self.on_change = on_change

    @classmethod
    def from_settings(
        cls,
        client: BoardClient,
        settings: ClientSettings,
        viewer_id: str | None = None,
        **kwargs: Any,
    ) -> "LiveBoard":
        return cls(
            client=client,
            socket_url=settings.socket_url,
            viewer_id=viewer_id,
            page_size=settings.reply_page_size,
            max_distinguished_depth=settings.max_distinguished_depth,
            reconnection_attempts=settings.reconnection_attempts,
            reconnection_delay=settings.reconnection_delay,
            **kwargs,
        )

    def render(self) -> list[RenderedComment]:
        return self.renderer.render(self.forest, self.state, self.viewer_id)

    async def refresh(self) -> Sequence[CommentNodeResponse]:
        """Refetch the board and reconcile view state against it."""
        with logfire.span("live_board.refresh"):
            response = await self.client.fetch_forest()
            self.state.reconcile(response.comments)
            self.forest = response.comments
            self.total = response.total

        if self.on_change is not None:
            self.on_change(self.render())
        return self.forest

    async def handle_message(self, raw: str | bytes) -> bool:
        """Process one message from the live channel.

        Returns:
            True if the message caused a refetch
        """
        try:
            message = json.loads(raw)
            message_type = message.get("type")
        except (ValueError, AttributeError):
            logfire.warn("Unreadable live message ignored")
            return False

        if message_type in REFRESH_EVENTS:
            logfire.debug("Comment event received", event_type=message_type)
            await self.refresh()
            return True

        if message_type != "connected":
            logfire.debug("Unknown live message ignored", message_type=message_type)
        return False

    async def run(self) -> None:
        """Follow the live channel until reconnect attempts run out.

        Each successful connect refetches the board first, since events sent
        while disconnected are not replayed, and resets the attempt count.
        A refetch the API rejects drops the connection like a lost channel,
        so the board resynchronizes on the next connect.
        """
        failures = 0
        while True:
            try:
                async with self._connector(self.socket_url) as socket:
                    failures = 0
                    logfire.info("Live channel connected", url=self.socket_url)
                    await self.refresh()
                    async for raw in socket:
                        await self.handle_message(raw)
                logfire.info("Live channel closed by server")
            except (OSError, ConnectionClosed, InvalidHandshake) as e:
                logfire.warn("Live channel lost", error=str(e))
            except BoardClientError as e:
                logfire.warn(
                    "Live board refetch failed, reconnecting",
                    status_code=e.status_code,
                    error=e.detail,
                )

            failures += 1
            if failures > self.reconnection_attempts:
                logfire.error(
                    "Live channel reconnection attempts exhausted",
                    attempts=self.reconnection_attempts,
                )
                return
            await asyncio.sleep(self.reconnection_delay)

    async def submit_comment(self, content: str) -> CommentNodeResponse:
        """Post a top-level comment and refetch.

        Raises:
            ValueError: If the content is blank
            BoardClientError: If the API rejects the comment
        """
        created = await self.client.create_comment(_checked(content))
        await self.refresh()
        return created

    async def submit_reply(self, comment_id: str) -> CommentNodeResponse:
        """Post the reply drafted under a comment, then close its form.

        The draft is kept if the API rejects it.

        Raises:
            ValueError: If the draft is blank
            BoardClientError: If the API rejects the reply
        """
        draft = self.state.peek(comment_id).reply_draft
        created = await self.client.create_comment(_checked(draft), parent_id=comment_id)
        self.state.clear_reply(comment_id)
        await self.refresh()
        return created

    async def delete(self, comment_id: str) -> DeleteCommentResponse:
        """Delete a comment with its replies and refetch."""
        deleted = await self.client.delete_comment(comment_id)
        await self.refresh()
        return deleted


def _checked(content: str) -> str:
    text = content.strip()
    if not text:
        raise ValueError("Comment content must not be empty")
    return text
