"""Registry of live-channel subscribers.

Each connected client gets a handle with its own bounded queue and a writer
task that drains it. Publishing only enqueues, so a slow or dead client never
holds up the request that produced the event.
"""

import asyncio
import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Protocol
from uuid import UUID, uuid4

import logfire

from board.domain.model import CommentEvent
from board.domain.service import EventBroadcaster


class Connection(Protocol):
    """What the registry needs from a client connection (a Starlette WebSocket)."""

    async def send_text(self, data: str) -> None: ...

    async def close(self, code: int = 1000, reason: str | None = None) -> None: ...


@dataclass(eq=False)
class SubscriberHandle:
    """One registered client connection."""

    connection: Connection
    queue: asyncio.Queue
    id: UUID = field(default_factory=uuid4)
    task: asyncio.Task | None = None


class ConnectionRegistry(EventBroadcaster):
    """Fan-out broadcaster over the currently connected subscribers."""

    def __init__(self, max_connections: int = 100, queue_size: int = 50) -> None:
        self._subscribers: dict[UUID, SubscriberHandle] = {}
        self._max_connections = max_connections
        self._queue_size = queue_size

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def register(self, connection: Connection) -> SubscriberHandle | None:
        """Add an accepted connection and start its writer.

        Must be called from the event loop serving the connection.

        Returns:
            The subscriber handle, or None when the registry is full
        """
        if len(self._subscribers) >= self._max_connections:
            logfire.warn(
                "Live subscriber rejected",
                reason="max_connections",
                total=len(self._subscribers),
            )
            return None

        handle = SubscriberHandle(
            connection=connection, queue=asyncio.Queue(maxsize=self._queue_size)
        )
        handle.task = asyncio.create_task(self._writer(handle))
        self._subscribers[handle.id] = handle
        logfire.info(
            "Live subscriber connected",
            subscriber_id=str(handle.id),
            total=len(self._subscribers),
        )
        return handle

    async def unregister(self, handle: SubscriberHandle) -> None:
        """Remove a subscriber and stop its writer. Safe to call twice."""
        self._drop(handle)
        if handle.task is not None and handle.task is not asyncio.current_task():
            try:
                await handle.task
            except asyncio.CancelledError:
                pass
        logfire.info(
            "Live subscriber disconnected",
            subscriber_id=str(handle.id),
            total=len(self._subscribers),
        )

    def send(self, handle: SubscriberHandle, message: dict[str, Any]) -> bool:
        """Queue a message for one subscriber.

        Returns:
            False if the subscriber was dropped because its queue is full
        """
        try:
            handle.queue.put_nowait(json.dumps(message))
            return True
        except asyncio.QueueFull:
            logfire.warn(
                "Live subscriber too slow, dropping", subscriber_id=str(handle.id)
            )
            self._drop(handle)
            return False

    def publish(self, event: CommentEvent) -> None:
        """Queue an event for every subscriber without waiting on delivery."""
        message = event.to_message()
        delivered = 0
        for handle in list(self._subscribers.values()):
            if self.send(handle, message):
                delivered += 1
        logfire.info(
            "Comment event published",
            event_type=event.type.value,
            subscribers=delivered,
        )

    async def close_all(self) -> None:
        """Disconnect every subscriber (application shutdown)."""
        for handle in list(self._subscribers.values()):
            await self.unregister(handle)

    def connected_message(self) -> dict[str, Any]:
        """Acknowledgement sent to a subscriber right after it registers."""
        return {"type": "connected", "timestamp": datetime.now().isoformat()}

    def _drop(self, handle: SubscriberHandle) -> None:
        self._subscribers.pop(handle.id, None)
        if handle.task is not None and not handle.task.done():
            handle.task.cancel()

    async def _close_quietly(self, handle: SubscriberHandle) -> None:
        try:
            await handle.connection.close()
        except Exception as e:
            logfire.debug(
                "Live subscriber close failed",
                subscriber_id=str(handle.id),
                error=str(e),
            )

    async def _writer(self, handle: SubscriberHandle) -> None:
        """Drain one subscriber's queue until it is dropped or a send fails."""
        try:
            while True:
                message = await handle.queue.get()
                await handle.connection.send_text(message)
        except asyncio.CancelledError:
            # Dropped or unregistered; release the connection either way
            await self._close_quietly(handle)
            return
        except Exception as e:
            # Delivery to a vanished client is dropped silently
            logfire.debug(
                "Live subscriber send failed",
                subscriber_id=str(handle.id),
                error=str(e),
            )
            self._subscribers.pop(handle.id, None)
