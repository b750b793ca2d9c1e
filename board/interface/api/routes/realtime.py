"""Live comment event channel."""

import logfire
from fastapi import APIRouter, WebSocket, WebSocketDisconnect, status

from board.adapter.realtime import ConnectionRegistry

router = APIRouter(tags=["realtime"])


@router.websocket("/ws/comments")
async def comment_events(websocket: WebSocket) -> None:
    """Stream comment_created and comment_deleted events to a client.

    Subscribing is open to anyone. The client only listens; anything it
    sends is ignored. Delivery is at-most-once with no replay, so clients
    refetch the board after connecting.
    """
    registry = await websocket.app.state.dishka_container.get(ConnectionRegistry)

    await websocket.accept()
    handle = registry.register(websocket)
    if handle is None:
        await websocket.close(
            code=status.WS_1013_TRY_AGAIN_LATER, reason="Too many subscribers"
        )
        return

    registry.send(handle, registry.connected_message())

    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect as e:
        logfire.debug("Live subscriber left", subscriber_id=str(handle.id), code=e.code)
    finally:
        await registry.unregister(handle)
