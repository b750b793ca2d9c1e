"""Board client: API access, view state and rendering."""

from .api import BoardClient, BoardClientError
from .live import LiveBoard
from .render import RenderedComment, TreeRenderer, format_timestamp, render_text
from .state import NodeViewState, ViewStateStore

__all__ = [
    "BoardClient",
    "BoardClientError",
    "LiveBoard",
    "NodeViewState",
    "RenderedComment",
    "TreeRenderer",
    "ViewStateStore",
    "format_timestamp",
    "render_text",
]
