"""Per-comment view state that survives tree rebuilds."""

from collections.abc import Sequence
from dataclasses import dataclass

import logfire

from board.application.usecase.comment import CommentNodeResponse

from .forest import node_ids


@dataclass
class NodeViewState:
    """What one viewer has done to one comment's card."""

    expanded: bool = False
    visible_count: int = 5
    reply_form_open: bool = False
    reply_draft: str = ""


class ViewStateStore:
    """View state keyed by comment ID.

    Entries are created on first interaction. Comments nobody touched use
    the defaults: replies collapsed, one page visible once expanded.
    """

    def __init__(self, page_size: int = 5) -> None:
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.page_size = page_size
        self._states: dict[str, NodeViewState] = {}

    def __contains__(self, comment_id: str) -> bool:
        return comment_id in self._states

    def __len__(self) -> int:
        return len(self._states)

    def default(self) -> NodeViewState:
        return NodeViewState(visible_count=self.page_size)

    def peek(self, comment_id: str) -> NodeViewState:
        """Return the state for a comment without recording it."""
        return self._states.get(comment_id) or self.default()

    def get(self, comment_id: str) -> NodeViewState:
        """Return the state for a comment, recording defaults if absent."""
        state = self._states.get(comment_id)
        if state is None:
            state = self._states[comment_id] = self.default()
        return state

    def toggle_replies(self, comment_id: str) -> bool:
        """Expand or collapse a comment's replies.

        Returns:
            The new expanded flag
        """
        state = self.get(comment_id)
        state.expanded = not state.expanded
        return state.expanded

    def load_more(self, comment_id: str) -> int:
        """Reveal one more page of replies.

        Returns:
            The new visible count
        """
        state = self.get(comment_id)
        state.expanded = True
        state.visible_count += self.page_size
        return state.visible_count

    def show_all(self, comment_id: str, reply_count: int) -> int:
        """Reveal every reply of a comment."""
        state = self.get(comment_id)
        state.expanded = True
        state.visible_count = max(state.visible_count, reply_count)
        return state.visible_count

    def toggle_reply_form(self, comment_id: str) -> bool:
        state = self.get(comment_id)
        state.reply_form_open = not state.reply_form_open
        return state.reply_form_open

    def set_draft(self, comment_id: str, text: str) -> None:
        self.get(comment_id).reply_draft = text

    def clear_reply(self, comment_id: str) -> None:
        """Close the reply form and drop its draft (after a successful reply)."""
        state = self._states.get(comment_id)
        if state is not None:
            state.reply_form_open = False
            state.reply_draft = ""

    def reconcile(self, forest: Sequence[CommentNodeResponse]) -> set[str]:
        """Keep state for comments still on the board and forget the rest.

        Args:
            forest: Freshly fetched reply forest

        Returns:
            IDs whose state was discarded
        """
        present = node_ids(forest)
        stale = {comment_id for comment_id in self._states if comment_id not in present}
        for comment_id in stale:
            del self._states[comment_id]
        if stale:
            logfire.debug("View state discarded", count=len(stale))
        return stale
