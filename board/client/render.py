"""Rendering a reply forest with alignment, highlight and reply pages."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from board.application.usecase.comment import CommentNodeResponse
from board.domain.value import Alignment

from .state import ViewStateStore

ANONYMOUS = "Anonymous"
EMPTY_BOARD = "No comments yet. Be the first to comment!"


def format_timestamp(value: datetime) -> str:
    """Format a timestamp as DD.MM.YYYY at HH:MM in local time."""
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime("%d.%m.%Y at %H:%M")


def pluralize_replies(count: int) -> str:
    return "reply" if count == 1 else "replies"


@dataclass(frozen=True)
class RenderedComment:
    """One visible comment card."""

    comment_id: str
    author_name: str
    avatar_url: str | None
    content: str
    timestamp: str
    depth: int
    alignment: Alignment
    highlighted: bool
    reply_count: int
    expanded: bool
    visible_replies: int
    remaining: int
    next_page_size: int
    show_all_available: bool
    can_reply: bool
    can_delete: bool
    reply_form_open: bool
    reply_draft: str


class TreeRenderer:
    """Turns a forest plus view state into the cards a viewer sees.

    Roots sit on the left and every reply takes the side opposite its
    parent, at any depth. Cards at or below the distinguished depth are
    highlighted; the tree itself is never cut off.
    """

    def __init__(self, page_size: int = 5, max_distinguished_depth: int = 3) -> None:
        self.page_size = page_size
        self.max_distinguished_depth = max_distinguished_depth

    def render(
        self,
        forest: Sequence[CommentNodeResponse],
        state: ViewStateStore,
        viewer_id: str | None = None,
    ) -> list[RenderedComment]:
        """Render visible cards in display order.

        Args:
            forest: Root comments with nested replies
            state: View state; read only, never extended
            viewer_id: ID of the signed-in viewer, None when anonymous

        Returns:
            Cards in pre-order, collapsed and unrevealed replies left out
        """
        cards: list[RenderedComment] = []
        stack = [(node, 0, Alignment.LEFT) for node in reversed(forest)]

        while stack:
            node, depth, alignment = stack.pop()
            view = state.peek(node.comment_id)
            reply_count = len(node.replies)

            visible = min(view.visible_count, reply_count) if view.expanded else 0
            remaining = reply_count - visible if view.expanded else 0

            cards.append(
                RenderedComment(
                    comment_id=node.comment_id,
                    author_name=node.author.name if node.author else ANONYMOUS,
                    avatar_url=node.author.avatar_url if node.author else None,
                    content=node.content,
                    timestamp=format_timestamp(node.created_at),
                    depth=depth,
                    alignment=alignment,
                    highlighted=depth >= self.max_distinguished_depth,
                    reply_count=reply_count,
                    expanded=view.expanded,
                    visible_replies=visible,
                    remaining=remaining,
                    next_page_size=min(self.page_size, remaining),
                    show_all_available=remaining > self.page_size,
                    can_reply=viewer_id is not None,
                    can_delete=(
                        viewer_id is not None
                        and node.author is not None
                        and node.author.user_id == viewer_id
                    ),
                    reply_form_open=view.reply_form_open and viewer_id is not None,
                    reply_draft=view.reply_draft,
                )
            )

            child_alignment = alignment.opposite()
            for reply in reversed(node.replies[:visible]):
                stack.append((reply, depth + 1, child_alignment))

        return cards


def render_text(cards: Sequence[RenderedComment], width: int = 72) -> str:
    """Lay cards out as plain text for a terminal.

    Right-aligned cards are pushed towards the right edge; highlighted
    cards are marked with an asterisk.
    """
    if not cards:
        return EMPTY_BOARD

    lines: list[str] = []
    for card in cards:
        indent = " " * (card.depth * 2)
        if card.alignment is Alignment.RIGHT:
            indent += " " * (width // 4)
        marker = "*" if card.highlighted else "-"

        lines.append(f"{indent}{marker} {card.author_name}  {card.timestamp}")
        lines.extend(f"{indent}  {line}" for line in card.content.splitlines())

        controls = []
        if card.can_reply:
            controls.append("[reply]")
        if card.can_delete:
            controls.append("[delete]")
        if card.reply_count:
            verb = "Hide" if card.expanded else "Show"
            controls.append(
                f"[{verb} {card.reply_count} {pluralize_replies(card.reply_count)}]"
            )
        if card.remaining:
            controls.append(
                f"[Load {card.next_page_size} more {pluralize_replies(card.remaining)}]"
            )
            if card.show_all_available:
                controls.append(f"[Show all {card.remaining}]")
        if controls:
            lines.append(f"{indent}  {' '.join(controls)}")
        if card.reply_form_open:
            lines.append(f"{indent}  > {card.reply_draft}")

    return "\n".join(lines)
