"""Domain model entities for the comment board."""

from board.domain.model.comment import Comment
from board.domain.model.event import (
    CommentCreatedEvent,
    CommentDeletedEvent,
    CommentEvent,
)
from board.domain.model.user import AuthorSummary, User

__all__ = [
    "User",
    "AuthorSummary",
    "Comment",
    "CommentEvent",
    "CommentCreatedEvent",
    "CommentDeletedEvent",
]
