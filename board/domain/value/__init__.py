"""Domain value objects for the comment board."""

from board.domain.value.identifiers import CommentId, UserId
from board.domain.value.types import Alignment, CommentEventType, Content

__all__ = [
    # Identifiers
    "UserId",
    "CommentId",
    # Types
    "Content",
    "Alignment",
    "CommentEventType",
]
