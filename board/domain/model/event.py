"""Real-time comment events.

Events are signals, not diffs: receivers refetch the full comment set and
rebuild their tree instead of patching it.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import Field

from board.domain.model.comment import Comment
from board.domain.model.common import DomainModel
from board.domain.model.user import AuthorSummary
from board.domain.value import CommentEventType, CommentId


class CommentEvent(DomainModel, ABC):
    """Base class for comment events."""

    type: CommentEventType
    timestamp: datetime = Field(default_factory=datetime.now)

    @abstractmethod
    def data(self) -> Any:
        """Event payload in wire form."""
        pass

    def to_message(self) -> dict[str, Any]:
        """Encode the event as a JSON-ready message."""
        return {
            "type": self.type.value,
            "data": self.data(),
            "timestamp": self.timestamp.isoformat(),
        }


class CommentCreatedEvent(CommentEvent):
    """A comment was created; carries the comment with its author populated."""

    type: Literal[CommentEventType.CREATED] = CommentEventType.CREATED
    comment: Comment
    author: Optional[AuthorSummary] = None

    def data(self) -> dict[str, Any]:
        author = None
        if self.author is not None:
            author = {
                "user_id": str(self.author.id),
                "name": self.author.name,
                "avatar_url": self.author.avatar_url,
                "email": self.author.email,
            }
        return {
            "comment_id": str(self.comment.id),
            "content": self.comment.content.root,
            "parent_id": str(self.comment.parent_id)
            if self.comment.parent_id
            else None,
            "author": author,
            "created_at": self.comment.created_at.isoformat(),
            "updated_at": self.comment.updated_at.isoformat(),
            "replies": [],
        }


class CommentDeletedEvent(CommentEvent):
    """A comment and its reply subtree were deleted.

    Only the requested root id is carried, never the descendant ids.
    """

    type: Literal[CommentEventType.DELETED] = CommentEventType.DELETED
    comment_id: CommentId

    def data(self) -> str:
        return str(self.comment_id)
