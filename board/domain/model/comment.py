"""Comment entity.

Comments form reply trees of unlimited depth through a single parent link.
The tree itself is never stored; it is rebuilt from the flat record set on
every read.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import CommentId, Content, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a top-level comment or a reply to another comment.

    Threading is managed through parent_id alone. It is set once at creation
    and never changed, so a comment can never become its own ancestor.
    """

    id: CommentId
    author_id: UserId
    content: Content
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_root(self) -> bool:
        """Whether this is a top-level comment."""
        return self.parent_id is None
