"""In-memory comment repository for testing."""

from typing import Optional

from board.domain.model.comment import Comment
from board.domain.repository.comment import CommentRepository
from board.domain.value import CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    No transactions: a multi-record operation that fails part-way keeps
    whatever it already changed.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    @staticmethod
    def _ordered(comments: list[Comment]) -> list[Comment]:
        return sorted(comments, key=lambda c: (c.created_at, str(c.id)))

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_all(self) -> list[Comment]:
        """Find every comment, oldest first."""
        return self._ordered(list(self._comments.values()))

    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find direct children of a comment, oldest first."""
        return self._ordered(
            [c for c in self._comments.values() if c.parent_id == parent_id]
        )

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        self._comments.pop(comment_id, None)

    async def count(self) -> int:
        """Count all comments."""
        return len(self._comments)
