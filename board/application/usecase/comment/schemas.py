"""Comment response models shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from board.domain.model import AuthorSummary, Comment, User
from board.domain.service import CommentNode


class AuthorResponse(BaseModel):
    """Author projection in responses.

    email is only filled in on the creation echo.
    """

    user_id: str
    name: str
    avatar_url: str | None = None
    email: str | None = None

    @classmethod
    def from_summary(cls, author: AuthorSummary) -> "AuthorResponse":
        return cls(
            user_id=str(author.id),
            name=author.name,
            avatar_url=author.avatar_url,
            email=author.email,
        )


class CommentNodeResponse(BaseModel):
    """Comment with its nested replies.

    Recursive structure mirroring the domain CommentNode.
    """

    comment_id: str
    content: str
    parent_id: str | None
    author: AuthorResponse | None
    created_at: datetime
    updated_at: datetime
    replies: list["CommentNodeResponse"] = []

    @classmethod
    def from_comment(
        cls, comment: Comment, author: AuthorSummary | None
    ) -> "CommentNodeResponse":
        """Convert a single comment (no replies)."""
        return cls(
            comment_id=str(comment.id),
            content=comment.content.root,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            author=AuthorResponse.from_summary(author) if author else None,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )

    @classmethod
    def from_forest(
        cls, forest: list[CommentNode], authors: dict
    ) -> list["CommentNodeResponse"]:
        """Convert a domain forest, attaching author projections.

        Walks with an explicit stack, so deep threads are safe.

        Args:
            forest: Root comment nodes
            authors: Mapping of user ID to User

        Returns:
            Response roots with replies converted
        """

        def convert(node: CommentNode) -> "CommentNodeResponse":
            user: User | None = authors.get(node.comment.author_id)
            summary = AuthorSummary.from_user(user) if user else None
            return cls.from_comment(node.comment, summary)

        roots = [convert(node) for node in forest]
        stack = list(zip(forest, roots))
        while stack:
            node, response = stack.pop()
            for reply in node.replies:
                converted = convert(reply)
                response.replies.append(converted)
                stack.append((reply, converted))
        return roots
