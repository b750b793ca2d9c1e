"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from board.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from board.domain.model import Comment
from board.domain.repository import CommentRepository
from board.domain.value import CommentId, Content, UserId
from board.domain.value.types import MAX_CONTENT_LENGTH

from .base import Service
from .comment_tree import CommentNode, build_comment_forest


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a top-level comment or a reply to another comment.

        Args:
            author_id: Author user ID (from the authenticated caller)
            content: Comment text, trimmed before storing
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is empty after trimming
            NotFoundError: If the parent comment does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            try:
                body = Content(content)
            except ValueError as e:
                logfire.warn("Rejected comment content", author_id=str(author_id))
                if not content.strip():
                    raise ValidationError("Comment content must not be empty") from e
                raise ValidationError(
                    f"Comment content must be at most {MAX_CONTENT_LENGTH} characters"
                ) from e

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found", parent_id=str(parent_id)
                    )
                    raise NotFoundError("Comment", str(parent_id))

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                author_id=author_id,
                content=body,
                parent_id=parent_id,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                author_id=str(author_id),
                is_reply=parent_id is not None,
            )
            return saved

    async def get_all_comments(self) -> list[Comment]:
        """Get the flat comment snapshot ordered by created_at.

        Returns:
            All comments, oldest first
        """
        with logfire.span("comment_service.get_all_comments"):
            comments = await self.comment_repository.find_all()
            logfire.info("Comments retrieved", count=len(comments))
            return comments

    async def get_comment_forest(self) -> list[CommentNode]:
        """Read every comment and rebuild the reply forest.

        Returns:
            Root comment nodes with replies nested
        """
        with logfire.span("comment_service.get_comment_forest"):
            comments = await self.get_all_comments()
            return build_comment_forest(comments)

    async def delete_comment_tree(
        self, comment_id: CommentId, actor_id: UserId
    ) -> list[CommentId]:
        """Delete a comment together with its whole reply subtree.

        Ownership is checked once, on the requested comment. Replies are
        removed whoever wrote them. Traversal is post-order over an explicit
        stack, so every reply is deleted before its parent and thread depth
        never touches the call stack.

        There is no multi-record transaction here. If a delete fails part-way,
        only finished leaves are gone: every record still stored keeps its
        parent, so the remaining thread reads back whole.

        Args:
            comment_id: Comment to delete
            actor_id: User requesting the deletion

        Returns:
            Deleted comment IDs, replies before parents, root last

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor is not the comment's author
        """
        with logfire.span(
            "comment_service.delete_comment_tree",
            comment_id=str(comment_id),
            actor_id=str(actor_id),
        ):
            root = await self.comment_repository.find_by_id(comment_id)
            if root is None:
                logfire.warn("Comment not found for delete", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            if root.author_id != actor_id:
                logfire.warn(
                    "Unauthorized comment delete attempt",
                    comment_id=str(comment_id),
                    author_id=str(root.author_id),
                    actor_id=str(actor_id),
                )
                raise NotAuthorizedError(
                    "comment", str(comment_id), str(actor_id), action="delete"
                )

            deleted: list[CommentId] = []
            visited: set[CommentId] = {root.id}
            # (id, children_expanded)
            stack: list[tuple[CommentId, bool]] = [(root.id, False)]
            while stack:
                current_id, expanded = stack.pop()
                if expanded:
                    await self.comment_repository.delete(current_id)
                    deleted.append(current_id)
                    continue

                stack.append((current_id, True))
                children = await self.comment_repository.find_children(current_id)
                for child in reversed(children):
                    if child.id not in visited:
                        visited.add(child.id)
                        stack.append((child.id, False))

            logfire.info(
                "Comment tree deleted",
                comment_id=str(comment_id),
                deleted_count=len(deleted),
            )
            return deleted
