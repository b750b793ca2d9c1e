"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.model import CommentDeletedEvent
from board.domain.repository import UnitOfWork
from board.domain.service import CommentService, EventBroadcaster
from board.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    message: str
    comment_id: str
    deleted_count: int


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment together with all of its replies."""

    def __init__(
        self,
        comment_service: CommentService,
        unit_of_work: UnitOfWork,
        broadcaster: EventBroadcaster,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            unit_of_work: Commit boundary, committed before broadcasting
            broadcaster: Live event broadcaster
        """
        self.comment_service = comment_service
        self.unit_of_work = unit_of_work
        self.broadcaster = broadcaster

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        The whole cascade is committed first, then one CommentDeleted event
        is broadcast with the requested ID only; receivers refetch rather
        than prune by ID.

        Args:
            request: Delete comment request

        Returns:
            Confirmation with the number of removed comments

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the comment's author
            ValueError: If an ID is not a valid UUID
        """
        comment_id = CommentId(UUID(request.comment_id))
        user_id = UserId(UUID(request.user_id))

        deleted = await self.comment_service.delete_comment_tree(comment_id, user_id)
        await self.unit_of_work.commit()

        self.broadcaster.publish(CommentDeletedEvent(comment_id=comment_id))

        return DeleteCommentResponse(
            message="Comment deleted successfully",
            comment_id=request.comment_id,
            deleted_count=len(deleted),
        )
