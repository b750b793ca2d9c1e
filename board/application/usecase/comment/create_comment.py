"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.model import AuthorSummary, CommentCreatedEvent
from board.domain.repository import UnitOfWork
from board.domain.service import CommentService, EventBroadcaster, UserService
from board.domain.value import CommentId, UserId

from .schemas import CommentNodeResponse


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    author_id: str  # User ID from the authenticated caller, never the body
    content: str
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentUseCase(BaseUseCase):
    """Use case for posting a top-level comment or a reply."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
        broadcaster: EventBroadcaster,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
            unit_of_work: Commit boundary, committed before broadcasting
            broadcaster: Live event broadcaster
        """
        self.comment_service = comment_service
        self.user_service = user_service
        self.unit_of_work = unit_of_work
        self.broadcaster = broadcaster

    async def execute(self, request: CreateCommentRequest) -> CommentNodeResponse:
        """Execute create comment flow.

        Steps:
        1. Load the author (must exist)
        2. Create the comment (service validates content and parent)
        3. Commit, so subscribers that refetch see the new comment
        4. Broadcast CommentCreated with the author populated
        5. Return the created comment, author email included

        Args:
            request: Create comment request

        Returns:
            The created comment with an empty reply list

        Raises:
            NotFoundError: If the author or the parent comment does not exist
            ValidationError: If the content is empty
            ValueError: If an ID is not a valid UUID
        """
        author_id = UserId(UUID(request.author_id))
        parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None

        author = await self.user_service.get_by_id(author_id)

        comment = await self.comment_service.create_comment(
            author_id=author_id,
            content=request.content,
            parent_id=parent_id,
        )

        await self.unit_of_work.commit()

        summary = AuthorSummary.from_user(author, include_email=True)
        self.broadcaster.publish(CommentCreatedEvent(comment=comment, author=summary))

        return CommentNodeResponse.from_comment(comment, summary)
