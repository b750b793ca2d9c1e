"""Get comments use case."""

from pydantic import BaseModel

from board.domain.service import CommentService, UserService, count_nodes, iter_forest

from .schemas import CommentNodeResponse


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentNodeResponse]
    total: int


class GetCommentsUseCase:
    """Use case for reading the whole board as a reply forest."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            user_service: User service for author projections
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self) -> GetCommentsResponse:
        """Execute get comments flow.

        Steps:
        1. Rebuild the reply forest from the full comment snapshot
        2. Load every author appearing in the forest in one lookup
        3. Convert to response models with name and avatar attached

        Returns:
            Root comments with nested replies and the number of nodes shown
        """
        forest = await self.comment_service.get_comment_forest()

        authors = await self.user_service.get_authors(
            node.comment.author_id for node, _ in iter_forest(forest)
        )

        return GetCommentsResponse(
            comments=CommentNodeResponse.from_forest(forest, authors),
            total=count_nodes(forest),
        )
