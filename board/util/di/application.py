"""Application layer DI providers."""

from dishka import Scope, provide

from board.application.usecase.auth import GetCurrentUserUseCase
from board.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
)
from board.domain.repository import UnitOfWork
from board.domain.service import (
    CommentService,
    EventBroadcaster,
    JWTService,
    UserService,
)
from board.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self,
        jwt_service: JWTService,
        user_service: UserService,
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service,
            user_service=user_service,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_comments_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
        broadcaster: EventBroadcaster,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            user_service=user_service,
            unit_of_work=unit_of_work,
            broadcaster=broadcaster,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        unit_of_work: UnitOfWork,
        broadcaster: EventBroadcaster,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service,
            unit_of_work=unit_of_work,
            broadcaster=broadcaster,
        )
