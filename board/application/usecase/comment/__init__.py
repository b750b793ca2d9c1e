"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comments import GetCommentsResponse, GetCommentsUseCase
from .schemas import AuthorResponse, CommentNodeResponse

__all__ = [
    "AuthorResponse",
    "CommentNodeResponse",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentsResponse",
    "GetCommentsUseCase",
]
