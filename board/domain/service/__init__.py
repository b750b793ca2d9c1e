"""Domain services."""

from .base import Service
from .broadcast import EventBroadcaster
from .comment_service import CommentService
from .comment_tree import CommentNode, build_comment_forest, count_nodes, iter_forest
from .jwt_service import JWTService
from .user_service import UserService

__all__ = [
    "CommentNode",
    "CommentService",
    "EventBroadcaster",
    "JWTService",
    "Service",
    "UserService",
    "build_comment_forest",
    "count_nodes",
    "iter_forest",
]
