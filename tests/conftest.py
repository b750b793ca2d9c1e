"""Test configuration and helpers."""

from datetime import datetime, timedelta
from uuid import uuid4

from board.application.usecase.comment import AuthorResponse, CommentNodeResponse
from board.config import Settings
from board.domain.model import Comment, CommentEvent, User
from board.domain.repository import UnitOfWork
from board.domain.service import EventBroadcaster
from board.domain.value import CommentId, Content, UserId
from board.util.jwt import create_token

BASE_TIME = datetime(2024, 3, 1, 12, 0)


def make_user(name: str = "Alex", email: str | None = None) -> User:
    """Build a user with a fresh ID."""
    return User(
        id=UserId(uuid4()),
        name=name,
        email=email or f"{name.lower()}@example.com",
        avatar_url=f"https://avatars.example.com/{name.lower()}.png",
        created_at=BASE_TIME,
        updated_at=BASE_TIME,
    )


def make_comment(
    author_id: UserId,
    parent_id: CommentId | None = None,
    minutes: int = 0,
    content: str = "Test comment",
) -> Comment:
    """Build a comment created `minutes` after BASE_TIME."""
    created_at = BASE_TIME + timedelta(minutes=minutes)
    return Comment(
        id=CommentId(uuid4()),
        author_id=author_id,
        content=Content(content),
        parent_id=parent_id,
        created_at=created_at,
        updated_at=created_at,
    )


def make_token(user: User) -> str:
    """Sign a login token for a user with the configured auth settings."""
    return create_token(str(user.id), user.name, Settings().auth)


class RecordingBroadcaster(EventBroadcaster):
    """Broadcaster that keeps published events for assertions.

    Pass a shared log to check ordering against other recorders.
    """

    def __init__(self, log: list[str] | None = None) -> None:
        self.events: list[CommentEvent] = []
        self.log = log if log is not None else []

    def publish(self, event: CommentEvent) -> None:
        self.log.append("publish")
        self.events.append(event)


class RecordingUnitOfWork(UnitOfWork):
    """Unit of work that logs commits, or fails them when asked to."""

    def __init__(self, log: list[str] | None = None, fail: bool = False) -> None:
        self.log = log if log is not None else []
        self.fail = fail

    async def commit(self) -> None:
        if self.fail:
            raise RuntimeError("commit failed")
        self.log.append("commit")


def make_node(
    content: str,
    *replies: CommentNodeResponse,
    author_id: str | None = "user-1",
    created_at: datetime = BASE_TIME,
) -> CommentNodeResponse:
    """Build a client-side comment node with the given replies."""
    comment_id = str(uuid4())
    for reply in replies:
        reply.parent_id = comment_id
    author = (
        AuthorResponse(user_id=author_id, name=f"Author {author_id}")
        if author_id
        else None
    )
    return CommentNodeResponse(
        comment_id=comment_id,
        content=content,
        parent_id=None,
        author=author,
        created_at=created_at,
        updated_at=created_at,
        replies=list(replies),
    )
