"""User entity and its public projection."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import UserId


class User(DomainModel):
    """User who authors comments.

    Credentials live with the external identity provider; the board only
    keeps the profile fields it displays.
    """

    id: UserId
    name: str = Field(min_length=1, max_length=255)
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class AuthorSummary(DomainModel):
    """Minimal author projection attached to comments."""

    id: UserId
    name: str
    avatar_url: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_user(cls, user: User, include_email: bool = False) -> "AuthorSummary":
        """Project a user, optionally keeping the email address."""
        return cls(
            id=user.id,
            name=user.name,
            avatar_url=user.avatar_url,
            email=user.email if include_email else None,
        )
