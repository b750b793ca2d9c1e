"""User domain service."""

from collections.abc import Iterable

import logfire

from board.domain.error import NotFoundError
from board.domain.model import User
from board.domain.repository import UserRepository
from board.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info("User found", user_id=str(user_id), name=user.name)
            return user

    async def get_authors(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Load the authors of a set of comments in one lookup.

        Args:
            user_ids: Author IDs, duplicates allowed

        Returns:
            Mapping of user ID to user for the authors that still exist
        """
        unique_ids = set(user_ids)
        with logfire.span("user_service.get_authors", requested=len(unique_ids)):
            if not unique_ids:
                return {}
            users = await self.user_repository.find_by_ids(unique_ids)
            if len(users) < len(unique_ids):
                logfire.warn(
                    "Some comment authors not found",
                    requested=len(unique_ids),
                    found=len(users),
                )
            return {user.id: user for user in users}

    async def save(self, user: User) -> User:
        """Save user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        with logfire.span("user_service.save", user_id=str(user.id), name=user.name):
            saved = await self.user_repository.save(user)
            logfire.info("User saved", user_id=str(saved.id), name=saved.name)
            return saved
