"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from board.domain.model.user import User
from board.domain.value import UserId


class UserRepository(ABC):
    """Repository for User entity.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UserId]) -> List[User]:
        """Find several users at once.

        Unknown IDs are skipped.

        Args:
            user_ids: User identifiers

        Returns:
            The users that exist
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
