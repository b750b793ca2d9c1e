"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Commit boundary for the repositories of one request.

    Writers that notify other clients commit through this before publishing,
    so a notified client always reads the change back.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Make every pending repository change durable.

        Raises:
            Exception: Whatever the store raises when the commit fails; the
                changes are then discarded
        """
        pass
