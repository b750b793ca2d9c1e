"""Event broadcaster interface."""

from abc import ABC, abstractmethod

from board.domain.model import CommentEvent


class EventBroadcaster(ABC):
    """Fan-out notifier for comment events.

    Delivery is best-effort and at-most-once to whoever is connected right
    now. publish must not block the caller or raise on delivery failure.
    """

    @abstractmethod
    def publish(self, event: CommentEvent) -> None:
        """Queue an event for every connected subscriber.

        Args:
            event: Event to deliver
        """
        pass
