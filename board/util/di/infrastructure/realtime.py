"""Live channel infrastructure provider."""

from dishka import Scope, provide

from board.adapter.realtime import ConnectionRegistry
from board.config import RealtimeSettings
from board.domain.service import EventBroadcaster
from board.util.di.base import ProviderBase


class RealtimeProvider(ProviderBase):
    """Subscriber registry provider - concrete, shared by the whole app.

    Has no external dependency, so tests use the real registry.
    """

    @provide(scope=Scope.APP)
    def get_connection_registry(
        self, realtime_settings: RealtimeSettings
    ) -> ConnectionRegistry:
        """Provide the live subscriber registry."""
        return ConnectionRegistry(
            max_connections=realtime_settings.max_connections,
            queue_size=realtime_settings.queue_size,
        )

    @provide(scope=Scope.APP)
    def get_event_broadcaster(self, registry: ConnectionRegistry) -> EventBroadcaster:
        """Publish comment events through the registry."""
        return registry
