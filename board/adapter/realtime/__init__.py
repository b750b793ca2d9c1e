"""Real-time event fan-out."""

from .registry import Connection, ConnectionRegistry, SubscriberHandle

__all__ = ["Connection", "ConnectionRegistry", "SubscriberHandle"]
