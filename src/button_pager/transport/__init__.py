"""Concrete transports and event sources."""

from .console_transport import ConsoleTransport
from .pubsub_source import PubSubInteractionSource, PubSubSubscription

__all__ = ["ConsoleTransport", "PubSubInteractionSource", "PubSubSubscription"]
