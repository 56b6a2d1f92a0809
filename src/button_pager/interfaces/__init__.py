"""Abstract interfaces for the button pager's external collaborators."""

from .interaction_source import InteractionEvent, InteractionSource, Subscription
from .message_transport import Message, MessageTransport

__all__ = [
    "InteractionEvent",
    "InteractionSource",
    "Subscription",
    "Message",
    "MessageTransport",
]
