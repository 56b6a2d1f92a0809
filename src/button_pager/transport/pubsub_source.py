"""Interaction source backed by the pypubsub message bus."""

import logging
from typing import Callable

from pubsub import pub

from ..interfaces import InteractionEvent, InteractionSource, Subscription

logger = logging.getLogger(__name__)

DEFAULT_TOPIC = "button_pager.interaction"


def _interaction_listener(event: InteractionEvent) -> None:
    """Prototype listener declaring the topic's message data."""


class PubSubSubscription(Subscription):
    """A listener registered on a pubsub topic."""

    def __init__(self, topic: str, callback: Callable[[InteractionEvent], None]):
        # pypubsub only keeps weak references; this handle keeps the callback alive
        self.topic = topic
        self.callback = callback
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Unsubscribe the callback from the topic."""
        if self._released:
            return
        self._released = True
        pub.unsubscribe(self.callback, self.topic)
        logger.debug(f"Unsubscribed from {self.topic}")


class PubSubInteractionSource(InteractionSource):
    """Delivers interaction events published on a pubsub topic.

    Events are delivered synchronously on the publishing thread.
    """

    def __init__(self, topic: str = DEFAULT_TOPIC):
        """
        Initialize the source.

        Args:
            topic: Pubsub topic name carrying InteractionEvent messages.
        """
        self.topic = topic
        pub.getDefaultTopicMgr().getOrCreateTopic(topic, _interaction_listener)

    def subscribe(self, callback: Callable[[InteractionEvent], None]) -> PubSubSubscription:
        """Register a callback for every event published on the topic."""
        pub.subscribe(callback, self.topic)
        logger.debug(f"Subscribed to {self.topic}")
        return PubSubSubscription(self.topic, callback)

    def publish(self, event: InteractionEvent) -> None:
        """Publish an interaction to every subscriber."""
        pub.sendMessage(self.topic, event=event)
