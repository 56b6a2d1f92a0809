"""Tests for the PubSubInteractionSource module."""

from button_pager.interfaces import InteractionEvent
from button_pager.transport.pubsub_source import PubSubInteractionSource


class TestPubSubInteractionSource:
    """Tests for PubSubInteractionSource."""

    def test_subscriber_receives_events(self, pubsub_topic):
        """Published events are delivered to subscribers."""
        source = PubSubInteractionSource(topic=pubsub_topic)
        received = []

        def listener(event):
            received.append(event)

        subscription = source.subscribe(listener)
        event = InteractionEvent(message_id="m1", user_id="u1", custom_id="right")
        source.publish(event)

        assert received == [event]
        subscription.release()

    def test_release_stops_delivery(self, pubsub_topic):
        """A released subscription gets no more events."""
        source = PubSubInteractionSource(topic=pubsub_topic)
        received = []

        def listener(event):
            received.append(event)

        subscription = source.subscribe(listener)
        subscription.release()
        source.publish(InteractionEvent(message_id="m1", user_id="u1", custom_id="right"))

        assert received == []
        assert subscription.released is True

    def test_release_twice(self, pubsub_topic):
        """Releasing twice is harmless."""
        source = PubSubInteractionSource(topic=pubsub_topic)

        def listener(event):
            pass

        subscription = source.subscribe(listener)
        subscription.release()
        subscription.release()
        assert subscription.released is True

    def test_publish_without_subscribers(self, pubsub_topic):
        """Publishing with nobody listening does nothing."""
        source = PubSubInteractionSource(topic=pubsub_topic)
        source.publish(InteractionEvent(message_id="m1", user_id="u1", custom_id="right"))
