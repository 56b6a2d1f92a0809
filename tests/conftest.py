"""Pytest configuration and fixtures."""

import threading
import uuid

import pytest

from button_pager.core import Page, PaginationButtons, PaginationSession
from button_pager.errors import TransportError
from button_pager.interfaces import InteractionSource, Message, MessageTransport, Subscription


class RecordingTransport(MessageTransport):
    """Transport double that stores messages and records every call."""

    def __init__(self):
        self.messages: dict[str, Message] = {}
        self.calls: list[tuple[str, str]] = []
        self.edits: list[tuple[str, str, tuple, tuple]] = []
        self.deleted: list[str] = []
        self.acks = []
        self.fail_on: set[str] = set()
        self._next_id = 1
        self._lock = threading.Lock()

    def add(self, message: Message) -> Message:
        self.messages[message.id] = message
        return message

    def send_message(self, channel_id, content, embeds=(), controls=()):
        self._record("send_message", channel_id)
        with self._lock:
            message = Message(
                id=f"msg-{self._next_id}",
                channel_id=channel_id,
                content=content,
                embeds=tuple(embeds),
                controls=tuple(controls),
            )
            self._next_id += 1
        return self.add(message)

    def fetch_message(self, message_id):
        self._record("fetch_message", message_id)
        return self.messages[message_id]

    def edit_message(self, message_id, content, embeds=(), controls=()):
        self._record("edit_message", message_id)
        self.edits.append((message_id, content, tuple(embeds), tuple(controls)))
        message = Message(
            id=message_id,
            channel_id=self.messages[message_id].channel_id,
            content=content,
            embeds=tuple(embeds),
            controls=tuple(controls),
        )
        return self.add(message)

    def delete_message(self, message_id):
        self._record("delete_message", message_id)
        self.deleted.append(message_id)
        self.messages.pop(message_id, None)

    def acknowledge(self, event):
        self._record("acknowledge", event.message_id)
        self.acks.append(event)

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def _record(self, name: str, target: str) -> None:
        self.calls.append((name, target))
        if name in self.fail_on:
            raise TransportError(f"{name} failed")


class FakeSubscription(Subscription):
    def __init__(self, source, callback):
        self.source = source
        self.callback = callback
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        self._released = True
        if self.callback in self.source.callbacks:
            self.source.callbacks.remove(self.callback)


class FakeInteractionSource(InteractionSource):
    """Event source double; emit() delivers on the calling thread."""

    def __init__(self):
        self.callbacks = []
        self.subscriptions = []

    def subscribe(self, callback):
        self.callbacks.append(callback)
        subscription = FakeSubscription(self, callback)
        self.subscriptions.append(subscription)
        return subscription

    def emit(self, event) -> None:
        for callback in list(self.callbacks):
            callback(event)


@pytest.fixture
def transport():
    """A recording transport."""
    return RecordingTransport()


@pytest.fixture
def events():
    """A fake interaction source."""
    return FakeInteractionSource()


@pytest.fixture
def pages():
    """Three text pages."""
    return [Page(content="Page one"), Page(content="Page two"), Page(content="Page three")]


@pytest.fixture
def message(transport):
    """A paginated message already known to the transport."""
    return transport.add(
        Message(
            id="m1",
            channel_id="c1",
            content="Page one",
            controls=PaginationButtons().row(),
        )
    )


@pytest.fixture
def make_session(transport, message, pages):
    """Factory for sessions on the shared message."""

    def factory(**kwargs):
        kwargs.setdefault("pages", pages)
        return PaginationSession(message=message, owner_id="owner", transport=transport, **kwargs)

    return factory


@pytest.fixture
def pubsub_topic():
    """A pubsub topic name unique to the test."""
    return f"button_pager_test_{uuid.uuid4().hex}"
