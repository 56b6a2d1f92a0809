"""Message transport that renders paginated messages to a text stream."""

import logging
import sys
import threading
from dataclasses import replace
from typing import TextIO

from ..core import Control, Embed
from ..errors import TransportError
from ..interfaces import InteractionEvent, Message, MessageTransport

logger = logging.getLogger(__name__)


class ConsoleTransport(MessageTransport):
    """In-memory message store that prints every send and edit.

    Message ids are sequential strings starting at "1".
    """

    def __init__(self, stream: TextIO | None = None):
        """
        Initialize the transport.

        Args:
            stream: Where renders are written (defaults to stdout).
        """
        self.stream = stream if stream is not None else sys.stdout
        self._messages: dict[str, Message] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def send_message(
        self,
        channel_id: str,
        content: str,
        embeds: tuple[Embed, ...] = (),
        controls: tuple[Control, ...] = (),
    ) -> Message:
        with self._lock:
            message = Message(
                id=str(self._next_id),
                channel_id=channel_id,
                content=content,
                embeds=tuple(embeds),
                controls=tuple(controls),
            )
            self._next_id += 1
            self._messages[message.id] = message

        self._write(format_message(message))
        return message

    def fetch_message(self, message_id: str) -> Message:
        with self._lock:
            return self._get(message_id)

    def edit_message(
        self,
        message_id: str,
        content: str,
        embeds: tuple[Embed, ...] = (),
        controls: tuple[Control, ...] = (),
    ) -> Message:
        with self._lock:
            message = replace(
                self._get(message_id),
                content=content,
                embeds=tuple(embeds),
                controls=tuple(controls),
            )
            self._messages[message_id] = message

        self._write(format_message(message))
        return message

    def delete_message(self, message_id: str) -> None:
        with self._lock:
            self._get(message_id)
            del self._messages[message_id]

        self._write(f"(message {message_id} deleted)")

    def acknowledge(self, event: InteractionEvent) -> None:
        # Nothing on the other end is waiting for a console acknowledgement
        logger.debug(f"[{event.message_id}] Acknowledged {event.custom_id}")

    def _get(self, message_id: str) -> Message:
        try:
            return self._messages[message_id]
        except KeyError:
            raise TransportError(f"Unknown message: {message_id}") from None

    def _write(self, text: str) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()


def format_message(message: Message) -> str:
    """
    Render a message as plain text.

    Embeds are drawn as a '|'-prefixed block. Enabled controls are shown
    as [label], disabled ones as (label).
    """
    lines = [f"--- message {message.id} ---"]

    if message.content:
        lines.append(message.content)

    for embed in message.embeds:
        if embed.title:
            lines.append(f"| {embed.title}")
        if embed.description:
            lines.extend(f"| {line}" for line in embed.description.splitlines())
        if embed.footer:
            lines.append(f"| -- {embed.footer}")

    if message.controls:
        lines.append(" ".join(
            f"({control.label})" if control.disabled else f"[{control.label}]"
            for control in message.controls
        ))

    return "\n".join(lines)
