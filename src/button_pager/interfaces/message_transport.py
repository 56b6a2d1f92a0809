"""Abstract interface for message transport."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from ..core.controls import Control
from ..core.page import Embed
from .interaction_source import InteractionEvent


@dataclass(frozen=True)
class Message:
    """A remote message as last seen by the transport."""

    id: str
    channel_id: str
    content: str = ""
    embeds: tuple[Embed, ...] = field(default_factory=tuple)
    controls: tuple[Control, ...] = field(default_factory=tuple)


class MessageTransport(ABC):
    """Abstract interface for creating, editing and deleting remote messages.

    Every method may raise TransportError.
    """

    @abstractmethod
    def send_message(
        self,
        channel_id: str,
        content: str,
        embeds: tuple[Embed, ...] = (),
        controls: tuple[Control, ...] = (),
    ) -> Message:
        """Create a new message in a channel and return it."""
        pass

    @abstractmethod
    def fetch_message(self, message_id: str) -> Message:
        """Fetch the current state of a message."""
        pass

    @abstractmethod
    def edit_message(
        self,
        message_id: str,
        content: str,
        embeds: tuple[Embed, ...] = (),
        controls: tuple[Control, ...] = (),
    ) -> Message:
        """Replace a message's content, embeds and control row."""
        pass

    @abstractmethod
    def delete_message(self, message_id: str) -> None:
        """Delete a message."""
        pass

    @abstractmethod
    def acknowledge(self, event: InteractionEvent) -> None:
        """Acknowledge an interaction so the remote side stops waiting on it."""
        pass
