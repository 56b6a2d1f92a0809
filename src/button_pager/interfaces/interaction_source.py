"""Abstract interface for the inbound interaction-event stream."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class InteractionEvent:
    """A user pressing a control attached to a message."""

    message_id: str
    user_id: str
    custom_id: str
    interaction_id: str | None = None


class Subscription(ABC):
    """Owned handle for a registered event callback.

    Releasing it stops delivery. Releasing twice is a no-op.
    """

    @abstractmethod
    def release(self) -> None:
        """Stop delivering events to the callback."""
        pass

    @property
    @abstractmethod
    def released(self) -> bool:
        """Whether release() has been called."""
        pass


class InteractionSource(ABC):
    """Abstract interface for subscribing to inbound interactions."""

    @abstractmethod
    def subscribe(self, callback: Callable[[InteractionEvent], None]) -> Subscription:
        """Register a callback for every inbound interaction.

        Args:
            callback: Called with each InteractionEvent, possibly from a
                      transport-owned thread.

        Returns:
            A Subscription that must be released to stop delivery.
        """
        pass
