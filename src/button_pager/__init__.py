"""Button-driven pagination sessions for interactive messages."""

from .config import Config, load_config
from .core import (
    CancellationToken,
    CleanupBehavior,
    ContentChunker,
    Control,
    ControlKind,
    Embed,
    NavigationBehavior,
    Page,
    PaginationButtons,
    PaginationSession,
    SessionState,
)
from .dispatcher import Dispatcher
from .errors import DuplicateSessionError, PaginationError, TransportError
from .interfaces import InteractionEvent, InteractionSource, Message, MessageTransport

__version__ = "0.1.0"

__all__ = [
    "Config",
    "load_config",
    "CancellationToken",
    "CleanupBehavior",
    "ContentChunker",
    "Control",
    "ControlKind",
    "Embed",
    "NavigationBehavior",
    "Page",
    "PaginationButtons",
    "PaginationSession",
    "SessionState",
    "Dispatcher",
    "DuplicateSessionError",
    "PaginationError",
    "TransportError",
    "InteractionEvent",
    "InteractionSource",
    "Message",
    "MessageTransport",
]
