"""Core components for the button pager."""

from .command_parser import CommandParser, Command, PressCommand, HelpCommand, InvalidCommand
from .completion import CancellationToken, CompletionSignal
from .content_chunker import ContentChunker
from .controls import (
    CleanupBehavior,
    Control,
    ControlKind,
    NavigationBehavior,
    PaginationButtons,
)
from .page import Embed, Page, RenderedPage
from .session import PaginationSession, SessionState, disabled_controls

__all__ = [
    "CommandParser",
    "Command",
    "PressCommand",
    "HelpCommand",
    "InvalidCommand",
    "CancellationToken",
    "CompletionSignal",
    "ContentChunker",
    "CleanupBehavior",
    "Control",
    "ControlKind",
    "NavigationBehavior",
    "PaginationButtons",
    "Embed",
    "Page",
    "RenderedPage",
    "PaginationSession",
    "SessionState",
    "disabled_controls",
]
