"""Per-message pagination state machine."""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import TYPE_CHECKING, Sequence

from .completion import CancellationToken, CompletionSignal
from .controls import (
    NAVIGATION_KINDS,
    CleanupBehavior,
    Control,
    ControlKind,
    NavigationBehavior,
    PaginationButtons,
)
from .page import Page, RenderedPage

if TYPE_CHECKING:
    from ..interfaces import Message, MessageTransport

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """Lifecycle of a pagination session."""

    ACTIVE = "active"
    COMPLETING = "completing"
    ENDED = "ended"


class PaginationSession:
    """Page index and control state for one paginated message.

    Navigation is synchronous and only applies while the session is ACTIVE.
    The session ends when its completion signal resolves (stop, cancellation
    or forced teardown) and cleanup() has run. Cleanup runs at most once.
    """

    def __init__(
        self,
        message: Message,
        owner_id: str,
        pages: Sequence[Page],
        transport: MessageTransport,
        buttons: PaginationButtons | None = None,
        navigation: NavigationBehavior = NavigationBehavior.CLAMP,
        cleanup: CleanupBehavior = CleanupBehavior.DISABLE,
        cancellation: CancellationToken | None = None,
    ):
        """
        Initialize the session at the first page.

        Args:
            message: The remote message being paginated.
            owner_id: The only user allowed to drive this session.
            pages: Pre-rendered pages; must not be empty.
            transport: Transport used for cleanup.
            buttons: Configured controls (defaults if None).
            navigation: Clamp or wrap-around boundary behaviour.
            cleanup: Action applied to the message when the session ends.
            cancellation: External token that ends the session as cancelled.
        """
        if not pages:
            raise ValueError("A pagination session needs at least one page")

        self.message = message
        self.owner_id = owner_id
        self.pages: tuple[Page, ...] = tuple(pages)
        self.transport = transport
        self.buttons = buttons or PaginationButtons()
        self.navigation = navigation
        self.cleanup_behavior = cleanup
        self.cancellation = cancellation
        self.completion = CompletionSignal()

        # Set once a dispatcher has registered the session
        self.started = threading.Event()

        # Held by the dispatcher across navigate + render
        self.lock = threading.RLock()

        self._state_lock = threading.Lock()
        self._cleanup_started = False
        self._ended = False
        self._index = 0
        self._disabled = disabled_controls(self._index, self.page_count, navigation)

        if cancellation is not None:
            cancellation.register(self._on_cancelled)

    @property
    def message_id(self) -> str:
        return self.message.id

    @property
    def index(self) -> int:
        """Current zero-based page index."""
        return self._index

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def state(self) -> SessionState:
        with self._state_lock:
            if self._ended:
                return SessionState.ENDED
            if self._cleanup_started or self.completion.is_resolved():
                return SessionState.COMPLETING
            return SessionState.ACTIVE

    def is_active(self) -> bool:
        """Check if navigation is still meaningful."""
        return self.state is SessionState.ACTIVE

    def navigate(self, kind: ControlKind) -> bool:
        """
        Apply the operation bound to a control.

        Args:
            kind: The control that was pressed.

        Returns:
            True if the operation was applied, False if the session is no
            longer active.
        """
        operations = {
            ControlKind.FIRST: self.first,
            ControlKind.PREVIOUS: self.previous,
            ControlKind.STOP: self.stop,
            ControlKind.NEXT: self.next,
            ControlKind.LAST: self.last,
        }
        return operations[kind]()

    def first(self) -> bool:
        """Skip to the first page (or to the last one when wrapping from the start)."""
        last = self.page_count - 1
        if self.navigation is NavigationBehavior.WRAP_AROUND and self._index == 0:
            return self._move_to(last)
        return self._move_to(0)

    def last(self) -> bool:
        """Skip to the last page (or to the first one when wrapping from anywhere but the start)."""
        last = self.page_count - 1
        if self.navigation is NavigationBehavior.WRAP_AROUND:
            return self._move_to(last if self._index == 0 else 0)
        return self._move_to(last)

    def next(self) -> bool:
        """Advance one page."""
        target = self._index + 1
        if target >= self.page_count:
            target = 0 if self.navigation is NavigationBehavior.WRAP_AROUND else self.page_count - 1
        return self._move_to(target)

    def previous(self) -> bool:
        """Go back one page."""
        target = self._index - 1
        if target < 0:
            target = self.page_count - 1 if self.navigation is NavigationBehavior.WRAP_AROUND else 0
        return self._move_to(target)

    def stop(self) -> bool:
        """Resolve the session as stopped. Idempotent."""
        if self.completion.resolve(True):
            logger.info(f"[{self.message_id}] Stopped by owner")
            return True
        return False

    def get_page(self) -> Page:
        """Get the page at the current index."""
        return self.pages[self._index]

    def get_controls(self) -> tuple[Control, ...]:
        """Get the control row reflecting the current enabled/disabled flags."""
        return self.buttons.row(self._disabled)

    def render(self) -> RenderedPage:
        """Build a fresh render of the current page and controls."""
        return RenderedPage.from_page(self.get_page(), self.get_controls())

    def wait(self, timeout: float | None = None) -> bool | None:
        """Block until the session's completion signal resolves."""
        return self.completion.wait(timeout=timeout)

    def cleanup(self) -> None:
        """
        Apply the cleanup behaviour to the message, once.

        Always resolves completion, even if the transport call fails; the
        transport error still propagates to the caller.
        """
        with self._state_lock:
            if self._cleanup_started:
                logger.debug(f"[{self.message_id}] Cleanup already ran")
                return
            self._cleanup_started = True

        logger.info(f"[{self.message_id}] Cleaning up ({self.cleanup_behavior.value})")
        try:
            if self.cleanup_behavior is CleanupBehavior.DISABLE:
                self._disabled = frozenset(ControlKind)
                message = self.transport.fetch_message(self.message_id)
                controls = message.controls or self.buttons.controls()
                self.transport.edit_message(
                    self.message_id,
                    message.content,
                    message.embeds,
                    tuple(control.disable() for control in controls),
                )
            elif self.cleanup_behavior is CleanupBehavior.DELETE:
                self.transport.delete_message(self.message_id)
        finally:
            self.completion.resolve(True)
            with self._state_lock:
                self._ended = True

    def _on_cancelled(self) -> None:
        if self.completion.resolve(False):
            logger.info(f"[{self.message_id}] Cancelled")

    def _move_to(self, target: int) -> bool:
        if not self.is_active():
            logger.debug(f"[{self.message_id}] Ignoring navigation on inactive session")
            return False

        self._index = target
        self._disabled = disabled_controls(self._index, self.page_count, self.navigation)
        logger.debug(f"[{self.message_id}] Page {self._index + 1}/{self.page_count}")
        return True


def disabled_controls(
    index: int, page_count: int, navigation: NavigationBehavior
) -> frozenset[ControlKind]:
    """
    Derive which controls are disabled at a given position.

    Single-page content disables all navigation. Wrap-around never disables
    anything; clamping disables the controls pointing past either end.

    Args:
        index: Current zero-based page index.
        page_count: Number of pages.
        navigation: Boundary behaviour.

    Returns:
        The disabled control kinds.
    """
    if page_count == 1:
        return NAVIGATION_KINDS

    if navigation is NavigationBehavior.WRAP_AROUND:
        return frozenset()

    disabled = set()
    if index == 0:
        disabled.update({ControlKind.FIRST, ControlKind.PREVIOUS})
    if index == page_count - 1:
        disabled.update({ControlKind.NEXT, ControlKind.LAST})
    return frozenset(disabled)
