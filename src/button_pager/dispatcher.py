"""Dispatcher - session registry and router for inbound button presses."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Sequence

from .config import Config
from .errors import DuplicateSessionError, TransportError
from .core import (
    CancellationToken,
    CleanupBehavior,
    ControlKind,
    NavigationBehavior,
    Page,
    PaginationButtons,
    PaginationSession,
    RenderedPage,
    disabled_controls,
)

if TYPE_CHECKING:
    from .interfaces import InteractionEvent, InteractionSource, MessageTransport

logger = logging.getLogger(__name__)


class Dispatcher:
    """Routes authorized button presses to the session owning each message.

    Subscribes to the interaction source on construction and releases the
    subscription on dispose(). Each start() call blocks until its session
    completes, then deregisters the session and runs its cleanup exactly once.
    """

    def __init__(
        self,
        transport: MessageTransport,
        events: InteractionSource,
        config: Config | None = None,
    ):
        """
        Initialize the dispatcher.

        Args:
            transport: Transport for sending and editing paginated messages.
            events: Source of inbound interaction events.
            config: Pagination configuration (uses defaults if None).
        """
        self.transport = transport
        self.config = config or Config()

        self._sessions: dict[str, PaginationSession] = {}
        self._lock = threading.Lock()
        self._disposed = False
        self._timeouts: dict[str, CancellationToken] = {}

        # Register event handler
        self._subscription = events.subscribe(self._handle_event)

    def __enter__(self) -> "Dispatcher":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    def create_session(
        self,
        channel_id: str,
        owner_id: str,
        pages: Sequence[Page],
        *,
        navigation: NavigationBehavior | None = None,
        cleanup: CleanupBehavior | None = None,
        timeout: float | None = None,
        cancellation: CancellationToken | None = None,
        buttons: PaginationButtons | None = None,
    ) -> PaginationSession:
        """
        Send the first page of a paginated message and build its session.

        Args:
            channel_id: Channel to send the message to.
            owner_id: The only user allowed to press the buttons.
            pages: Pre-rendered pages; must not be empty.
            navigation: Overrides the configured wrap behaviour.
            cleanup: Overrides the configured cleanup behaviour.
            timeout: Seconds before the session is cancelled. Defaults to
                     the configured timeout; ignored if cancellation is given.
            cancellation: Caller-owned cancellation token.
            buttons: Overrides the configured buttons for this message.

        Returns:
            The new session, not yet registered.
        """
        if not pages:
            raise ValueError("Cannot paginate an empty list of pages")

        navigation = navigation or self.config.wrap_behavior
        cleanup = cleanup or self.config.cleanup_behavior
        buttons = buttons or self.config.buttons

        disabled = disabled_controls(0, len(pages), navigation)
        view = RenderedPage.from_page(pages[0], buttons.row(disabled))
        message = self.transport.send_message(channel_id, view.content, view.embeds, view.controls)
        logger.info(f"[{message.id}] Sent paginated message ({len(pages)} pages) for {owner_id}")

        if cancellation is None:
            seconds = timeout if timeout is not None else self.config.timeout_seconds
            if seconds is not None:
                cancellation = CancellationToken.with_timeout(seconds)
                with self._lock:
                    self._timeouts[message.id] = cancellation

        return PaginationSession(
            message=message,
            owner_id=owner_id,
            pages=pages,
            transport=self.transport,
            buttons=buttons,
            navigation=navigation,
            cleanup=cleanup,
            cancellation=cancellation,
        )

    def paginate(self, channel_id: str, owner_id: str, pages: Sequence[Page], **options) -> bool:
        """Send a paginated message and block until its session ends."""
        return self.start(self.create_session(channel_id, owner_id, pages, **options))

    def start(self, session: PaginationSession) -> bool:
        """
        Register a session and block until it ends.

        Args:
            session: The session to drive.

        Returns:
            True if the session was stopped, False if it was cancelled.

        Raises:
            DuplicateSessionError: If the message already has a session.
        """
        message_id = session.message_id
        with self._lock:
            if message_id in self._sessions:
                raise DuplicateSessionError(message_id)
            self._sessions[message_id] = session
        session.started.set()

        logger.info(f"[{message_id}] Pagination started for {session.owner_id}")
        try:
            session.wait()
        finally:
            with self._lock:
                if self._sessions.get(message_id) is session:
                    del self._sessions[message_id]
                timeout = self._timeouts.pop(message_id, None)

            # Waits for an in-flight render so cleanup is the last edit
            try:
                with session.lock:
                    session.cleanup()
            except Exception as e:
                logger.error(f"[{message_id}] Error while cleaning up pagination: {e}")

            if timeout is not None:
                timeout.dispose()

        result = bool(session.completion.result)
        logger.info(f"[{message_id}] Pagination ended ({'stopped' if result else 'cancelled'})")
        return result

    def dispose(self) -> None:
        """
        Forget all sessions and release the event subscription.

        Sessions already blocked in start() are not resolved; they keep
        waiting for their own stop or cancellation.
        """
        with self._lock:
            unstarted = [message_id for message_id in self._timeouts if message_id not in self._sessions]
            timeouts = [self._timeouts.pop(message_id) for message_id in unstarted]
            self._sessions.clear()
            self._disposed = True

        # Timers of sessions that were created but never started
        for timeout in timeouts:
            timeout.dispose()
        self._subscription.release()
        logger.debug("Dispatcher disposed")

    def shutdown(self) -> None:
        """Cancel every registered session, then dispose."""
        with self._lock:
            sessions = list(self._sessions.values())

        logger.info(f"Shutting down {len(sessions)} active session(s)")
        for session in sessions:
            session.completion.resolve(False)
        self.dispose()

    def get_session(self, message_id: str) -> PaginationSession | None:
        """Get the active session for a message, if any."""
        with self._lock:
            return self._sessions.get(message_id)

    def session_count(self) -> int:
        """Get the number of active sessions."""
        with self._lock:
            return len(self._sessions)

    def active_sessions(self) -> list[str]:
        """Get the message ids of all active sessions."""
        with self._lock:
            return list(self._sessions.keys())

    def _handle_event(self, event: InteractionEvent) -> None:
        """
        Handle an inbound button press.

        Events for unknown messages and presses by anyone but the owner
        are ignored without any visible effect.
        """
        with self._lock:
            if self._disposed:
                return
            session = self._sessions.get(event.message_id)

        if session is None:
            return

        if event.user_id != session.owner_id:
            logger.debug(f"[{event.message_id}] Ignoring press by {event.user_id} (not the owner)")
            return

        if self.config.ack_buttons:
            try:
                self.transport.acknowledge(event)
            except TransportError as e:
                logger.error(f"[{event.message_id}] Failed to acknowledge interaction: {e}")

        kind = session.buttons.kind_for(event.custom_id)
        if kind is None:
            logger.warning(f"[{event.message_id}] Unmatched button id: {event.custom_id!r}")
            return

        with session.lock:
            self._apply(session, kind)

    def _apply(self, session: PaginationSession, kind: ControlKind) -> None:
        """Apply a navigation and push the re-rendered page."""
        message_id = session.message_id
        logger.debug(f"[{message_id}] Button: {kind.value}")

        applied = session.navigate(kind)

        # Cleanup owns the message's final look after a stop
        if kind is ControlKind.STOP or not applied:
            return

        view = session.render()
        try:
            self.transport.edit_message(message_id, view.content, view.embeds, view.controls)
        except TransportError as e:
            logger.error(f"[{message_id}] Failed to render page {session.index + 1}: {e}")
