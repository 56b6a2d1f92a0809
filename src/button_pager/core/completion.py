"""Single-assignment completion signal and external cancellation handle."""

import logging
import threading
from typing import Callable

logger = logging.getLogger(__name__)


class CompletionSignal:
    """Resolve-once boolean result shared by racing writers.

    The first call to resolve() wins; later calls are discarded and
    return False instead of raising.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._event = threading.Event()
        self._result: bool | None = None

    def resolve(self, result: bool) -> bool:
        """
        Resolve the signal if nobody has yet.

        Args:
            result: True for a normal stop, False for cancellation.

        Returns:
            True if this call resolved the signal, False if it was already resolved.
        """
        with self._lock:
            if self._event.is_set():
                return False
            self._result = result
            self._event.set()
        return True

    def is_resolved(self) -> bool:
        """Check if the signal has been resolved."""
        return self._event.is_set()

    @property
    def result(self) -> bool | None:
        """The resolved value, or None while unresolved."""
        return self._result

    def wait(self, timeout: float | None = None) -> bool | None:
        """
        Block until the signal resolves.

        Args:
            timeout: Maximum seconds to wait, or None to wait forever.

        Returns:
            The resolved value, or None if the timeout expired first.
        """
        self._event.wait(timeout=timeout)
        return self._result


class CancellationToken:
    """Thread-safe cancellation handle with callbacks.

    Example::

        token = CancellationToken.with_timeout(60)
        token.register(lambda: print("cancelled"))
        token.cancel()  # callbacks run once; later calls do nothing
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._cancelled = False
        self._callbacks: list[Callable[[], None]] = []
        self._timer: threading.Timer | None = None

    @classmethod
    def with_timeout(cls, seconds: float) -> "CancellationToken":
        """Create a token that cancels itself after the given number of seconds."""
        token = cls()
        token._timer = threading.Timer(seconds, token.cancel)
        token._timer.daemon = True
        token._timer.start()
        return token

    @property
    def cancelled(self) -> bool:
        """Whether cancel() has been called (or the timeout fired)."""
        with self._lock:
            return self._cancelled

    def register(self, callback: Callable[[], None]) -> None:
        """
        Register a callback to run on cancellation.

        If the token is already cancelled, the callback runs immediately.
        """
        with self._lock:
            if not self._cancelled:
                self._callbacks.append(callback)
                return
        self._run(callback)

    def cancel(self) -> None:
        """Cancel the token, running each registered callback exactly once."""
        with self._lock:
            if self._cancelled:
                return
            self._cancelled = True
            callbacks, self._callbacks = self._callbacks, []

        self.dispose()
        for callback in callbacks:
            self._run(callback)

    def dispose(self) -> None:
        """Disarm the timeout timer, if any."""
        with self._lock:
            timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()

    @staticmethod
    def _run(callback: Callable[[], None]) -> None:
        try:
            callback()
        except Exception as e:
            logger.error(f"Cancellation callback failed: {e}")
