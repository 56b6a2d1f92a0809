"""Exception hierarchy for the button pager."""


class PaginationError(Exception):
    """Base class for all button pager errors."""


class TransportError(PaginationError):
    """Raised by a message transport when a send, fetch, edit or delete fails.

    The pager never retries. A failed render leaves the session open; a
    failed cleanup still ends the session.
    """


class DuplicateSessionError(PaginationError, KeyError):
    """Raised when a second session is started for a message that already has one."""

    def __init__(self, message_id: str):
        super().__init__(message_id)
        self.message_id = message_id

    def __str__(self) -> str:
        return f"A pagination session is already active for message {self.message_id}"
