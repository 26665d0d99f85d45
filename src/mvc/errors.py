"""Exceptions raised by the MVC core."""


class MVCError(Exception):
    """Base class for MVC contract violations."""


class HandlerNotFoundError(MVCError, LookupError):
    """Raised when a model is asked to handle an event it has no handler for."""

    def __init__(self, event: str, known: frozenset[str] | None = None) -> None:
        self.event = event
        self.known = known or frozenset()
        message = f"No handler for event {event!r}"
        if self.known:
            message += f" (known events: {', '.join(sorted(self.known))})"
        super().__init__(message)


class HandlerTableError(MVCError, TypeError):
    """Raised when a handler table does not match its declared event map."""
