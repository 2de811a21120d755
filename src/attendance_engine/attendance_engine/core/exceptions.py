class DomainError(Exception):
    """Base exception for business rule violations."""


class InvalidEvent(DomainError):
    """Raised when an attendance event has a malformed shape."""


class SessionRejected(InvalidEvent):
    """Raised when an event references a check-in session that is not valid."""


class DuplicateSession(DomainError):
    """Raised when a unique session value could not be allocated."""
