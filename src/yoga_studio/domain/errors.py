"""Domain error taxonomy."""


class StudioError(Exception):
    """Base class for expected domain failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(StudioError):
    """Malformed or missing input."""


class Unauthenticated(StudioError):
    """Missing, invalid or expired credentials."""


class InvalidCredentials(Unauthenticated):
    """Login failed for an unknown email or a wrong password."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class Forbidden(StudioError):
    """Authenticated but not permitted."""


class NotFound(StudioError):
    """A referenced entity does not exist."""


class Conflict(StudioError):
    """A uniqueness rule would be violated."""


class DuplicateRecordError(Exception):
    """Raised by repositories when the store rejects a duplicate key."""
