"""User domain models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: int
    email: str
    password_hash: str
    first_name: str
    last_name: str
    admin: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class AuthenticatedUser:
    """A user together with a freshly issued bearer token."""

    user: UserRecord
    token: str
