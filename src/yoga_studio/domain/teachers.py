"""Teacher domain models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Teacher:
    """A teacher who can be attached to sessions."""

    id: int
    first_name: str
    last_name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
