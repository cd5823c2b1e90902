"""Domain models for bookable sessions."""

from dataclasses import dataclass, field
from datetime import date, datetime

from yoga_studio.domain.teachers import Teacher


@dataclass(frozen=True)
class YogaSession:
    """A scheduled class with its teacher and participant roster."""

    id: int
    name: str
    date: date
    description: str
    teacher: Teacher
    participant_ids: list[int] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class SessionDraft:
    """Validated fields for a new session."""

    name: str
    date: date
    description: str
    teacher_id: int
