"""Session catalog and participation roster."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol

from yoga_studio.domain.errors import (
    Conflict,
    DuplicateRecordError,
    NotFound,
    ValidationError,
)
from yoga_studio.domain.sessions import SessionDraft, YogaSession
from yoga_studio.services.teachers import TeacherRepository
from yoga_studio.services.users import UserRepository

_logger = logging.getLogger(__name__)

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 2500
_ALREADY_PARTICIPATING_MESSAGE = "User already participating in this session"


class SessionRepository(Protocol):
    """Persistence interface for sessions and their participations."""

    def list_sessions(self) -> list[YogaSession]:
        """Return all sessions ordered by id."""

    def get_session(self, session_id: int) -> YogaSession | None:
        """Return a session by id, if present."""

    def create_session(self, draft: SessionDraft) -> YogaSession:
        """Create a session with an empty roster and return it."""

    def update_session(
        self, session_id: int, changes: dict[str, object]
    ) -> YogaSession:
        """Apply field changes to a session and return it."""

    def delete_session(self, session_id: int) -> None:
        """Delete a session and its participations."""

    def has_participant(self, session_id: int, user_id: int) -> bool:
        """Return True when the user participates in the session."""

    def add_participant(self, session_id: int, user_id: int) -> None:
        """Insert a participation, raising DuplicateRecordError if it exists."""

    def remove_participant(self, session_id: int, user_id: int) -> None:
        """Remove a participation."""


@dataclass
class SessionRegistry:
    """Application service for the session catalog.

    Admin gating happens before these methods are called; the registry only
    enforces field rules and referential checks.
    """

    repository: SessionRepository
    teacher_repository: TeacherRepository
    user_repository: UserRepository

    def list_sessions(self) -> list[YogaSession]:
        """Return every session with teacher and participants."""
        return self.repository.list_sessions()

    def get_session(self, session_id: int) -> YogaSession:
        """Return a session or raise NotFound."""
        session = self.repository.get_session(session_id)
        if session is None:
            raise NotFound("Session not found")
        return session

    def create_session(
        self,
        name: str | None,
        session_date: str | date | None,
        description: str | None,
        teacher_id: int | None,
    ) -> YogaSession:
        """Validate and persist a new session."""
        if not name:
            raise ValidationError("Name is required")
        if not session_date:
            raise ValidationError("Date is required")
        if not description:
            raise ValidationError("Description is required")
        if not teacher_id:
            raise ValidationError("Teacher ID is required")
        draft = SessionDraft(
            name=_validate_name(name),
            date=_parse_date(session_date),
            description=_validate_description(description),
            teacher_id=teacher_id,
        )
        self._require_teacher(draft.teacher_id)
        session = self.repository.create_session(draft)
        _logger.info("Created session: session_id=%s", session.id)
        return session

    def update_session(
        self,
        session_id: int,
        name: str | None = None,
        session_date: str | date | None = None,
        description: str | None = None,
        teacher_id: int | None = None,
    ) -> YogaSession:
        """Apply the supplied fields to an existing session."""
        self.get_session(session_id)
        changes: dict[str, object] = {}
        if name is not None:
            changes["name"] = _validate_name(name)
        if session_date is not None:
            changes["date"] = _parse_date(session_date)
        if description is not None:
            changes["description"] = _validate_description(description)
        if teacher_id is not None:
            self._require_teacher(teacher_id)
            changes["teacher_id"] = teacher_id
        return self.repository.update_session(session_id, changes)

    def delete_session(self, session_id: int) -> None:
        """Delete a session and its roster."""
        self.get_session(session_id)
        self.repository.delete_session(session_id)
        _logger.info("Deleted session: session_id=%s", session_id)

    def join(self, session_id: int, user_id: int) -> None:
        """Add a user to a session roster."""
        self.get_session(session_id)
        if self.user_repository.get_by_id(user_id) is None:
            raise NotFound("User not found")
        if self.repository.has_participant(session_id, user_id):
            raise Conflict(_ALREADY_PARTICIPATING_MESSAGE)
        try:
            self.repository.add_participant(session_id, user_id)
        except DuplicateRecordError as exc:
            raise Conflict(_ALREADY_PARTICIPATING_MESSAGE) from exc
        _logger.info("User joined session: session_id=%s user_id=%s", session_id, user_id)

    def leave(self, session_id: int, user_id: int) -> None:
        """Remove a user from a session roster."""
        if not self.repository.has_participant(session_id, user_id):
            raise NotFound("Participation not found")
        self.repository.remove_participant(session_id, user_id)
        _logger.info("User left session: session_id=%s user_id=%s", session_id, user_id)

    def _require_teacher(self, teacher_id: int) -> None:
        if self.teacher_repository.get_teacher(teacher_id) is None:
            raise NotFound("Teacher not found")


def _validate_name(name: str) -> str:
    cleaned = name.strip()
    if not NAME_MIN_LENGTH <= len(cleaned) <= NAME_MAX_LENGTH:
        raise ValidationError(
            f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
        )
    return cleaned


def _validate_description(description: str) -> str:
    if not description.strip():
        raise ValidationError("Description is required")
    if len(description) > DESCRIPTION_MAX_LENGTH:
        raise ValidationError(
            f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters"
        )
    return description


def _parse_date(value: str | date) -> date:
    """Accept a calendar date or an ISO date/datetime string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        raise ValidationError("Invalid date") from None
