"""Pydantic request and response bodies for the HTTP API."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from yoga_studio.domain.sessions import YogaSession
from yoga_studio.domain.teachers import Teacher
from yoga_studio.domain.users import AuthenticatedUser, UserRecord


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoginRequest(CamelModel):
    """Login payload."""

    email: str | None = None
    password: str | None = None


class RegisterRequest(CamelModel):
    """Registration payload."""

    email: str | None = None
    password: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class SessionPayload(CamelModel):
    """Session fields for create (all required) and update (any subset)."""

    name: str | None = None
    date: str | None = None
    description: str | None = None
    teacher_id: int | None = None


class MessageResponse(CamelModel):
    """Plain message body."""

    message: str


class UserResponse(CamelModel):
    """Public view of a user."""

    id: int
    email: str
    first_name: str
    last_name: str
    admin: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_record(cls, user: UserRecord) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            admin=user.admin,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class AuthResponse(CamelModel):
    """User profile with a bearer token."""

    id: int
    email: str
    first_name: str
    last_name: str
    admin: bool
    token: str

    @classmethod
    def from_authenticated(cls, result: AuthenticatedUser) -> "AuthResponse":
        return cls(
            id=result.user.id,
            email=result.user.email,
            first_name=result.user.first_name,
            last_name=result.user.last_name,
            admin=result.user.admin,
            token=result.token,
        )


class TeacherSummary(CamelModel):
    """Teacher fields inlined into sessions."""

    id: int
    first_name: str
    last_name: str


class TeacherResponse(TeacherSummary):
    """Full teacher view."""

    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_teacher(cls, teacher: Teacher) -> "TeacherResponse":
        return cls(
            id=teacher.id,
            first_name=teacher.first_name,
            last_name=teacher.last_name,
            created_at=teacher.created_at,
            updated_at=teacher.updated_at,
        )


class SessionResponse(CamelModel):
    """Session with its teacher and participant ids."""

    id: int
    name: str
    date: date
    description: str
    teacher: TeacherSummary
    users: list[int]
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_session(cls, session: YogaSession) -> "SessionResponse":
        return cls(
            id=session.id,
            name=session.name,
            date=session.date,
            description=session.description,
            teacher=TeacherSummary(
                id=session.teacher.id,
                first_name=session.teacher.first_name,
                last_name=session.teacher.last_name,
            ),
            users=list(session.participant_ids),
            created_at=session.created_at,
            updated_at=session.updated_at,
        )
