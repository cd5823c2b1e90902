"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from passlib.context import CryptContext

from yoga_studio.api.app import create_app
from yoga_studio.config import Settings
from yoga_studio.containers import AppContainer
from yoga_studio.domain.errors import DuplicateRecordError
from yoga_studio.domain.sessions import SessionDraft, YogaSession
from yoga_studio.domain.teachers import Teacher
from yoga_studio.domain.users import UserRecord
from yoga_studio.services.authorization import AuthorizationGate
from yoga_studio.services.credentials import CredentialService
from yoga_studio.services.sessions import SessionRegistry, SessionRepository
from yoga_studio.services.teachers import TeacherDirectory, TeacherRepository
from yoga_studio.services.tokens import TokenService
from yoga_studio.services.users import UserRepository, UserService

TEST_SECRET = "yoga-studio-test-secret-key-0123456789"


def _tick(clock: list[datetime]) -> datetime:
    clock[0] += timedelta(seconds=1)
    return clock[0]


@dataclass
class InMemoryDatabase:
    """Tables shared by the in-memory repositories."""

    users: dict[int, UserRecord] = field(default_factory=dict)
    teachers: dict[int, Teacher] = field(default_factory=dict)
    sessions: dict[int, dict[str, object]] = field(default_factory=dict)
    participations: set[tuple[int, int]] = field(default_factory=set)
    next_ids: dict[str, int] = field(
        default_factory=lambda: {"users": 1, "teachers": 1, "sessions": 1}
    )
    clock: list[datetime] = field(
        default_factory=lambda: [datetime(2026, 1, 1, tzinfo=UTC)]
    )

    def next_id(self, table: str) -> int:
        value = self.next_ids[table]
        self.next_ids[table] = value + 1
        return value

    def now(self) -> datetime:
        return _tick(self.clock)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    db: InMemoryDatabase = field(default_factory=InMemoryDatabase)

    def get_by_id(self, user_id: int) -> UserRecord | None:
        return self.db.users.get(user_id)

    def get_by_email(self, email: str) -> UserRecord | None:
        return next(
            (user for user in self.db.users.values() if user.email == email), None
        )

    def create_user(
        self, email: str, password_hash: str, first_name: str, last_name: str
    ) -> UserRecord:
        if self.get_by_email(email) is not None:
            raise DuplicateRecordError(email)
        now = self.db.now()
        user = UserRecord(
            id=self.db.next_id("users"),
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
            admin=False,
            created_at=now,
            updated_at=now,
        )
        self.db.users[user.id] = user
        return user

    def set_admin(self, user_id: int, admin: bool) -> UserRecord:
        user = replace(self.db.users[user_id], admin=admin, updated_at=self.db.now())
        self.db.users[user_id] = user
        return user

    def delete_user(self, user_id: int) -> None:
        self.db.users.pop(user_id, None)
        self.db.participations = {
            pair for pair in self.db.participations if pair[1] != user_id
        }


@dataclass
class InMemoryTeacherRepository(TeacherRepository):
    """In-memory teacher repository for tests."""

    db: InMemoryDatabase = field(default_factory=InMemoryDatabase)

    def list_teachers(self) -> list[Teacher]:
        return sorted(
            self.db.teachers.values(),
            key=lambda teacher: (teacher.created_at, teacher.id),
            reverse=True,
        )

    def get_teacher(self, teacher_id: int) -> Teacher | None:
        return self.db.teachers.get(teacher_id)

    def create_teacher(self, first_name: str, last_name: str) -> Teacher:
        now = self.db.now()
        teacher = Teacher(
            id=self.db.next_id("teachers"),
            first_name=first_name,
            last_name=last_name,
            created_at=now,
            updated_at=now,
        )
        self.db.teachers[teacher.id] = teacher
        return teacher


@dataclass
class InMemorySessionRepository(SessionRepository):
    """In-memory session repository for tests."""

    db: InMemoryDatabase = field(default_factory=InMemoryDatabase)

    def list_sessions(self) -> list[YogaSession]:
        return [self._build(session_id) for session_id in sorted(self.db.sessions)]

    def get_session(self, session_id: int) -> YogaSession | None:
        if session_id not in self.db.sessions:
            return None
        return self._build(session_id)

    def create_session(self, draft: SessionDraft) -> YogaSession:
        now = self.db.now()
        session_id = self.db.next_id("sessions")
        self.db.sessions[session_id] = {
            "name": draft.name,
            "date": draft.date,
            "description": draft.description,
            "teacher_id": draft.teacher_id,
            "created_at": now,
            "updated_at": now,
        }
        return self._build(session_id)

    def update_session(
        self, session_id: int, changes: dict[str, object]
    ) -> YogaSession:
        self.db.sessions[session_id].update(changes)
        self.db.sessions[session_id]["updated_at"] = self.db.now()
        return self._build(session_id)

    def delete_session(self, session_id: int) -> None:
        self.db.sessions.pop(session_id, None)
        self.db.participations = {
            pair for pair in self.db.participations if pair[0] != session_id
        }

    def has_participant(self, session_id: int, user_id: int) -> bool:
        return (session_id, user_id) in self.db.participations

    def add_participant(self, session_id: int, user_id: int) -> None:
        if (session_id, user_id) in self.db.participations:
            raise DuplicateRecordError(f"{session_id}:{user_id}")
        self.db.participations.add((session_id, user_id))

    def remove_participant(self, session_id: int, user_id: int) -> None:
        self.db.participations.discard((session_id, user_id))

    def _build(self, session_id: int) -> YogaSession:
        row = self.db.sessions[session_id]
        return YogaSession(
            id=session_id,
            name=row["name"],
            date=row["date"],
            description=row["description"],
            teacher=self.db.teachers[row["teacher_id"]],
            participant_ids=sorted(
                user_id
                for pair_session_id, user_id in self.db.participations
                if pair_session_id == session_id
            ),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )


def fast_password_context() -> CryptContext:
    return CryptContext(schemes=["bcrypt"], bcrypt__rounds=4)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        jwt_secret_key=TEST_SECRET,
        environment="local",
    )


@pytest.fixture
def database() -> InMemoryDatabase:
    return InMemoryDatabase()


@pytest.fixture
def token_service(settings: Settings) -> TokenService:
    return TokenService(secret_key=settings.jwt_secret_key)


@pytest.fixture
def container(
    settings: Settings, database: InMemoryDatabase, token_service: TokenService
) -> AppContainer:
    user_repository = InMemoryUserRepository(database)
    teacher_repository = InMemoryTeacherRepository(database)
    session_repository = InMemorySessionRepository(database)
    authorization = AuthorizationGate(
        tokens=token_service,
        users=user_repository,
        allow_self_promotion=settings.is_development,
    )
    return AppContainer(
        settings=settings,
        authorization=authorization,
        credential_service=CredentialService(
            user_repository, token_service, password_context=fast_password_context()
        ),
        user_service=UserService(user_repository, authorization),
        teacher_directory=TeacherDirectory(teacher_repository),
        session_registry=SessionRegistry(
            repository=session_repository,
            teacher_repository=teacher_repository,
            user_repository=user_repository,
        ),
    )


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def teacher(container: AppContainer) -> Teacher:
    return container.teacher_directory.provision("Margot", "Delahaye")


@pytest.fixture
def admin(container: AppContainer) -> UserRecord:
    return container.credential_service.provision_user(
        email="yoga@studio.com",
        password="test!1234",
        first_name="Admin",
        last_name="Yoga",
        admin=True,
    )


@pytest.fixture
def member(container: AppContainer) -> UserRecord:
    return container.credential_service.provision_user(
        email="user@test.com",
        password="password123",
        first_name="John",
        last_name="Doe",
    )


def auth_header(token_service: TokenService, user: UserRecord) -> dict[str, str]:
    return {"Authorization": f"Bearer {token_service.issue_token(user.id)}"}
