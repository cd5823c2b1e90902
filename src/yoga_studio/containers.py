"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from yoga_studio.adapters.supabase_session_repository import SupabaseSessionRepository
from yoga_studio.adapters.supabase_teacher_repository import SupabaseTeacherRepository
from yoga_studio.adapters.supabase_user_repository import SupabaseUserRepository
from yoga_studio.config import Settings
from yoga_studio.services.authorization import AuthorizationGate
from yoga_studio.services.credentials import CredentialService
from yoga_studio.services.sessions import SessionRegistry
from yoga_studio.services.teachers import TeacherDirectory
from yoga_studio.services.tokens import TokenService
from yoga_studio.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    authorization: AuthorizationGate
    credential_service: CredentialService
    user_service: UserService
    teacher_directory: TeacherDirectory
    session_registry: SessionRegistry


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    teacher_repository = SupabaseTeacherRepository(supabase_client)
    session_repository = SupabaseSessionRepository(supabase_client)
    token_service = TokenService(
        secret_key=resolved_settings.jwt_secret_key,
        algorithm=resolved_settings.jwt_algorithm,
        expires_hours=resolved_settings.jwt_expires_hours,
    )
    authorization = AuthorizationGate(
        tokens=token_service,
        users=user_repository,
        allow_self_promotion=resolved_settings.is_development,
    )
    return AppContainer(
        settings=resolved_settings,
        authorization=authorization,
        credential_service=CredentialService(user_repository, token_service),
        user_service=UserService(user_repository, authorization),
        teacher_directory=TeacherDirectory(teacher_repository),
        session_registry=SessionRegistry(
            repository=session_repository,
            teacher_repository=teacher_repository,
            user_repository=user_repository,
        ),
    )
