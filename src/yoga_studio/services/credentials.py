"""Registration, login and password handling."""

import logging
from dataclasses import dataclass, field

from email_validator import EmailNotValidError, validate_email
from passlib.context import CryptContext

from yoga_studio.domain.errors import (
    Conflict,
    DuplicateRecordError,
    InvalidCredentials,
    ValidationError,
)
from yoga_studio.domain.users import AuthenticatedUser, UserRecord
from yoga_studio.services.tokens import TokenService
from yoga_studio.services.users import UserRepository

_logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8
MAX_NAME_LENGTH = 20
_EMAIL_TAKEN_MESSAGE = "Email already exists"


def default_password_context() -> CryptContext:
    """Return the bcrypt context used to hash stored passwords."""
    return CryptContext(schemes=["bcrypt"], deprecated="auto")


@dataclass
class CredentialService:
    """Application service for account credentials."""

    repository: UserRepository
    tokens: TokenService
    password_context: CryptContext = field(default_factory=default_password_context)

    def register(
        self,
        email: str | None,
        password: str | None,
        first_name: str | None,
        last_name: str | None,
    ) -> AuthenticatedUser:
        """Create a new non-admin account and return it with a token."""
        email = _require(email, "Email is required")
        _require_valid_email(email)
        password = _require(password, "Password is required")
        first_name = _require_name(first_name, "First name")
        last_name = _require_name(last_name, "Last name")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        if self.repository.get_by_email(email) is not None:
            raise Conflict(_EMAIL_TAKEN_MESSAGE)
        try:
            user = self.repository.create_user(
                email=email,
                password_hash=self.hash_password(password),
                first_name=first_name,
                last_name=last_name,
            )
        except DuplicateRecordError as exc:
            raise Conflict(_EMAIL_TAKEN_MESSAGE) from exc

        _logger.info("Registered user: user_id=%s", user.id)
        return AuthenticatedUser(user=user, token=self.tokens.issue_token(user.id))

    def login(self, email: str | None, password: str | None) -> AuthenticatedUser:
        """Check credentials and return the user with a fresh token."""
        email = _require(email, "Email is required")
        password = _require(password, "Password is required")

        user = self.repository.get_by_email(email)
        if user is None or not self.verify_password(password, user.password_hash):
            _logger.info("Rejected login attempt")
            raise InvalidCredentials()

        _logger.info("User logged in: user_id=%s", user.id)
        return AuthenticatedUser(user=user, token=self.tokens.issue_token(user.id))

    def provision_user(  # noqa: PLR0913
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        admin: bool = False,
    ) -> UserRecord:
        """Return the user for an email, creating it with the given fields if missing."""
        existing = self.repository.get_by_email(email)
        if existing is not None:
            return existing
        user = self.repository.create_user(
            email=email,
            password_hash=self.hash_password(password),
            first_name=first_name,
            last_name=last_name,
        )
        if admin:
            user = self.repository.set_admin(user.id, admin=True)
        return user

    def hash_password(self, password: str) -> str:
        """Return a salted one-way hash of the password."""
        return self.password_context.hash(password)

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Return True when the password matches the stored hash."""
        try:
            return self.password_context.verify(password, password_hash)
        except ValueError:
            return False


def _require(value: str | None, message: str) -> str:
    if not value:
        raise ValidationError(message)
    return value


def _require_valid_email(email: str) -> None:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValidationError("Invalid email format") from exc


def _require_name(value: str | None, label: str) -> str:
    name = (value or "").strip()
    if not name:
        raise ValidationError(f"{label} is required")
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"{label} must be at most {MAX_NAME_LENGTH} characters"
        )
    return name
