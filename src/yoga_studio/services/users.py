"""User directory and account lifecycle."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from yoga_studio.domain.errors import NotFound

if TYPE_CHECKING:
    from yoga_studio.domain.users import UserRecord
    from yoga_studio.services.authorization import AuthorizationGate

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_id(self, user_id: int) -> UserRecord | None:
        """Return the user with the given id, if present."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user registered with the email, if present."""

    def create_user(
        self, email: str, password_hash: str, first_name: str, last_name: str
    ) -> UserRecord:
        """Create a non-admin user and return it."""

    def set_admin(self, user_id: int, admin: bool) -> UserRecord:
        """Update the admin flag of a user and return the updated record."""

    def delete_user(self, user_id: int) -> None:
        """Delete a user and its participations."""


@dataclass
class UserService:
    """Application service for profile lookups and account deletion."""

    repository: UserRepository
    authorization: AuthorizationGate

    def get_user(self, user_id: int) -> UserRecord:
        """Return a user profile or raise NotFound."""
        user = self.repository.get_by_id(user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    def delete_account(self, requesting_user_id: int, user_id: int) -> None:
        """Delete the requesting user's own account."""
        self.authorization.require_self(requesting_user_id, user_id)
        self.get_user(user_id)
        self.repository.delete_user(user_id)
        _logger.info("Deleted account: user_id=%s", user_id)
