"""Authorization decisions for protected operations."""

import logging
from dataclasses import dataclass

from yoga_studio.domain.errors import Forbidden, Unauthenticated
from yoga_studio.domain.users import UserRecord
from yoga_studio.services.tokens import TokenService
from yoga_studio.services.users import UserRepository

_logger = logging.getLogger(__name__)

_BEARER_PREFIX = "bearer"


@dataclass
class AuthorizationGate:
    """Resolves the requesting user and checks what it may do."""

    tokens: TokenService
    users: UserRepository
    allow_self_promotion: bool = False

    def require_authenticated(self, authorization: str | None) -> int:
        """Return the user id carried by an `Authorization: Bearer` header."""
        if not authorization:
            raise Unauthenticated("No token provided")
        scheme, _, token = authorization.strip().partition(" ")
        token = token.strip()
        if scheme.lower() != _BEARER_PREFIX or not token:
            raise Unauthenticated("Invalid token format")
        return self.tokens.verify_token(token)

    def require_admin(self, user_id: int) -> UserRecord:
        """Return the user when it exists and has admin rights."""
        user = self.users.get_by_id(user_id)
        if user is None or not user.admin:
            raise Forbidden("Admin access required")
        return user

    @staticmethod
    def require_self(requesting_user_id: int, target_user_id: int) -> None:
        """Reject operations on another user's account."""
        if requesting_user_id != target_user_id:
            raise Forbidden("You can only delete your own account")

    def promote_self(self, user_id: int) -> UserRecord:
        """Grant admin rights to the requesting user in development only."""
        if not self.allow_self_promotion:
            raise Forbidden("Admin self-promotion is only available in development")
        user = self.users.get_by_id(user_id)
        if user is None:
            raise Unauthenticated("User not found")
        if user.admin:
            return user
        _logger.warning("Promoting user to admin: user_id=%s", user_id)
        return self.users.set_admin(user_id, admin=True)
