"""Bearer token issuing and verification."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt

from yoga_studio.domain.errors import Unauthenticated

_INVALID_TOKEN_MESSAGE = "Invalid or expired token"


@dataclass
class TokenService:
    """Signs and verifies JWT bearer tokens carrying a user id."""

    secret_key: str
    algorithm: str = "HS256"
    expires_hours: int = 24

    def issue_token(self, user_id: int) -> str:
        """Return a signed token for the user that expires after the configured window."""
        issued_at = datetime.now(tz=UTC)
        payload = {
            "userId": user_id,
            "iat": issued_at,
            "exp": issued_at + timedelta(hours=self.expires_hours),
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> int:
        """Return the user id embedded in a valid, unexpired token."""
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require": ["exp", "userId"]},
            )
        except jwt.PyJWTError as exc:
            raise Unauthenticated(_INVALID_TOKEN_MESSAGE) from exc
        user_id = payload.get("userId")
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise Unauthenticated(_INVALID_TOKEN_MESSAGE)
        return user_id
