"""Client-side login state."""

import json
from dataclasses import dataclass

from yoga_studio.adapters.studio_api_client import StudioApiClient
from yoga_studio.client.storage import KeyValueStore

TOKEN_KEY = "token"
USER_KEY = "user"


@dataclass
class AuthSession:
    """Keeps the bearer token and cached profile in a key-value store."""

    api: StudioApiClient
    store: KeyValueStore

    async def login(self, email: str, password: str) -> dict[str, object]:
        """Log in and remember the returned token and profile."""
        profile = await self.api.login(email, password)
        self._remember(profile)
        return profile

    async def register(
        self, email: str, password: str, first_name: str, last_name: str
    ) -> dict[str, object]:
        """Register and remember the returned token and profile."""
        profile = await self.api.register(email, password, first_name, last_name)
        self._remember(profile)
        return profile

    def logout(self) -> None:
        """Forget the stored token and profile."""
        self.store.clear(TOKEN_KEY)
        self.store.clear(USER_KEY)

    def current_user(self) -> dict[str, object] | None:
        """Return the cached profile, if logged in."""
        raw = self.store.get(USER_KEY)
        if not raw:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            return None

    def update_current_user(self, **updates: object) -> dict[str, object] | None:
        """Merge updates into the cached profile and return it."""
        user = self.current_user()
        if user is None:
            return None
        user.update(updates)
        self.store.set(USER_KEY, json.dumps(user))
        return user

    def token(self) -> str | None:
        """Return the stored bearer token."""
        return self.store.get(TOKEN_KEY)

    def is_authenticated(self) -> bool:
        """Return True when a token is stored."""
        return bool(self.token())

    def _remember(self, profile: dict[str, object]) -> None:
        token = profile.get("token")
        if isinstance(token, str) and token:
            self.store.set(TOKEN_KEY, token)
            self.store.set(USER_KEY, json.dumps(profile))
