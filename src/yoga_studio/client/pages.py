"""Page-level loaders that turn API calls into render-ready state.

Every loader returns a `PageState`; failed calls never raise, they surface
the server message (or a fallback) in `error`.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from yoga_studio.adapters.studio_api_client import StudioApiClient, StudioApiError
from yoga_studio.client.auth import AuthSession

T = TypeVar("T")

NOT_LOGGED_IN_MESSAGE = "Please log in to continue"


@dataclass(frozen=True)
class PageState:
    """Data to render, or the error to show instead."""

    data: object | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class StudioPages:
    """Loaders and actions behind the client's pages."""

    api: StudioApiClient
    auth: AuthSession

    async def login(self, email: str, password: str) -> PageState:
        return await _guard(lambda: self.auth.login(email, password))

    async def register(
        self, email: str, password: str, first_name: str, last_name: str
    ) -> PageState:
        return await _guard(
            lambda: self.auth.register(email, password, first_name, last_name)
        )

    async def sessions(self) -> PageState:
        """Load the session catalog."""
        token = self.auth.token()
        if not token:
            return PageState(error=NOT_LOGGED_IN_MESSAGE)
        return await _guard(lambda: self.api.list_sessions(token))

    async def session_detail(self, session_id: int) -> PageState:
        """Load one session with a flag telling whether the user joined it."""
        token = self.auth.token()
        user = self.auth.current_user()
        if not token or user is None:
            return PageState(error=NOT_LOGGED_IN_MESSAGE)
        state = await _guard(lambda: self.api.get_session(token, session_id))
        if not state.ok:
            return state
        session = dict(state.data)
        session["isParticipating"] = user.get("id") in session.get("users", [])
        return PageState(data=session)

    async def join_session(self, session_id: int) -> PageState:
        """Join a session as the logged-in user, then reload it."""
        return await self._roster_action(session_id, join=True)

    async def leave_session(self, session_id: int) -> PageState:
        """Leave a session as the logged-in user, then reload it."""
        return await self._roster_action(session_id, join=False)

    async def save_session(
        self, payload: dict[str, object], session_id: int | None = None
    ) -> PageState:
        """Create a session, or update it when an id is given."""
        token = self.auth.token()
        if not token:
            return PageState(error=NOT_LOGGED_IN_MESSAGE)
        if session_id is None:
            return await _guard(lambda: self.api.create_session(token, payload))
        return await _guard(lambda: self.api.update_session(token, session_id, payload))

    async def delete_session(self, session_id: int) -> PageState:
        token = self.auth.token()
        if not token:
            return PageState(error=NOT_LOGGED_IN_MESSAGE)
        return await _guard(lambda: self.api.delete_session(token, session_id))

    async def teachers(self) -> PageState:
        token = self.auth.token()
        if not token:
            return PageState(error=NOT_LOGGED_IN_MESSAGE)
        return await _guard(lambda: self.api.list_teachers(token))

    async def profile(self) -> PageState:
        """Load the logged-in user's profile."""
        token = self.auth.token()
        user = self.auth.current_user()
        if not token or user is None:
            return PageState(error=NOT_LOGGED_IN_MESSAGE)
        return await _guard(lambda: self.api.get_user(token, int(user["id"])))

    async def delete_account(self) -> PageState:
        """Delete the logged-in user's account and log out on success."""
        token = self.auth.token()
        user = self.auth.current_user()
        if not token or user is None:
            return PageState(error=NOT_LOGGED_IN_MESSAGE)
        state = await _guard(lambda: self.api.delete_user(token, int(user["id"])))
        if state.ok:
            self.auth.logout()
        return state

    async def promote_self(self) -> PageState:
        """Request admin rights and refresh the cached profile."""
        token = self.auth.token()
        if not token:
            return PageState(error=NOT_LOGGED_IN_MESSAGE)
        state = await _guard(lambda: self.api.promote_admin(token))
        if state.ok:
            self.auth.update_current_user(admin=state.data.get("admin", False))
        return state

    async def _roster_action(self, session_id: int, *, join: bool) -> PageState:
        token = self.auth.token()
        user = self.auth.current_user()
        if not token or user is None:
            return PageState(error=NOT_LOGGED_IN_MESSAGE)
        user_id = int(user["id"])
        action = self.api.participate if join else self.api.unparticipate
        state = await _guard(lambda: action(token, session_id, user_id))
        if not state.ok:
            return state
        return await self.session_detail(session_id)


async def _guard(call: Callable[[], Awaitable[T]]) -> PageState:
    try:
        return PageState(data=await call())
    except StudioApiError as exc:
        return PageState(error=exc.message)
