"""HTTP client for the yoga studio API."""

from dataclasses import dataclass
from typing import Protocol

import httpx

GENERIC_ERROR_MESSAGE = "Something went wrong"


class StudioApiError(Exception):
    """A failed API call with the message to show to the user."""

    def __init__(self, status_code: int | None, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class StudioApiClient(Protocol):
    """Interface for the studio REST API."""

    async def login(self, email: str, password: str) -> dict[str, object]:
        """Log in and return the profile with its token."""

    async def register(
        self, email: str, password: str, first_name: str, last_name: str
    ) -> dict[str, object]:
        """Register and return the profile with its token."""

    async def list_sessions(self, token: str) -> list[dict[str, object]]:
        """Return all sessions."""

    async def get_session(self, token: str, session_id: int) -> dict[str, object]:
        """Return a session."""

    async def create_session(
        self, token: str, payload: dict[str, object]
    ) -> dict[str, object]:
        """Create a session."""

    async def update_session(
        self, token: str, session_id: int, payload: dict[str, object]
    ) -> dict[str, object]:
        """Update a session."""

    async def delete_session(self, token: str, session_id: int) -> None:
        """Delete a session."""

    async def participate(self, token: str, session_id: int, user_id: int) -> None:
        """Join a session."""

    async def unparticipate(self, token: str, session_id: int, user_id: int) -> None:
        """Leave a session."""

    async def list_teachers(self, token: str) -> list[dict[str, object]]:
        """Return all teachers."""

    async def get_user(self, token: str, user_id: int) -> dict[str, object]:
        """Return a user profile."""

    async def delete_user(self, token: str, user_id: int) -> None:
        """Delete a user account."""

    async def promote_admin(self, token: str) -> dict[str, object]:
        """Promote the current user to admin."""


@dataclass
class HttpxStudioApiClient(StudioApiClient):
    """Studio API client implemented with httpx."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxStudioApiClient":
        """Create a client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def login(self, email: str, password: str) -> dict[str, object]:
        """Log in and return the profile with its token."""
        return await self._request(
            "POST",
            "/auth/login",
            json={"email": email, "password": password},
            fallback="Login failed",
        )

    async def register(
        self, email: str, password: str, first_name: str, last_name: str
    ) -> dict[str, object]:
        """Register and return the profile with its token."""
        return await self._request(
            "POST",
            "/auth/register",
            json={
                "email": email,
                "password": password,
                "firstName": first_name,
                "lastName": last_name,
            },
            fallback="Registration failed",
        )

    async def list_sessions(self, token: str) -> list[dict[str, object]]:
        """Return all sessions."""
        return await self._request(
            "GET", "/session", token=token, fallback="Failed to load sessions"
        )

    async def get_session(self, token: str, session_id: int) -> dict[str, object]:
        """Return a session."""
        return await self._request(
            "GET",
            f"/session/{session_id}",
            token=token,
            fallback="Failed to load session details",
        )

    async def create_session(
        self, token: str, payload: dict[str, object]
    ) -> dict[str, object]:
        """Create a session."""
        return await self._request(
            "POST",
            "/session",
            token=token,
            json=payload,
            fallback="Failed to save session",
        )

    async def update_session(
        self, token: str, session_id: int, payload: dict[str, object]
    ) -> dict[str, object]:
        """Update a session."""
        return await self._request(
            "PUT",
            f"/session/{session_id}",
            token=token,
            json=payload,
            fallback="Failed to save session",
        )

    async def delete_session(self, token: str, session_id: int) -> None:
        """Delete a session."""
        await self._request(
            "DELETE",
            f"/session/{session_id}",
            token=token,
            fallback="Failed to delete session",
        )

    async def participate(self, token: str, session_id: int, user_id: int) -> None:
        """Join a session."""
        await self._request(
            "POST",
            f"/session/{session_id}/participate/{user_id}",
            token=token,
            fallback="Failed to join session",
        )

    async def unparticipate(self, token: str, session_id: int, user_id: int) -> None:
        """Leave a session."""
        await self._request(
            "DELETE",
            f"/session/{session_id}/participate/{user_id}",
            token=token,
            fallback="Failed to leave session",
        )

    async def list_teachers(self, token: str) -> list[dict[str, object]]:
        """Return all teachers."""
        return await self._request(
            "GET", "/teacher", token=token, fallback="Failed to load teachers"
        )

    async def get_user(self, token: str, user_id: int) -> dict[str, object]:
        """Return a user profile."""
        return await self._request(
            "GET",
            f"/user/{user_id}",
            token=token,
            fallback="Failed to load user information",
        )

    async def delete_user(self, token: str, user_id: int) -> None:
        """Delete a user account."""
        await self._request(
            "DELETE",
            f"/user/{user_id}",
            token=token,
            fallback="Failed to delete account",
        )

    async def promote_admin(self, token: str) -> dict[str, object]:
        """Promote the current user to admin."""
        return await self._request(
            "POST",
            "/user/promote-admin",
            token=token,
            fallback="Failed to promote account",
        )

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()

    async def _request(  # noqa: PLR0913
        self,
        method: str,
        path: str,
        *,
        token: str | None = None,
        json: dict[str, object] | None = None,
        fallback: str = GENERIC_ERROR_MESSAGE,
    ):  # type: ignore[no-untyped-def]
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        try:
            response = await self.http_client.request(
                method,
                f"{self.base_url}{path}",
                json=json,
                headers=headers,
                timeout=10,
            )
        except httpx.HTTPError as exc:
            raise StudioApiError(None, fallback) from exc
        if response.is_error:
            raise StudioApiError(
                response.status_code, _server_message(response) or fallback
            )
        try:
            return response.json()
        except ValueError as exc:
            raise StudioApiError(response.status_code, fallback) from exc


def _server_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return None
