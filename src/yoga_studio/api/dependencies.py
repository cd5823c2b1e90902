"""Request-scoped dependencies for authentication and authorization."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends, Header, Request

if TYPE_CHECKING:
    from yoga_studio.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    """Return the application container attached to the app state."""
    return request.app.state.container


def current_user_id(
    request: Request,
    authorization: str | None = Header(default=None),
) -> int:
    """Resolve the bearer token into the requesting user's id."""
    container = get_container(request)
    return container.authorization.require_authenticated(authorization)


def admin_user_id(
    request: Request,
    user_id: int = Depends(current_user_id),
) -> int:
    """Ensure the requesting user is an admin."""
    container = get_container(request)
    container.authorization.require_admin(user_id)
    return user_id
