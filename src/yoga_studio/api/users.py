"""User profile endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from yoga_studio.api.dependencies import current_user_id, get_container
from yoga_studio.api.schemas import MessageResponse, UserResponse

router = APIRouter(prefix="/api/user", tags=["users"])


@router.post("/promote-admin")
def promote_admin(
    request: Request, user_id: int = Depends(current_user_id)
) -> UserResponse:
    """Grant admin rights to the caller; only enabled in development."""
    container = get_container(request)
    return UserResponse.from_record(container.authorization.promote_self(user_id))


@router.get("/{user_id}", dependencies=[Depends(current_user_id)])
def get_user(user_id: int, request: Request) -> UserResponse:
    """Return a user profile."""
    container = get_container(request)
    return UserResponse.from_record(container.user_service.get_user(user_id))


@router.delete("/{user_id}")
def delete_user(
    user_id: int,
    request: Request,
    requesting_user_id: int = Depends(current_user_id),
) -> MessageResponse:
    """Delete the caller's own account."""
    container = get_container(request)
    container.user_service.delete_account(requesting_user_id, user_id)
    return MessageResponse(message="User deleted successfully")
