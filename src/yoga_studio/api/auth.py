"""Public authentication endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request, status

from yoga_studio.api.dependencies import get_container
from yoga_studio.api.schemas import AuthResponse, LoginRequest, RegisterRequest

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login")
def login(payload: LoginRequest, request: Request) -> AuthResponse:
    """Exchange email and password for a bearer token."""
    container = get_container(request)
    result = container.credential_service.login(payload.email, payload.password)
    return AuthResponse.from_authenticated(result)


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, request: Request) -> AuthResponse:
    """Create an account and return it with a bearer token."""
    container = get_container(request)
    result = container.credential_service.register(
        email=payload.email,
        password=payload.password,
        first_name=payload.first_name,
        last_name=payload.last_name,
    )
    return AuthResponse.from_authenticated(result)
