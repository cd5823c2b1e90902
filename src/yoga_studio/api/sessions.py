"""Session catalog and participation endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from yoga_studio.api.dependencies import admin_user_id, current_user_id, get_container
from yoga_studio.api.schemas import MessageResponse, SessionPayload, SessionResponse

router = APIRouter(prefix="/api/session", tags=["sessions"])


@router.get("", dependencies=[Depends(current_user_id)])
def list_sessions(request: Request) -> list[SessionResponse]:
    """Return every session with teacher and participants."""
    container = get_container(request)
    return [
        SessionResponse.from_session(session)
        for session in container.session_registry.list_sessions()
    ]


@router.get("/{session_id}", dependencies=[Depends(current_user_id)])
def get_session(session_id: int, request: Request) -> SessionResponse:
    """Return a single session."""
    container = get_container(request)
    return SessionResponse.from_session(
        container.session_registry.get_session(session_id)
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(admin_user_id)],
)
def create_session(payload: SessionPayload, request: Request) -> SessionResponse:
    """Create a session (admin only)."""
    container = get_container(request)
    session = container.session_registry.create_session(
        name=payload.name,
        session_date=payload.date,
        description=payload.description,
        teacher_id=payload.teacher_id,
    )
    return SessionResponse.from_session(session)


@router.put("/{session_id}", dependencies=[Depends(admin_user_id)])
def update_session(
    session_id: int, payload: SessionPayload, request: Request
) -> SessionResponse:
    """Update the supplied fields of a session (admin only)."""
    container = get_container(request)
    session = container.session_registry.update_session(
        session_id,
        name=payload.name,
        session_date=payload.date,
        description=payload.description,
        teacher_id=payload.teacher_id,
    )
    return SessionResponse.from_session(session)


@router.delete("/{session_id}", dependencies=[Depends(admin_user_id)])
def delete_session(session_id: int, request: Request) -> MessageResponse:
    """Delete a session and its roster (admin only)."""
    container = get_container(request)
    container.session_registry.delete_session(session_id)
    return MessageResponse(message="Session deleted successfully")


@router.post(
    "/{session_id}/participate/{user_id}", dependencies=[Depends(current_user_id)]
)
def participate(session_id: int, user_id: int, request: Request) -> MessageResponse:
    """Add a user to a session roster."""
    container = get_container(request)
    container.session_registry.join(session_id, user_id)
    return MessageResponse(message="Successfully joined the session")


@router.delete(
    "/{session_id}/participate/{user_id}", dependencies=[Depends(current_user_id)]
)
def unparticipate(
    session_id: int, user_id: int, request: Request
) -> MessageResponse:
    """Remove a user from a session roster."""
    container = get_container(request)
    container.session_registry.leave(session_id, user_id)
    return MessageResponse(message="Successfully left the session")
