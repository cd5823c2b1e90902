"""Teacher directory endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from yoga_studio.api.dependencies import current_user_id, get_container
from yoga_studio.api.schemas import TeacherResponse

router = APIRouter(
    prefix="/api/teacher", tags=["teachers"], dependencies=[Depends(current_user_id)]
)


@router.get("")
def list_teachers(request: Request) -> list[TeacherResponse]:
    """Return all teachers, newest first."""
    container = get_container(request)
    return [
        TeacherResponse.from_teacher(teacher)
        for teacher in container.teacher_directory.list_teachers()
    ]


@router.get("/{teacher_id}")
def get_teacher(teacher_id: int, request: Request) -> TeacherResponse:
    """Return a single teacher."""
    container = get_container(request)
    return TeacherResponse.from_teacher(
        container.teacher_directory.get_teacher(teacher_id)
    )
