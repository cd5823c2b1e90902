"""Translation of domain failures into HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from yoga_studio.domain.errors import (
    Conflict,
    Forbidden,
    NotFound,
    StudioError,
    Unauthenticated,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[StudioError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    Conflict: status.HTTP_400_BAD_REQUEST,
    Unauthenticated: status.HTTP_401_UNAUTHORIZED,
    Forbidden: status.HTTP_403_FORBIDDEN,
    NotFound: status.HTTP_404_NOT_FOUND,
}

_PATH_PARAM_MESSAGES = {
    "session_id": "Invalid session ID",
    "teacher_id": "Invalid teacher ID",
    "user_id": "Invalid user ID",
}


def status_for(exc: StudioError) -> int:
    """Return the HTTP status for a domain error."""
    for error_type in type(exc).__mro__:
        if error_type in _STATUS_BY_ERROR:
            return _STATUS_BY_ERROR[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers mapping failures to `{"message": ...}` bodies."""

    @app.exception_handler(StudioError)
    async def handle_studio_error(_request: Request, exc: StudioError) -> JSONResponse:
        return JSONResponse(status_code=status_for(exc), content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": _describe_validation_error(exc)},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled error", extra={"path": request.url.path, "method": request.method}
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = [str(part) for part in first.get("loc", ())]
    if len(location) == 2 and location[0] == "path":  # noqa: PLR2004
        return _PATH_PARAM_MESSAGES.get(location[1], f"Invalid {location[1]}")
    if len(location) <= 1:
        return "Request body is required"
    return f"{location[-1]}: {first.get('msg', 'invalid value')}"
