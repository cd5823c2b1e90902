"""FastAPI application factory."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from yoga_studio.api.auth import router as auth_router
from yoga_studio.api.errors import register_exception_handlers
from yoga_studio.api.sessions import router as sessions_router
from yoga_studio.api.teachers import router as teachers_router
from yoga_studio.api.users import router as users_router
from yoga_studio.app_logging import configure_logging
from yoga_studio.config import parse_cors_origins
from yoga_studio.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Yoga Studio API")
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(auth_router)
    app.include_router(sessions_router)
    app.include_router(teachers_router)
    app.include_router(users_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    logger.info("API ready: environment=%s", container.settings.environment)
    return app
