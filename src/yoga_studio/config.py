"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEVELOPMENT_ENVIRONMENTS = frozenset({"local", "development"})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    jwt_expires_hours: int = 24
    cors_origins: str = "http://localhost:5173"
    seed_password: str = "test!1234"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def is_development(self) -> bool:
        """Return True when running locally or in development mode."""
        return self.environment.strip().lower() in DEVELOPMENT_ENVIRONMENTS


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env."""
    if raw is None:
        return []
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
