"""Application configuration."""

import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    supabase_schema: str = "public"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("supabase_url", "supabase_service_key")
    @classmethod
    def require_value(cls, value: str) -> str:
        """Reject blank connection settings so startup fails early."""
        if not value.strip():
            raise ValueError("must not be blank")
        return value.strip()
