"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    site_url: str = "http://localhost:3000"
    notifications_enabled: bool = True
    admin_accept_enabled: bool = False
    booking_lead_days: int = 7
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_base_url(raw: str) -> str:
    """Normalize a base URL so paths can be appended."""
    return raw.strip().rstrip("/")
