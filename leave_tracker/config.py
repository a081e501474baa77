from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Leave Tracker"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"
    database_url: str = "postgresql+asyncpg://leave_tracker:leave_tracker@db:5432/leave_tracker"
    database_pool_size: int = 5
    database_max_overflow: int = 10
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Submission notifications. Without an SMTP host they are only logged.
    smtp_host: str | None = None
    smtp_port: int = 587
    smtp_username: str | None = None
    smtp_password: str | None = None
    smtp_start_tls: bool = True
    smtp_timeout_seconds: float = 10.0
    notification_sender: str = "no-reply@example.com"
    notification_recipients: list[str] = []


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return cached settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
