"""Module: config."""

from pydantic_settings import BaseSettings

# Centralized runtime configuration loaded from environment variables.
class Settings(BaseSettings):
    # Primary SQLAlchemy connection string for the backend database.
    database_url: str = "sqlite:///./vaxtrack.db"

    # Language used when a localized string has no entry for the requested one.
    default_language: str = "en"
    # Days before the due date on which a reminder fires, absent a patient preference.
    default_reminder_advance_days: int = 7
    # A dose becomes "due_soon" this many days ahead of its recommended date.
    due_soon_window_days: int = 30
    # Vaccine batches expiring within this many days raise a safety warning.
    expiry_warning_days: int = 30

    log_level: str = "INFO"
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # Configure pydantic-settings to also load values from local .env file.
    class Config:
        env_file = ".env"

# Global settings instance imported by app modules at runtime.
settings = Settings()
