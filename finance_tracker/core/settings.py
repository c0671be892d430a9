"""Configuration and environment settings for the Finance Tracker."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings for the Finance Tracker."""

    database_url: str = "sqlite:///finances.db"
    upload_dir: str = "tmp"
    log_file: str = "logs/finance_tracker.log"
    import_chunk_size: int = 500
    server_host: str = "127.0.0.1"
    server_port: int = 8000

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


def get_settings() -> "Settings":
    """Return an instance of the application settings."""
    return Settings()
