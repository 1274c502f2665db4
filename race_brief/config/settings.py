"""Configuration management for the race brief pipeline."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _sanitize_secret(value: str) -> str:
    """Remove BOM characters and whitespace from secrets.

    Secrets pasted into CI variables or .env files may carry a BOM that
    breaks HTTP headers and URLs.
    """
    if not value:
        return value
    return value.lstrip("\ufeff").strip()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Upstream providers
    jolpica_base_url: str = "https://api.jolpi.ca/ergast/f1"
    openf1_base_url: str = "https://api.openf1.org/v1"
    overtake_sheet_csv_url: str = ""
    request_timeout: int = 30

    # Backfill
    history_window: int = 10

    # Google AI API
    google_api_key: str = ""
    llm_model: str = "gemini-2.0-flash"

    # Publishing
    aws_s3_bucket: str = ""
    aws_s3_prefix: str = ""
    blob_name: str = "next-race-info.json"
    output_dir: Path = Path(".")

    # Notifications
    telegram_bot_token: str = ""
    telegram_chat_id: str = ""

    @field_validator(
        "google_api_key",
        "telegram_bot_token",
        "overtake_sheet_csv_url",
        "aws_s3_bucket",
        mode="after",
    )
    @classmethod
    def sanitize_secrets(cls, value: str) -> str:
        """Remove BOM and whitespace from secret values."""
        return _sanitize_secret(value)

    # Logging
    log_level: str = "INFO"
    log_json: bool = False
    log_file: Path | None = None

    @property
    def output_path(self) -> Path:
        """Local copy of the published document."""
        return self.output_dir / self.blob_name


# Global settings instance
settings = Settings()
