"""Configuration management using pydantic-settings."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FORWARDTASK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server settings
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # Vault settings
    vault_path: Path | None = None

    # Data storage (user-editable settings.json lives here)
    data_path: Path = Path("data")

    # Daily notes
    daily_folder: str = "00_Daily"
    daily_date_format: str = "%Y-%m-%d"
    daily_template: str | None = None  # vault-relative path to a template note


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
