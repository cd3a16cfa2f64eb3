"""FastAPI dependency injection for shared resources."""

import logging
from functools import lru_cache
from pathlib import Path

from forwardtask.config import Settings
from forwardtask.vault.daily import DailyNotes
from forwardtask.vault.store import VaultDocumentStore

logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@lru_cache
def get_data_path() -> Path:
    """Get the data directory path."""
    settings = get_settings()
    data_path = Path(settings.data_path) if settings.data_path else Path("data")
    data_path.mkdir(parents=True, exist_ok=True)
    return data_path


@lru_cache
def get_document_store() -> VaultDocumentStore:
    """Get cached document store instance."""
    return VaultDocumentStore()


def get_daily_notes() -> DailyNotes:
    """Build a daily notes resolver from the current settings."""
    settings = get_settings()
    return DailyNotes(
        settings.vault_path,
        folder=settings.daily_folder,
        date_format=settings.daily_date_format,
        template=settings.daily_template,
    )
