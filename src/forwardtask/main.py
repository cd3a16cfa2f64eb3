"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from forwardtask import __version__
from forwardtask.api.settings import router as settings_router
from forwardtask.api.tasks import router as tasks_router
from forwardtask.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Log resolved configuration at startup for debugging."""
    s = get_settings()
    logger.info(
        "ForwardTask starting: vault_path=%s, daily_folder=%s, data_path=%s",
        s.vault_path,
        s.daily_folder,
        s.data_path,
    )
    if not s.vault_path or not s.vault_path.exists():
        logger.error("VAULT PATH NOT CONFIGURED OR MISSING, move requests will return 503")
    yield


app = FastAPI(
    title="ForwardTask",
    description="Move tasks from any note into daily notes",
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(settings_router)
app.include_router(tasks_router)


@app.get("/")
async def root() -> dict[str, str]:
    """Return project information."""
    return {
        "name": "ForwardTask",
        "version": __version__,
        "description": "Move tasks from any note into daily notes",
    }


@app.get("/health")
@app.get("/api/v1/health")
async def health() -> dict[str, Any]:
    """Health check endpoint with vault and daily folder status."""
    s = get_settings()

    checks: dict[str, Any] = {"status": "ok"}

    if not s.vault_path or not s.vault_path.exists():
        checks["status"] = "error"
        checks["vault"] = "not configured or missing"
        checks["daily_folder"] = None
        return checks

    checks["vault"] = "ok"
    daily_dir = s.vault_path / s.daily_folder
    if daily_dir.is_dir():
        checks["daily_folder"] = "ok"
    else:
        # Created on the first move, so only a warning
        checks["status"] = "warning"
        checks["daily_folder"] = "missing"
    return checks
