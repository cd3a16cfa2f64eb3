"""API route modules."""

from forwardtask.api.settings import router as settings_router
from forwardtask.api.tasks import router as tasks_router

__all__ = ["settings_router", "tasks_router"]
