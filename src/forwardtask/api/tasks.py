"""Task move API endpoint."""

import asyncio
import logging
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from forwardtask.api.dependencies import (
    get_daily_notes,
    get_data_path,
    get_document_store,
    get_settings,
)
from forwardtask.config import Settings
from forwardtask.models import MoveTaskRequest, MoveTaskResponse
from forwardtask.mover import TaskMover
from forwardtask.notify import LogNotifier
from forwardtask.settings import get_section_header
from forwardtask.vault.daily import DailyNotes
from forwardtask.vault.store import FileEditor, VaultDocumentStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["tasks"])


def _vault_relative(path: Path | None, vault_root: Path) -> str | None:
    if path is None:
        return None
    try:
        return path.resolve().relative_to(vault_root).as_posix()
    except ValueError:
        return str(path)


@router.post("/tasks/move", response_model=MoveTaskResponse)
async def move_task(
    req: MoveTaskRequest,
    settings: Annotated[Settings, Depends(get_settings)],
    daily_notes: Annotated[DailyNotes, Depends(get_daily_notes)],
    store: Annotated[VaultDocumentStore, Depends(get_document_store)],
    data_path: Annotated[Path, Depends(get_data_path)],
) -> MoveTaskResponse:
    """Move the task on ``line`` of ``path`` into a daily note.

    Refused moves (not a task, already moved, ...) are not HTTP errors: they
    come back with ``moved: false`` and the message shown to the user.
    """
    vault_path = settings.vault_path
    if not vault_path or not vault_path.exists():
        raise HTTPException(status_code=503, detail="Vault path not configured or missing")

    vault_root = vault_path.resolve()
    note_path = (vault_root / req.path).resolve()
    if not note_path.is_relative_to(vault_root):
        raise HTTPException(status_code=400, detail="Path must be inside the vault")
    if not note_path.is_file():
        raise HTTPException(status_code=404, detail=f"Note not found: {req.path}")

    try:
        editor = await asyncio.to_thread(FileEditor.open, store, note_path, req.line)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except UnicodeDecodeError as e:
        logger.warning("Cannot decode %s as UTF-8: %s", note_path, e)
        raise HTTPException(status_code=422, detail=f"Note is not valid UTF-8: {req.path}") from e

    mover = TaskMover(
        daily_notes,
        store,
        LogNotifier(),
        section_header=lambda: get_section_header(data_path),
    )
    if req.relative:
        outcome = await mover.move_task_relative(editor)
    else:
        outcome = await mover.move_task(editor, req.days_offset)

    return MoveTaskResponse(
        moved=outcome.moved,
        message=outcome.message,
        reason=outcome.reason,
        destination=_vault_relative(outcome.destination, vault_root),
        next_line=outcome.next_line,
    )
