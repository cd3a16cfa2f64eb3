"""Move the task under the cursor into a daily note.

The mover drives the two pure pieces (task line parsing and section-aware
insertion) against injected collaborators: a daily note resolver, a document
store, the editor holding the source note, and a notifier. Every call ends
with exactly one notification, whether the task moved or not.

The destination note is written before the source line is marked moved; if
the process dies in between, the task exists in both notes.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, timedelta
from pathlib import Path
from typing import Protocol, runtime_checkable

from forwardtask.tasks.inserter import insert_task
from forwardtask.tasks.parser import (
    find_next_open_task,
    parse_task_line,
    to_moved_marker,
    to_plain_task,
)
from forwardtask.vault.daily import DailyNoteError

logger = logging.getLogger(__name__)


@runtime_checkable
class DailyNoteResolver(Protocol):
    """Finds (or creates) daily notes and dates existing notes."""

    def resolve(self, days_offset: int = 0) -> Path | None:
        """Return the daily note ``days_offset`` days from today, creating it if absent."""
        ...

    def date_from_path(self, path: Path) -> date | None:
        """Return the note's date, or None if it is not a daily note."""
        ...


@runtime_checkable
class DocumentStore(Protocol):
    """Whole-content note storage."""

    def read(self, path: Path) -> str: ...

    def write(self, path: Path, text: str) -> None: ...


@runtime_checkable
class Editor(Protocol):
    """The note currently being edited, with a line cursor."""

    path: Path | None
    cursor_line: int

    def line_count(self) -> int: ...

    def get_line(self, index: int) -> str: ...

    def replace_line(self, index: int, text: str) -> None: ...

    def set_cursor(self, index: int) -> None: ...


@runtime_checkable
class Notifier(Protocol):
    def notify(self, message: str) -> None: ...


class MoveError(Exception):
    """A move that was refused. The message is shown to the user as-is."""

    reason = "error"
    default_message = "Task not moved"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotATaskError(MoveError):
    reason = "not_a_task"
    default_message = "Current line is not a task"


class AlreadyMovedError(MoveError):
    reason = "already_moved"
    default_message = "Task is already marked as moved"


class DestinationUnavailableError(MoveError):
    reason = "destination_unavailable"
    default_message = "Could not get or create the target daily note"


class SameDocumentError(MoveError):
    reason = "same_document"
    default_message = "You are already in the target daily note. Task not moved."


class NoActiveFileError(MoveError):
    reason = "no_active_file"
    default_message = "No active file"


class NotADailyNoteError(MoveError):
    reason = "not_a_daily_note"
    default_message = (
        "Current file is not a daily note. Use 'Move to today' or 'Move to tomorrow' instead."
    )


WRITE_FAILURE = "write_failure"


@dataclass
class MoveOutcome:
    """Result of a single move attempt."""

    moved: bool
    message: str
    reason: str | None = None  # None on success
    destination: Path | None = None
    next_line: int | None = None


def describe_target(days_offset: int, target: date) -> str:
    """Human label for the destination note, e.g. "tomorrow's Daily Note"."""
    if days_offset == 0:
        return "today's Daily Note"
    if days_offset == 1:
        return "tomorrow's Daily Note"
    if days_offset > 1:
        return f"the Daily Note in {days_offset} days"
    return f"the Daily Note for {target.isoformat()}"


def _same_file(a: Path, b: Path) -> bool:
    return a.resolve() == b.resolve()


class TaskMover:
    """Moves single task lines from an editor into daily notes."""

    def __init__(
        self,
        resolver: DailyNoteResolver,
        store: DocumentStore,
        notifier: Notifier,
        section_header: str | Callable[[], str] = "",
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the mover.

        Args:
            resolver: Daily note resolver (day offset -> note path).
            store: Store used to read and write the destination note.
            notifier: Receives one user-facing message per move attempt.
            section_header: Header to insert under, or a callable returning the
                current value so configuration changes apply to the next move.
            today: Clock returning the current date.
        """
        self.resolver = resolver
        self.store = store
        self.notifier = notifier
        self._section_header = section_header
        self.today = today

    @property
    def section_header(self) -> str:
        header = self._section_header
        return header() if callable(header) else header

    def _abort(self, error: MoveError) -> MoveOutcome:
        logger.info("Task not moved (%s): %s", error.reason, error.message)
        self.notifier.notify(error.message)
        return MoveOutcome(moved=False, message=error.message, reason=error.reason)

    async def move_task(self, editor: Editor, days_offset: int = 0) -> MoveOutcome:
        """Move the task on the editor's cursor line into the daily note ``days_offset`` away."""
        try:
            return await self._move(editor, days_offset)
        except MoveError as e:
            return self._abort(e)
        except Exception as e:
            logger.exception("Failed to move task")
            message = f"Failed to move task: {e}"
            self.notifier.notify(message)
            return MoveOutcome(moved=False, message=message, reason=WRITE_FAILURE)

    async def move_task_relative(self, editor: Editor) -> MoveOutcome:
        """Move the task to the day after the daily note currently open."""
        try:
            days_offset = await self._next_day_offset(editor)
        except MoveError as e:
            return self._abort(e)
        return await self.move_task(editor, days_offset)

    async def _next_day_offset(self, editor: Editor) -> int:
        if editor.path is None:
            raise NoActiveFileError()

        current = await asyncio.to_thread(self.resolver.date_from_path, editor.path)
        if current is None:
            raise NotADailyNoteError()

        next_day = current + timedelta(days=1)
        return (next_day - self.today()).days

    async def _resolve(self, days_offset: int) -> Path:
        try:
            destination = await asyncio.to_thread(self.resolver.resolve, days_offset)
        except DailyNoteError as e:
            logger.error("Error getting daily note: %s", e)
            raise DestinationUnavailableError() from e
        if destination is None:
            raise DestinationUnavailableError()
        return destination

    async def _move(self, editor: Editor, days_offset: int) -> MoveOutcome:
        cursor = editor.cursor_line
        line = editor.get_line(cursor)

        task = parse_task_line(line)
        if task is None:
            raise NotATaskError()
        if task.is_moved:
            raise AlreadyMovedError()

        destination = await self._resolve(days_offset)
        if editor.path is not None and _same_file(editor.path, destination):
            raise SameDocumentError()

        content = await asyncio.to_thread(self.store.read, destination)
        updated = insert_task(content, to_plain_task(task), self.section_header)
        await asyncio.to_thread(self.store.write, destination, updated)
        logger.debug("Inserted task into %s", destination)

        await asyncio.to_thread(editor.replace_line, cursor, to_moved_marker(task))

        lines = [editor.get_line(i) for i in range(editor.line_count())]
        next_line = find_next_open_task(lines, cursor)
        if next_line is not None:
            editor.set_cursor(next_line)

        target = self.today() + timedelta(days=days_offset)
        message = f"✓ Task moved to {describe_target(days_offset, target)}"
        self.notifier.notify(message)
        return MoveOutcome(
            moved=True, message=message, destination=destination, next_line=next_line
        )
