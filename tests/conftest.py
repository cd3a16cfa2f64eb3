"""Shared test fixtures."""

from contextlib import contextmanager
from datetime import date, timedelta
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from forwardtask.api.dependencies import get_settings
from forwardtask.main import app

TODAY = date(2026, 2, 5)


@pytest.fixture
def client():
    return TestClient(app)


@contextmanager
def override_vault_path(path):
    """Temporarily override the cached settings vault_path, restoring it on exit."""
    settings = get_settings()
    original = settings.vault_path
    settings.vault_path = path
    try:
        yield settings
    finally:
        settings.vault_path = original


class MemoryStore:
    """In-memory document store keyed by path."""

    def __init__(self, docs: dict[Path, str] | None = None) -> None:
        self.docs: dict[Path, str] = dict(docs or {})
        self.writes: list[Path] = []

    def read(self, path: Path) -> str:
        return self.docs[path]

    def write(self, path: Path, text: str) -> None:
        self.writes.append(path)
        self.docs[path] = text


class MemoryResolver:
    """Daily notes at /daily/<iso date>.md, created empty on demand."""

    def __init__(self, store: MemoryStore, today: date = TODAY) -> None:
        self.store = store
        self.today = today
        self.resolved: list[int] = []

    def resolve(self, days_offset: int = 0) -> Path | None:
        self.resolved.append(days_offset)
        path = Path("/daily") / f"{(self.today + timedelta(days=days_offset)).isoformat()}.md"
        self.store.docs.setdefault(path, "")
        return path

    def date_from_path(self, path: Path) -> date | None:
        if path.parent != Path("/daily"):
            return None
        return date.fromisoformat(path.stem)


class MemoryEditor:
    """Editor over a note held in a MemoryStore."""

    def __init__(self, store: MemoryStore, path: Path | None, text: str, cursor_line: int) -> None:
        self.store = store
        self.path = path
        self.cursor_line = cursor_line
        self._lines = text.split("\n")
        if path is not None:
            store.docs[path] = text

    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def replace_line(self, index: int, text: str) -> None:
        self._lines[index] = text
        if self.path is not None:
            self.store.write(self.path, "\n".join(self._lines))

    def set_cursor(self, index: int) -> None:
        self.cursor_line = index


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture()
def store():
    return MemoryStore()


@pytest.fixture()
def resolver(store):
    return MemoryResolver(store)


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def open_note(store):
    """Factory: open ``text`` as note ``path`` (None = unsaved buffer) with the cursor on ``line``."""

    def _open(path: str | None, text: str, line: int = 0) -> MemoryEditor:
        return MemoryEditor(store, Path(path) if path else None, text, line)

    return _open
