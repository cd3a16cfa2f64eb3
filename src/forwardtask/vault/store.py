"""Whole-note storage and a file-backed editor over a single note."""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class VaultDocumentStore:
    """Reads and writes whole notes. Writes are atomic (temp file + rename)."""

    def read(self, path: Path) -> str:
        # newline="" keeps "\r\n" intact so rewrites do not normalize line endings
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()

    def write(self, path: Path, text: str) -> None:
        fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(text)
            os.replace(tmp_path, str(path))
        except BaseException:
            with contextlib.suppress(OSError):
                os.unlink(tmp_path)
            raise
        logger.debug("Wrote %s (%d chars)", path, len(text))


class FileEditor:
    """An open note with a cursor, backed by a document store.

    Line edits are persisted immediately by rewriting the whole note.
    """

    def __init__(
        self, path: Path, text: str, cursor_line: int, store: VaultDocumentStore
    ) -> None:
        self.path: Path | None = path
        self._lines = text.split("\n")
        self._store = store
        if not 0 <= cursor_line < len(self._lines):
            raise IndexError(f"Line {cursor_line} out of range (note has {len(self._lines)} lines)")
        self.cursor_line = cursor_line

    @classmethod
    def open(cls, store: VaultDocumentStore, path: Path, cursor_line: int = 0) -> FileEditor:
        return cls(path, store.read(path), cursor_line, store)

    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def replace_line(self, index: int, text: str) -> None:
        if not 0 <= index < len(self._lines):
            raise IndexError(f"Line {index} out of range")
        self._lines[index] = text
        if self.path is not None:
            self._store.write(self.path, "\n".join(self._lines))

    def set_cursor(self, index: int) -> None:
        self.cursor_line = index
