"""Task line parser: recognizes checklist lines and rewrites them as moved."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

# Task line in any note: <indent><bullet> [<status>] <content>
TASK_LINE_RE = re.compile(r"^(\s*)([-*])\s+\[(.)\]\s+(.*)$")

# Open task with real content (a bare "- [ ]" placeholder does not match)
OPEN_TASK_RE = re.compile(r"^\s*[-*]\s+\[\s\]\s+.+")

MOVED_STATUS = ">"
PLACEHOLDERS = ("- [ ]", "* [ ]")


class TaskStatus(StrEnum):
    """Lifecycle state of a task line, derived from its checkbox character."""

    OPEN = "open"
    MOVED = "moved"
    OTHER = "other"


@dataclass
class TaskLine:
    """A single checklist line split into its parts."""

    indent: str
    bullet: str  # "-" or "*"
    status: str  # the one character inside the brackets
    content: str
    eol: str = ""  # "\r" left over from a CRLF note split on "\n"

    @property
    def state(self) -> TaskStatus:
        if self.status == MOVED_STATUS:
            return TaskStatus.MOVED
        if self.status.isspace():
            return TaskStatus.OPEN
        return TaskStatus.OTHER

    @property
    def is_moved(self) -> bool:
        """Moved is terminal: a moved line must never be moved again."""
        return self.state is TaskStatus.MOVED

    def render(self) -> str:
        return f"{self.indent}{self.bullet} [{self.status}] {self.content}{self.eol}"


def parse_task_line(line: str) -> TaskLine | None:
    """Parse a task line, returning None if the line is not a task."""
    eol = "\r" if line.endswith("\r") else ""
    m = TASK_LINE_RE.match(line.removesuffix("\r"))
    if not m:
        return None
    return TaskLine(
        indent=m.group(1), bullet=m.group(2), status=m.group(3), content=m.group(4), eol=eol
    )


def to_plain_task(task: TaskLine) -> str:
    """Canonical open task for the destination note (bullet, status and indent dropped)."""
    return f"- [ ] {task.content}"


def to_moved_marker(task: TaskLine) -> str:
    """Rewrite the source line with the moved status, keeping indent and bullet."""
    return f"{task.indent}{task.bullet} [{MOVED_STATUS}] {task.content}{task.eol}"


def is_placeholder(line: str) -> bool:
    """Check if a line is an empty task left as an insertion cursor."""
    return line.strip() in PLACEHOLDERS


def find_next_open_task(lines: list[str], from_line: int) -> int | None:
    """Return the index of the first open task after ``from_line``, or None."""
    for i in range(from_line + 1, len(lines)):
        if OPEN_TASK_RE.match(lines[i]):
            return i
    return None
