"""Section-aware insertion of a task line into a daily note.

Three policies, chosen by the configured section header:

- No header: insert before a trailing ``- [ ]`` placeholder, or append at the
  end of the note after a blank separator line.
- Header not found: create the section at the end of the note.
- Header found: insert before the section's placeholder if it has one,
  otherwise right after the last non-blank line of the section.

All functions here are pure and operate on the note as a list of lines.
"""

from __future__ import annotations

from forwardtask.tasks.parser import is_placeholder


def insert_before(lines: list[str], index: int, *new: str) -> None:
    """Insert ``new`` lines so the first of them lands at ``index``."""
    lines[index:index] = new


def insert_after(lines: list[str], index: int, *new: str) -> None:
    """Insert ``new`` lines directly after ``index``."""
    lines[index + 1 : index + 1] = new


def find_header(lines: list[str], header: str) -> int | None:
    """Index of the first line whose trimmed text equals ``header``."""
    for i, ln in enumerate(lines):
        if ln.strip() == header:
            return i
    return None


def find_section_end(lines: list[str], header_index: int) -> tuple[int, bool]:
    """Return (last line of the section, whether another heading follows).

    Any line starting with ``#`` ends the section; heading levels are not compared.
    """
    for j in range(header_index + 1, len(lines)):
        if lines[j].strip().startswith("#"):
            return j - 1, True
    return len(lines) - 1, False


def find_placeholder(lines: list[str], start: int, end: int) -> int | None:
    """Scan ``lines[start:end + 1]`` backward for the last placeholder line."""
    for i in range(end, start - 1, -1):
        if lines[i].strip() == "":
            continue
        if is_placeholder(lines[i]):
            return i
    return None


def _last_content_line(lines: list[str], start: int, end: int) -> int | None:
    for i in range(end, start - 1, -1):
        if lines[i].strip() != "":
            return i
    return None


def _append_without_header(lines: list[str], text: str) -> None:
    if lines and is_placeholder(lines[-1]):
        # Keep the end-of-note placeholder as the cursor for future inserts
        insert_before(lines, len(lines) - 1, text)
        return

    if lines and lines[-1] != "":
        lines.append("")
    lines.append(text)


def _append_with_new_header(lines: list[str], header: str, text: str) -> None:
    if lines and lines[-1] != "":
        lines.append("")
    lines.extend([header, "", text])


def _append_with_existing_header(lines: list[str], header_index: int, text: str) -> None:
    section_end, has_next_section = find_section_end(lines, header_index)

    placeholder = find_placeholder(lines, header_index + 1, section_end)
    if placeholder is not None:
        insert_before(lines, placeholder, text)
        return

    last_content = _last_content_line(lines, header_index + 1, section_end)
    if last_content is None:
        last_content = header_index

    insert_at = last_content + 1
    if has_next_section and insert_at < len(lines) and lines[insert_at].strip() != "":
        # Keep a blank line between the new task and the next heading
        insert_after(lines, last_content, text, "")
    else:
        insert_after(lines, last_content, text)


def insert_task(content: str, task_text: str, header: str = "") -> str:
    """Return ``content`` with ``task_text`` inserted according to ``header``.

    Args:
        content: Full text of the destination note.
        task_text: The task line to insert, e.g. ``"- [ ] Call the bank"``.
        header: Section header line to insert under (e.g. ``"## Tasks"``).
            Empty means append at the end of the note.

    Returns:
        The full new note text. The input is never modified in place.
    """
    lines = content.split("\n")
    header = header.strip()

    if not header:
        _append_without_header(lines, task_text)
        return "\n".join(lines)

    header_index = find_header(lines, header)
    if header_index is None:
        _append_with_new_header(lines, header, task_text)
    else:
        _append_with_existing_header(lines, header_index, task_text)

    return "\n".join(lines)
