"""Daily notes: locate, create, and date the notes in the daily folder."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime, timedelta
from pathlib import Path

import frontmatter

logger = logging.getLogger(__name__)


class DailyNoteError(Exception):
    """Raised when the daily note for a date cannot be found or created."""


def _skeleton(day: date) -> str:
    """Default daily note body used when no template is configured."""
    date_str = day.isoformat()
    lines = [
        "---",
        "type: daily",
        f"date: {date_str}",
        "---",
        "",
        "## Focus",
        "- ",
        "",
        "## Notes",
        "- ",
        "",
        "## Tasks",
        "- [ ]",
        "",
    ]
    return "\n".join(lines)


class DailyNotes:
    """Resolves day offsets to daily note files inside a vault."""

    def __init__(
        self,
        vault_path: Path | None,
        folder: str = "00_Daily",
        date_format: str = "%Y-%m-%d",
        template: str | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the daily notes resolver.

        Args:
            vault_path: Path to the vault root. None disables daily notes.
            folder: Vault-relative folder holding the daily notes.
            date_format: strftime format of daily note filenames (without ``.md``).
            template: Optional vault-relative path of a template note.
            today: Clock returning the current date.
        """
        self.vault_path = vault_path
        self.folder = folder
        self.date_format = date_format
        self.template = template
        self.today = today

    @property
    def daily_dir(self) -> Path:
        if self.vault_path is None:
            raise DailyNoteError("Vault path not configured")
        return self.vault_path / self.folder

    def note_path(self, day: date) -> Path:
        return self.daily_dir / f"{day.strftime(self.date_format)}.md"

    def get_daily_note(self, day: date) -> Path | None:
        path = self.note_path(day)
        return path if path.is_file() else None

    def create_daily_note(self, day: date) -> Path:
        """Create the daily note for ``day`` from the template or the default skeleton."""
        path = self.note_path(day)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self._render_template(day), encoding="utf-8")
        except OSError as e:
            raise DailyNoteError(f"Error creating daily note {path.name}: {e}") from e
        logger.info("Created daily note %s", path)
        return path

    def _render_template(self, day: date) -> str:
        if not self.template:
            return _skeleton(day)

        template_file = self.vault_path / self.template if self.vault_path else None
        if template_file is None or not template_file.is_file():
            logger.warning("Daily note template not found: %s, using default", self.template)
            return _skeleton(day)

        content = template_file.read_text(encoding="utf-8")
        return content.replace("{{date}}", day.isoformat()).replace(
            "{{title}}", day.strftime(self.date_format)
        )

    def resolve(self, days_offset: int = 0) -> Path:
        """Return the daily note ``days_offset`` days from today, creating it if absent.

        Raises:
            DailyNoteError: If the vault is unavailable or the note cannot be created.
        """
        if self.vault_path is None or not self.vault_path.exists():
            raise DailyNoteError("Daily notes are not available: vault path missing")

        target = self.today() + timedelta(days=days_offset)
        existing = self.get_daily_note(target)
        if existing:
            return existing
        return self.create_daily_note(target)

    def date_from_path(self, path: Path) -> date | None:
        """Return the date of a daily note, or None if ``path`` is not one.

        The filename is parsed with the configured date format first; notes with
        other names count as daily notes when their frontmatter says
        ``type: daily`` and carries a ``date``.
        """
        try:
            return datetime.strptime(path.stem, self.date_format).date()
        except ValueError:
            pass

        if not path.is_file():
            return None
        try:
            post = frontmatter.load(str(path))
        except Exception:
            logger.debug("Could not parse frontmatter of %s", path, exc_info=True)
            return None

        if post.metadata.get("type") != "daily":
            return None
        fm_date = post.metadata.get("date")
        if isinstance(fm_date, datetime):
            return fm_date.date()
        if isinstance(fm_date, date):
            return fm_date
        if isinstance(fm_date, str):
            try:
                return date.fromisoformat(fm_date.strip())
            except ValueError:
                return None
        return None
