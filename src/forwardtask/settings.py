"""User-configurable settings stored in data/settings.json."""

from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, Any] = {
    # Header of the section tasks are inserted under, e.g. "## Tasks".
    # Empty means tasks are appended at the end of the daily note.
    "section_header": "",
}

_SETTINGS_FILE = "settings.json"


def load_settings(data_path: Path) -> dict[str, Any]:
    """Read settings from data_path/settings.json.

    Returns DEFAULT_SETTINGS and writes the defaults file if missing or unparseable.
    Keys missing from the file are filled in from DEFAULT_SETTINGS.
    """
    settings_file = data_path / _SETTINGS_FILE
    if settings_file.exists():
        try:
            with open(settings_file, encoding="utf-8") as f:
                loaded = json.load(f)
            if isinstance(loaded, dict):
                result: dict[str, Any] = {**DEFAULT_SETTINGS, **loaded}
                return result
            logger.warning("Settings file is not a JSON object, returning defaults")
        except (json.JSONDecodeError, OSError):
            logger.warning("Settings file corrupt or unreadable, returning defaults")
    # Write defaults so the file exists for next time
    save_settings(data_path, DEFAULT_SETTINGS)
    return DEFAULT_SETTINGS.copy()


def save_settings(data_path: Path, settings: dict[str, Any]) -> None:
    """Write settings to data_path/settings.json using atomic write."""
    data_path.mkdir(parents=True, exist_ok=True)
    settings_file = data_path / _SETTINGS_FILE
    fd, tmp_path = tempfile.mkstemp(dir=str(data_path), suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(settings, f, indent=2)
            f.write("\n")
        os.replace(tmp_path, str(settings_file))
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_path)
        raise


def get_section_header(data_path: Path) -> str:
    """Return the configured section header ("" when unset)."""
    value = load_settings(data_path).get("section_header", "")
    return value if isinstance(value, str) else ""


def set_section_header(data_path: Path, header: str) -> str:
    """Persist a new section header and return it."""
    settings = load_settings(data_path)
    settings["section_header"] = header
    save_settings(data_path, settings)
    logger.info("Section header set to %r", header)
    return header
