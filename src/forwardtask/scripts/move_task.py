"""CLI entry point for moving a task into a daily note.

Usage:
    uv run forwardtask-move today --file Projects/Garden.md --line 12
    uv run forwardtask-move tomorrow --file Projects/Garden.md --line 12
    uv run forwardtask-move next-day --file 00_Daily/2026-10-18.md --line 4
    uv run forwardtask-move today --file Inbox.md --line 3 --days 7
    uv run forwardtask-move set-header --header "## Tasks"
    uv run forwardtask-move show-header
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from forwardtask.config import get_settings
from forwardtask.mover import TaskMover
from forwardtask.notify import PrintNotifier
from forwardtask.settings import get_section_header, set_section_header
from forwardtask.vault.daily import DailyNotes
from forwardtask.vault.store import FileEditor, VaultDocumentStore

logger = logging.getLogger("forwardtask.scripts")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Move a task into a daily note")
    parser.add_argument(
        "command",
        choices=["today", "tomorrow", "next-day", "show-header", "set-header"],
        help="Where to move the task, or a section header setting command",
    )
    parser.add_argument("--file", type=Path, help="Note holding the task (vault-relative or absolute)")
    parser.add_argument("--line", type=int, default=0, help="0-based line index of the task")
    parser.add_argument(
        "--days",
        type=int,
        default=None,
        help="Day offset for today/tomorrow (0 = today); not valid with next-day",
    )
    parser.add_argument("--header", default=None, help="Section header for set-header")
    parser.add_argument(
        "--vault-path",
        type=Path,
        default=None,
        help="Override vault path (default: from config/env)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    settings = get_settings()
    data_path = Path(settings.data_path)

    if args.command == "show-header":
        header = get_section_header(data_path)
        print(header if header else "(none: tasks are appended at the end of the note)")
        return

    if args.command == "set-header":
        if args.header is None:
            parser.error("set-header requires --header (use --header '' to clear)")
        set_section_header(data_path, args.header)
        print(f"Section header set to: {args.header!r}")
        return

    if args.file is None:
        parser.error(f"{args.command} requires --file")
    if args.days is not None and args.command == "next-day":
        parser.error("--days cannot be combined with next-day")

    vault_path = args.vault_path or settings.vault_path
    if vault_path is None:
        logger.error("No vault path configured. Set FORWARDTASK_VAULT_PATH or use --vault-path")
        sys.exit(1)
    vault_path = Path(vault_path)
    if not vault_path.exists():
        logger.error("Vault path does not exist: %s", vault_path)
        sys.exit(1)

    note_path = args.file if args.file.is_absolute() else vault_path / args.file
    store = VaultDocumentStore()
    try:
        editor = FileEditor.open(store, note_path, args.line)
    except (OSError, IndexError, UnicodeDecodeError) as e:
        logger.error("Cannot open %s at line %d: %s", note_path, args.line, e)
        sys.exit(1)

    daily_notes = DailyNotes(
        vault_path,
        folder=settings.daily_folder,
        date_format=settings.daily_date_format,
        template=settings.daily_template,
    )
    mover = TaskMover(
        daily_notes, store, PrintNotifier(), section_header=get_section_header(data_path)
    )

    if args.days is not None:
        outcome = asyncio.run(mover.move_task(editor, args.days))
    elif args.command == "next-day":
        outcome = asyncio.run(mover.move_task_relative(editor))
    else:
        offset = 1 if args.command == "tomorrow" else 0
        outcome = asyncio.run(mover.move_task(editor, offset))

    if not outcome.moved:
        sys.exit(1)
    if outcome.next_line is not None:
        logger.info("Next open task on line %d", outcome.next_line)


if __name__ == "__main__":
    main()
