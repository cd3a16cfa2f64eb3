"""Notification sinks for user-visible move results."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

logger = logging.getLogger(__name__)


class LogNotifier:
    """Logs each notification and keeps them for the caller to return."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        logger.info("Notice: %s", message)
        self.messages.append(message)


class PrintNotifier:
    """Prints notifications for command-line use."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def notify(self, message: str) -> None:
        print(message, file=self.stream or sys.stdout)
