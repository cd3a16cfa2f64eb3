"""Task line recognition and section-aware insertion."""

from forwardtask.tasks.inserter import insert_task
from forwardtask.tasks.parser import TaskLine, TaskStatus, parse_task_line

__all__ = ["TaskLine", "TaskStatus", "insert_task", "parse_task_line"]
