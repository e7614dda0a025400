# src/task_tracker/tasks/errors.py

from __future__ import annotations

from pathlib import Path


class TaskTrackerError(Exception):
    """Base class for failures the CLI reports to the user."""


class TaskNotFoundError(TaskTrackerError):
    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id


class InvalidDeadlineError(TaskTrackerError):
    def __init__(self, deadline: str) -> None:
        super().__init__(f"Invalid deadline: {deadline}")
        self.deadline = deadline


class StorageUnwritableError(TaskTrackerError):
    """Saving failed; the in-memory change was made but is not on disk."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to write {path}: {reason}")
        self.path = path
        self.reason = reason
