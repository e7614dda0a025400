# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from .deadlines import is_valid_deadline, parse_deadline
from .errors import InvalidDeadlineError, StorageUnwritableError, TaskNotFoundError
from .task_models import Task

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

COMPLETION_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
# Stand-in for a completed record loaded without its completion date.
UNKNOWN_COMPLETION_DATE = "Unknown"


def _given(value: str | None) -> bool:
    """Edit merge rule: None and "" both mean "leave unchanged"."""
    return value is not None and value != ""


class TaskStore:
    """
    JSON-file task store.

    The whole collection lives in memory; every mutating call rewrites the file:
    - validate first, then mutate, then save
    - a failed save raises StorageUnwritableError (memory is already updated)
    - a missing/broken file on load means "start with no tasks"

    Not safe for concurrent processes: last writer wins.
    """

    def __init__(self, path: str | Path = "tasks.json", *, clock: Clock | None = None) -> None:
        self._path = Path(path)
        self._clock: Clock = clock or datetime.now
        self._tasks: list[Task] = []
        self.load()
        logger.info("TaskStore ready path=%s total=%s", self._path, len(self._tasks))

    @property
    def path(self) -> Path:
        return self._path

    # ---- persistence ----

    def load(self) -> list[Task]:
        """Read tasks from disk; any read or parse problem yields an empty list."""
        self._tasks = self._read_tasks()
        return self._tasks

    def _read_tasks(self) -> list[Task]:
        if not self._path.exists():
            logger.debug("No task file at %s; starting empty.", self._path)
            return []

        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning("Failed to read tasks from %s (%s); starting empty.", self._path, e)
            return []

        if not isinstance(data, list):
            logger.warning("Task file %s is not a JSON array; starting empty.", self._path)
            return []

        tasks: list[Task] = []
        for raw in data:
            if not isinstance(raw, dict):
                logger.warning("Skipping non-object task record in %s: %r", self._path, raw)
                continue
            try:
                task = Task.from_dict(raw)
            except ValueError:
                logger.warning("Skipping task record without id in %s: %r", self._path, raw)
                continue
            tasks.append(self._repair_completion(task))
        return tasks

    def _repair_completion(self, task: Task) -> Task:
        """Restore "completion_date iff completed" for hand-edited records; `completed` wins."""
        if task.completed and task.completion_date is None:
            logger.warning("Task id=%s is completed but has no completion date.", task.id)
            task.completion_date = UNKNOWN_COMPLETION_DATE
        elif not task.completed and task.completion_date is not None:
            logger.warning("Task id=%s is not completed; dropping its completion date.", task.id)
            task.completion_date = None
        return task

    def save(self) -> None:
        payload = json.dumps([t.to_dict() for t in self._tasks], ensure_ascii=False, indent=2)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload + "\n", "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            # The caller reports the failure; the traceback only goes to the debug log.
            logger.debug("Failed to save tasks to %s", self._path, exc_info=True)
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StorageUnwritableError(self._path, str(e)) from e
        logger.debug("Saved %d tasks to %s", len(self._tasks), self._path)

    # ---- helpers ----

    def _new_id(self) -> str:
        # Millisecond timestamp; bumped when two adds land in the same millisecond.
        candidate = int(self._clock().timestamp() * 1000)
        taken = {t.id for t in self._tasks}
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    def _require(self, task_id: str) -> Task:
        task = self.find_by_id(task_id)
        if task is None:
            logger.debug("Task not found id=%s", task_id)
            raise TaskNotFoundError(task_id)
        return task

    def _check_deadline(self, deadline: str) -> None:
        if not is_valid_deadline(deadline, now=self._clock()):
            logger.debug("Rejected deadline %r", deadline)
            raise InvalidDeadlineError(deadline)

    # ---- public API ----

    def count(self) -> int:
        return len(self._tasks)

    def add(
        self,
        title: str,
        description: str | None = None,
        deadline: str | None = None,
    ) -> Task:
        if _given(deadline):
            self._check_deadline(deadline)  # type: ignore[arg-type]

        task = Task(
            id=self._new_id(),
            title=title,
            description=description or None,
            deadline=deadline or None,
        )
        self._tasks.append(task)
        logger.info("Task added id=%s deadline=%s", task.id, task.deadline)
        self.save()
        return task

    def edit(
        self,
        task_id: str,
        title: str | None = None,
        description: str | None = None,
        deadline: str | None = None,
    ) -> Task:
        task = self._require(task_id)
        if _given(deadline):
            self._check_deadline(deadline)  # type: ignore[arg-type]

        if _given(title):
            task.title = title  # type: ignore[assignment]
        if _given(description):
            task.description = description
        if _given(deadline):
            task.deadline = deadline

        logger.info("Task edited id=%s", task.id)
        self.save()
        return task

    def complete(self, task_id: str) -> Task:
        task = self._require(task_id)
        task.completed = True
        task.completion_date = self._clock().strftime(COMPLETION_DATE_FORMAT)
        logger.info("Task completed id=%s at=%s", task.id, task.completion_date)
        self.save()
        return task

    def delete(self, task_id: str) -> Task:
        task = self._require(task_id)
        self._tasks.remove(task)
        logger.info("Task deleted id=%s", task.id)
        self.save()
        return task

    def find_by_id(self, task_id: str) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def list_all(self) -> list[Task]:
        return list(self._tasks)

    def list_expired(self) -> list[Task]:
        """Incomplete tasks whose deadline date is before today, in stored order."""
        today = self._clock().date()
        out: list[Task] = []
        for task in self._tasks:
            if task.completed or not task.deadline:
                continue
            due = parse_deadline(task.deadline)
            if due is not None and due.date() < today:
                out.append(task)
        return out

    def list_pending(self) -> list[Task]:
        """
        Incomplete tasks that have a deadline, earliest deadline first.

        Tasks without a deadline are left out of this view entirely.
        Deadlines that no longer parse go last; ties keep stored order.
        """
        pending = [t for t in self._tasks if t.deadline and not t.completed]

        def sort_key(task: Task) -> tuple[bool, datetime]:
            due = parse_deadline(task.deadline)
            return (due is None, due or datetime.max)

        return sorted(pending, key=sort_key)
