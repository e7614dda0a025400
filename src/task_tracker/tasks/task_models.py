# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class Task:
    """
    A single tracked task.

    Notes:
    - `completion_date` is set iff `completed` is true.
    - `deadline` is kept as the exact text the user supplied (see deadlines.py).
    - JSON keys match the on-disk format; `completion_date` is stored as "completionDate".
    """

    id: str
    title: str
    description: str | None = None
    deadline: str | None = None
    completed: bool = False
    completion_date: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"id": self.id, "title": self.title}
        if self.description is not None:
            out["description"] = self.description
        if self.deadline is not None:
            out["deadline"] = self.deadline
        out["completed"] = self.completed
        if self.completion_date is not None:
            out["completionDate"] = self.completion_date
        return out

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        if raw.get("id") is None:
            raise ValueError("task record has no id")

        def opt_str(key: str) -> str | None:
            val = raw.get(key)
            return None if val is None else str(val)

        return cls(
            id=str(raw["id"]),
            title=str(raw.get("title") or ""),
            description=opt_str("description"),
            deadline=opt_str("deadline"),
            # Only a JSON true counts; "false", 1 and friends do not.
            completed=raw.get("completed") is True,
            completion_date=opt_str("completionDate"),
        )
