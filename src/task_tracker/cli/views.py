# src/task_tracker/cli/views.py

"""Plain-text rendering of tasks for the CLI."""

from __future__ import annotations

from collections.abc import Iterable

from ..tasks.task_models import Task

SEPARATOR = "----------------------------"


def _summary_lines(task: Task) -> list[str]:
    return [
        f"  ID: {task.id}",
        f"  Title: {task.title}",
        f"  Description: {task.description or 'No description'}",
        f"  Deadline: {task.deadline or 'No deadline'}",
    ]


def format_task(task: Task) -> str:
    lines = _summary_lines(task)
    lines.append(f"  Status: {'Completed' if task.completed else 'Pending'}")
    lines.append(f"  Completion Date: {task.completion_date or 'Not completed'}")
    lines.append(SEPARATOR)
    return "\n".join(lines)


def format_all(tasks: Iterable[Task]) -> str:
    lines = ["All tasks:"]
    blocks = [format_task(t) for t in tasks]
    lines.extend(blocks or ["No tasks."])
    return "\n".join(lines)


def format_expired(tasks: list[Task]) -> str:
    # Header only when there is something to show.
    if not tasks:
        return "No expired tasks."
    lines = ["Expired tasks:"]
    for t in tasks:
        lines.extend(_summary_lines(t))
        lines.append(SEPARATOR)
    return "\n".join(lines)


def format_pending(tasks: list[Task]) -> str:
    lines = ["Pending tasks (sorted by deadline):"]
    if not tasks:
        lines.append("No pending tasks.")
    for t in tasks:
        lines.extend(_summary_lines(t))
        lines.append(SEPARATOR)
    return "\n".join(lines)
