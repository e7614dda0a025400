# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks.errors import TaskTrackerError
from . import views

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class UsageError(TaskTrackerError):
    """Unknown command or wrong number of arguments."""


@dataclass(frozen=True, slots=True)
class _Command:
    handler: CommandHandler
    help_text: str
    usage: str
    min_args: int
    max_args: int


class CommandRegistry:
    """Subcommand registry used by the CLI entry point (list, add, edit, ...)."""

    def __init__(self) -> None:
        self._commands: dict[str, _Command] = {}
        self._aliases: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        *,
        usage: str = "",
        min_args: int = 0,
        max_args: int = 0,
        aliases: list[str] | None = None,
    ) -> None:
        key = name.lower()
        self._commands[key] = _Command(handler, help_text, usage, min_args, max_args)
        for alias in aliases or []:
            self._aliases[alias.lower()] = key

    def handle(self, state: AppState, argv: list[str]) -> str:
        """
        Run `argv` (command name + positional args) and return the text to print.

        Store errors (not found, invalid deadline, save failure) propagate to the caller.
        """
        if not argv:
            raise UsageError("No command given. Use 'help' to list available commands.")

        name = argv[0].lower()
        args = argv[1:]

        key = self._aliases.get(name, name)
        cmd = self._commands.get(key)
        if cmd is None:
            raise UsageError(f"Unknown command: {name}. Use 'help' to list available commands.")

        if not cmd.min_args <= len(args) <= cmd.max_args:
            raise UsageError(f"Usage: {key} {cmd.usage}".rstrip())

        logger.debug("Running command %s args=%s", key, args)
        return cmd.handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, cmd in self._commands.items():
            lines.append(f"  {f'{name} {cmd.usage}'.rstrip()} - {cmd.help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _arg(args: list[str], i: int) -> str | None:
    return args[i] if i < len(args) else None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return views.format_all(state.task_store.list_all())


def cmd_add(state: AppState, args: list[str]) -> str:
    task = state.task_store.add(args[0], _arg(args, 1), _arg(args, 2))
    return f"Task added successfully. (ID: {task.id})"


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    edit <id> [title] [description] [deadline]

    Empty or omitted values leave the field unchanged, so `edit 42 "" "" 2030-01-01`
    changes only the deadline.
    """
    state.task_store.edit(args[0], _arg(args, 1), _arg(args, 2), _arg(args, 3))
    return "Task edited successfully."


def cmd_complete(state: AppState, args: list[str]) -> str:
    state.task_store.complete(args[0])
    return "Task marked as completed."


def cmd_delete(state: AppState, args: list[str]) -> str:
    state.task_store.delete(args[0])
    return "Task deleted successfully."


def cmd_expired(state: AppState, args: list[str]) -> str:
    return views.format_expired(state.task_store.list_expired())


def cmd_pending(state: AppState, args: list[str]) -> str:
    return views.format_pending(state.task_store.list_pending())


registry.register("list", cmd_list, help_text="Show all tasks.", aliases=["ls"])
registry.register(
    "add",
    cmd_add,
    help_text="Add a new task.",
    usage="<title> [description] [deadline]",
    min_args=1,
    max_args=3,
)
registry.register(
    "edit",
    cmd_edit,
    help_text="Edit a task (empty values keep the current ones).",
    usage="<id> [title] [description] [deadline]",
    min_args=1,
    max_args=4,
)
registry.register(
    "complete", cmd_complete, help_text="Mark a task as completed.", usage="<id>", min_args=1, max_args=1
)
registry.register(
    "delete", cmd_delete, help_text="Delete a task.", usage="<id>", min_args=1, max_args=1, aliases=["rm"]
)
registry.register("expired", cmd_expired, help_text="Show incomplete tasks past their deadline.")
registry.register("pending", cmd_pending, help_text="Show pending tasks sorted by deadline.")
registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
