# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loads the task file), runs one command,
prints its output and turns store errors into exit codes.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..cli.commands import UsageError, registry
from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.deadlines import DEADLINE_FORMATS_HELP
from ..tasks.errors import InvalidDeadlineError, StorageUnwritableError, TaskNotFoundError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_USAGE = 2
EXIT_INVALID_DEADLINE = 3
EXIT_STORAGE = 4
EXIT_ERROR = 5


def main(argv: list[str] | None = None, *, settings=None, clock=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    try:
        setup_logging(
            log_dir=settings.data_dir,
            console_level=console_level,
            log_to_file=bool(getattr(settings, "log_to_file", True)),
        )
        logger.info("Starting %s argv=%s", getattr(settings, "app_name", "task-tracker"), argv)

        state = create_initial_state(settings=settings, clock=clock)
        out = registry.handle(state, argv)
    except UsageError as e:
        print(str(e), file=sys.stderr)
        return EXIT_USAGE
    except TaskNotFoundError:
        print("Task not found.", file=sys.stderr)
        return EXIT_NOT_FOUND
    except InvalidDeadlineError as e:
        print(
            f"Invalid deadline: {e.deadline}. Use {DEADLINE_FORMATS_HELP} with a future date.",
            file=sys.stderr,
        )
        return EXIT_INVALID_DEADLINE
    except StorageUnwritableError as e:
        print(f"Failed to save tasks: {e.reason}", file=sys.stderr)
        return EXIT_STORAGE
    except OSError as e:
        # Log/data directories that cannot be created, and similar.
        logger.debug("I/O error during startup", exc_info=True)
        print(f"I/O error: {e}", file=sys.stderr)
        return EXIT_ERROR

    print(out)
    return EXIT_OK


def run() -> None:
    try:
        code = main()
    except Exception:
        logger.exception("Unexpected error.")
        code = EXIT_ERROR
    sys.exit(code)


if __name__ == "__main__":
    run()
