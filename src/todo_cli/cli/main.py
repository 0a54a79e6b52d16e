# src/todo_cli/cli/main.py

"""
CLI entrypoint.

Initializes logging, loads the task file, runs the menu loop on stdin/stdout
and saves on the way out. Returns the process exit status.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, persist_state
from ..config import get_settings
from ..connectors.console_connector import StdioConsole, run_console_loop
from ..core.ports import Console
from ..logging_setup import setup_logging
from ..tasks.errors import TaskError

logger = logging.getLogger(__name__)


def main(*, settings=None, console: Console | None = None) -> int:
    if settings is None:
        settings = get_settings()
        # choose console log level from settings.log_level
        level_name = str(getattr(settings, "log_level", "WARNING")).upper()
        console_level = logging.getLevelName(level_name)
        if not isinstance(console_level, int):
            console_level = logging.WARNING
        setup_logging(log_file=getattr(settings, "log_file", None), console_level=console_level)

    console = console or StdioConsole()

    try:
        state = create_initial_state(settings=settings)
    except TaskError as e:
        logger.error("Startup failed: %s", e, exc_info=e.__cause__)
        console.write(f"✗ {e}")
        return 1

    run_console_loop(state, console)

    status = persist_state(state, console)
    console.write("Goodbye!")
    return status


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
