# src/todo_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- rehydrates the task store from the task file,
- persists the store (and the optional export) on shutdown.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import Console
from ..core.state import AppState
from ..tasks.errors import TaskIOError
from ..tasks.task_codec import load_tasks, save_tasks, write_export

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    Raises TaskIOError if the task file exists but cannot be read.
    """
    if settings is None:
        settings = get_settings()

    store = load_tasks(settings.tasks_path, undo_limit=getattr(settings, "undo_limit", None))
    return AppState(settings=settings, task_store=store)


def persist_state(state: AppState, console: Console) -> int:
    """
    Save the live tasks (deleted ones are dropped) and write the export.

    Returns the process exit status: 1 if the task file could not be written.
    A failed export is reported but does not change the status.
    """
    settings = state.settings
    try:
        save_tasks(state.task_store, settings.tasks_path)
    except TaskIOError as e:
        logger.error("Final save failed: %s", e, exc_info=e.__cause__)
        console.write(f"✗ {e}")
        return 1
    console.write(f"✓ Tasks saved to '{settings.tasks_path}'.")

    if getattr(settings, "write_output", True):
        try:
            write_export(state.task_store, settings.output_path)
        except TaskIOError as e:
            logger.warning("Export failed: %s", e)
            console.write(f"✗ {e}")
        else:
            console.write(f"✓ Output written to '{settings.output_path}'.")

    return 0
