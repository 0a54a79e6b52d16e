# src/todo_cli/tasks/errors.py

"""
Errors raised by the task store, the file codec and the menu dispatcher.

All of them derive from TaskError so the console loop can render any of them
as a one-line diagnostic and keep running.
"""

from __future__ import annotations

from pathlib import Path


class TaskError(Exception):
    """Base class for recoverable task manager errors."""


class EmptyDescriptionError(TaskError, ValueError):
    def __init__(self) -> None:
        super().__init__("Description cannot be empty!")


class TaskNotFoundError(TaskError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task ID {task_id} not found!")
        self.task_id = task_id


class NothingToUndoError(TaskError):
    def __init__(self) -> None:
        super().__init__("No deleted task to undo.")


class TaskParseError(TaskError, ValueError):
    """Input from the console could not be read as the expected value."""

    def __init__(self, raw: str, expected: str = "a number") -> None:
        super().__init__(f"Invalid input {raw!r}: expected {expected}.")
        self.raw = raw


class TaskIOError(TaskError):
    """A task file could not be read or written."""

    def __init__(self, path: str | Path, action: str, reason: str = "") -> None:
        detail = f": {reason}" if reason else ""
        super().__init__(f"Unable to {action} '{path}'{detail}")
        self.path = Path(path)
        self.action = action
