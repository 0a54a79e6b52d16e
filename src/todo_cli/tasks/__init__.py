from .errors import (
    EmptyDescriptionError,
    NothingToUndoError,
    TaskError,
    TaskIOError,
    TaskNotFoundError,
    TaskParseError,
)
from .task_models import KEEP_PRIORITY, PRIORITY_MAX, PRIORITY_MIN, Task, TaskStats
from .task_store import TaskStore

__all__ = [
    "KEEP_PRIORITY",
    "PRIORITY_MAX",
    "PRIORITY_MIN",
    "EmptyDescriptionError",
    "NothingToUndoError",
    "Task",
    "TaskError",
    "TaskIOError",
    "TaskNotFoundError",
    "TaskParseError",
    "TaskStats",
    "TaskStore",
]
