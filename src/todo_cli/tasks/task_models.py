# src/todo_cli/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass

PRIORITY_MIN = 1
PRIORITY_MAX = 5
DEFAULT_PRIORITY = 1

# Passed to edit to leave the priority untouched (the menu's "0 to keep").
KEEP_PRIORITY = 0

_BLANK_ON_SAVE = str.maketrans({"|": " ", "\r": " ", "\n": " "})


def is_valid_priority(priority: int) -> bool:
    return PRIORITY_MIN <= priority <= PRIORITY_MAX


def has_text(description: str | None) -> bool:
    """
    True if the description still has visible text once saved.

    '|' and line breaks are written as spaces, so "| |" counts as empty.
    """
    if not description:
        return False
    return bool(description.translate(_BLANK_ON_SAVE).strip())


def coerce_priority(priority: int) -> int:
    """Out-of-range priorities fall back to DEFAULT_PRIORITY (no error)."""
    return priority if is_valid_priority(priority) else DEFAULT_PRIORITY


@dataclass(slots=True)
class Task:
    """
    A single to-do item.

    Notes:
    - id is assigned by TaskStore and never changes, even across delete/undo.
    - description may contain '|'; the file codec replaces it with a space on save.
    """

    id: int
    description: str
    priority: int = DEFAULT_PRIORITY
    completed: bool = False

    def as_tuple(self) -> tuple[int, str, int, bool]:
        return (self.id, self.description, self.priority, self.completed)


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int
    completed: int
    pending: int

    @property
    def completion_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return self.completed * 100.0 / self.total
