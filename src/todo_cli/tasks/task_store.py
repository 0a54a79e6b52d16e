# src/todo_cli/tasks/task_store.py

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import replace

from .errors import EmptyDescriptionError, NothingToUndoError, TaskNotFoundError
from .task_models import (
    DEFAULT_PRIORITY,
    KEEP_PRIORITY,
    PRIORITY_MAX,
    PRIORITY_MIN,
    Task,
    TaskStats,
    coerce_priority,
    has_text,
    is_valid_priority,
)

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory ordered task store with O(1) lookup by id and undo of deletes.

    Layout:
    - _order: tasks in display order (append at tail, undo restores at head)
    - _index: id -> the same Task instance that sits in _order
    - _graveyard: LIFO of deleted tasks; right end is the top

    Every public mutation either completes or raises a TaskError before touching
    any of the three containers.

    undo_limit caps the graveyard depth (None or <= 0 means unbounded). When the
    cap is reached the oldest deleted task is dropped.
    """

    def __init__(self, *, undo_limit: int | None = None) -> None:
        self._order: list[Task] = []
        self._index: dict[int, Task] = {}
        maxlen = undo_limit if undo_limit and undo_limit > 0 else None
        self._graveyard: deque[Task] = deque(maxlen=maxlen)
        self._next_id = 1

    @classmethod
    def from_tasks(cls, tasks: Iterable[Task], *, undo_limit: int | None = None) -> TaskStore:
        store = cls(undo_limit=undo_limit)
        for task in tasks:
            store.adopt(task)
        return store

    # ---- introspection ----

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def undo_limit(self) -> int | None:
        return self._graveyard.maxlen

    @property
    def undo_depth(self) -> int:
        return len(self._graveyard)

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._order)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._index

    def __repr__(self) -> str:
        return (
            f"TaskStore(size={len(self._order)}, next_id={self._next_id}, "
            f"undo_depth={len(self._graveyard)})"
        )

    # ---- loading ----

    def adopt(self, task: Task) -> None:
        """
        Append an already-numbered task (e.g. read from disk) keeping its id.

        Raises ValueError on a duplicate id, an empty description or a
        non-positive id; out-of-range priorities are coerced like add_task does.
        """
        if task.id < 1:
            raise ValueError(f"task id must be positive, got {task.id}")
        if task.id in self._index:
            raise ValueError(f"duplicate task id {task.id}")
        if not has_text(task.description):
            raise ValueError(f"task {task.id} has an empty description")

        task = replace(task, priority=coerce_priority(task.priority), completed=bool(task.completed))
        self._install_tail(task)
        self._next_id = max(self._next_id, task.id + 1)

    # ---- mutations ----

    def add_task(self, description: str, priority: int = DEFAULT_PRIORITY) -> int:
        if not has_text(description):
            raise EmptyDescriptionError()

        if not is_valid_priority(priority):
            logger.debug(
                "Priority %s outside %d..%d, using %d",
                priority,
                PRIORITY_MIN,
                PRIORITY_MAX,
                DEFAULT_PRIORITY,
            )
            priority = DEFAULT_PRIORITY

        task_id = self._next_id
        self._install_tail(Task(id=task_id, description=description, priority=priority))
        self._next_id += 1
        logger.debug("Added task id=%s priority=%s", task_id, priority)
        return task_id

    def edit_task(
        self,
        task_id: int,
        *,
        description: str | None = None,
        priority: int = KEEP_PRIORITY,
    ) -> list[str]:
        """
        Update description and/or priority of an existing task.

        - description None, blank or only '|' keeps the current one
        - priority KEEP_PRIORITY keeps the current one; values outside 1..5 are
          ignored and reported in the returned warnings list
        """
        task = self.get_task(task_id)
        warnings: list[str] = []

        if priority != KEEP_PRIORITY and not is_valid_priority(priority):
            logger.info("Rejected priority %s for task id=%s", priority, task_id)
            warnings.append("Invalid priority. Keeping old value.")

        if has_text(description):
            task.description = description
        if is_valid_priority(priority):
            task.priority = priority

        logger.debug("Edited task id=%s", task_id)
        return warnings

    def delete_task(self, task_id: int) -> Task:
        task = self.get_task(task_id)

        for pos, current in enumerate(self._order):
            if current is task:
                del self._order[pos]
                break
        del self._index[task_id]

        if self._graveyard.maxlen is not None and len(self._graveyard) == self._graveyard.maxlen:
            dropped = self._graveyard[0]
            logger.debug("Undo buffer full, dropping deleted task id=%s", dropped.id)
        self._graveyard.append(task)

        logger.debug("Deleted task id=%s (undo depth=%d)", task_id, len(self._graveyard))
        return task

    def undo_delete(self) -> int:
        if not self._graveyard:
            raise NothingToUndoError()

        task = self._graveyard.pop()
        self._order.insert(0, task)
        self._index[task.id] = task
        self._next_id = max(self._next_id, task.id + 1)

        logger.debug("Restored task id=%s", task.id)
        return task.id

    def set_completed(self, task_id: int, completed: bool) -> bool:
        """Set the completion flag. Returns False if it already had that value."""
        task = self.get_task(task_id)
        if task.completed == completed:
            return False
        task.completed = completed
        logger.debug("Task id=%s completed=%s", task_id, completed)
        return True

    # ---- queries ----

    def get_task(self, task_id: int) -> Task:
        task = self._index.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def pending(self) -> Iterator[Task]:
        return (t for t in self._order if not t.completed)

    def completed(self) -> Iterator[Task]:
        return (t for t in self._order if t.completed)

    def stats(self) -> TaskStats:
        return TaskStats(
            total=len(self._order),
            completed=sum(1 for _ in self.completed()),
            pending=sum(1 for _ in self.pending()),
        )

    # ---- low-level helpers ----

    def _install_tail(self, task: Task) -> None:
        self._order.append(task)
        self._index[task.id] = task
