# src/todo_cli/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from ..tasks.task_store import TaskStore


class DispatcherStatus(StrEnum):
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: Any
    task_store: TaskStore

    status: DispatcherStatus = DispatcherStatus.RUNNING

    @property
    def running(self) -> bool:
        return self.status is DispatcherStatus.RUNNING

    def terminate(self) -> None:
        self.status = DispatcherStatus.TERMINATED
