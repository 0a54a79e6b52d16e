# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_cli.core.state import AppState
from todo_cli.tasks.task_store import TaskStore

from .fakes import FakeConsole


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap helpers.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any .env file.
    """
    return SimpleNamespace(
        tasks_path=tmp_path / "tasks.txt",
        output_path=tmp_path / "output.txt",
        write_output=True,
        undo_limit=None,
        log_level="WARNING",
        log_file=None,
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store)


@pytest.fixture()
def console() -> FakeConsole:
    return FakeConsole()
