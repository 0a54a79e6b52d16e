# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_cli.config import Settings

ENV_NAMES = (
    "TODO_TASKS_FILE",
    "TODO_OUTPUT_FILE",
    "TODO_WRITE_OUTPUT",
    "TODO_UNDO_LIMIT",
    "TODO_LOG_LEVEL",
    "TODO_LOG_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so monkeypatch also removes values a .env load adds later
    for name in ENV_NAMES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_defaults_match_plain_run() -> None:
    s = Settings.from_env(dotenv=False)
    assert s.tasks_path == Path("tasks.txt")
    assert s.output_path == Path("output.txt")
    assert s.write_output is True
    assert s.undo_limit is None
    assert s.log_level == "WARNING"
    assert s.log_file is None


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_TASKS_FILE", str(tmp_path / "t.txt"))
    monkeypatch.setenv("TODO_OUTPUT_FILE", str(tmp_path / "o.txt"))
    monkeypatch.setenv("TODO_WRITE_OUTPUT", "no")
    monkeypatch.setenv("TODO_UNDO_LIMIT", "5")
    monkeypatch.setenv("TODO_LOG_LEVEL", "debug")
    monkeypatch.setenv("TODO_LOG_FILE", str(tmp_path / "todo.log"))

    s = Settings.from_env(dotenv=False)

    assert s.tasks_path == tmp_path / "t.txt"
    assert s.output_path == tmp_path / "o.txt"
    assert s.write_output is False
    assert s.undo_limit == 5
    assert s.log_level == "DEBUG"
    assert s.log_file == tmp_path / "todo.log"


@pytest.mark.parametrize("raw", ["0", "-2", "many", ""])
def test_undo_limit_fallbacks(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("TODO_UNDO_LIMIT", raw)
    assert Settings.from_env(dotenv=False).undo_limit is None


def test_dotenv_file_is_loaded(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("TODO_UNDO_LIMIT=3\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert Settings.from_env().undo_limit == 3
