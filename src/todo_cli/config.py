# src/todo_cli/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required: with an empty environment the app reads tasks.txt and
  writes tasks.txt/output.txt in the working directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TODO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_optional_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Files ----
    tasks_path: Path
    output_path: Path
    write_output: bool

    # ---- Store ----
    undo_limit: int | None

    # ---- Logging ----
    log_level: str
    log_file: Path | None

    @staticmethod
    def from_env(*, dotenv: bool = True) -> "Settings":
        if dotenv:
            # .env next to where the app is run, not next to this module
            load_dotenv(find_dotenv(usecwd=True), override=False)

        tasks_path = _env_path(_k("TASKS_FILE"), Path("tasks.txt"))
        output_path = _env_path(_k("OUTPUT_FILE"), Path("output.txt"))
        write_output = _env_bool(_k("WRITE_OUTPUT"), True)

        # 0 / negative = unbounded undo history
        undo_limit_raw = _env_int(_k("UNDO_LIMIT"), 0)
        undo_limit = undo_limit_raw if undo_limit_raw > 0 else None

        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_file = _env_optional_path(_k("LOG_FILE"))

        return Settings(
            tasks_path=tasks_path,
            output_path=output_path,
            write_output=write_output,
            undo_limit=undo_limit,
            log_level=log_level,
            log_file=log_file,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Process-wide settings, read from the environment on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
