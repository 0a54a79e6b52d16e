# src/todo_cli/tasks/task_codec.py

"""
Line-oriented task file format.

One task per line, four '|'-separated fields:

    <id>|<description>|<priority>|<completed>

completed is written as 1/0. There is no escaping: '|' (and line breaks) inside
a description are replaced with a single space on save, so such descriptions
do not survive a save/load cycle unchanged. Existing files depend on this.
"""

from __future__ import annotations

import contextlib
import logging
import os
import re
from collections.abc import Iterable
from pathlib import Path

from .errors import TaskIOError
from .task_models import Task
from .task_store import TaskStore

logger = logging.getLogger(__name__)

SEP = "|"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LINE_BREAKS = re.compile(r"[\r\n]")

# Bytes that are not valid UTF-8 are carried through load/save unchanged.
FILE_ERRORS = "surrogateescape"


def sanitize_description(description: str) -> str:
    return _LINE_BREAKS.sub(" ", description.replace(SEP, " "))


def encode_line(task: Task) -> str:
    desc = sanitize_description(task.description)
    return f"{task.id}{SEP}{desc}{SEP}{task.priority}{SEP}{1 if task.completed else 0}\n"


def encode_tasks(tasks: Iterable[Task]) -> str:
    return "".join(encode_line(t) for t in tasks)


def _leading_int(raw: str) -> int | None:
    m = _LEADING_INT.match(raw)
    return int(m.group(1)) if m else None


def decode_line(line: str) -> Task | None:
    """
    Parse one line. Returns None for lines that must be skipped:
    blank lines, fewer than three separators, non-numeric fields.
    """
    line = line.rstrip("\r\n")
    if not line:
        return None

    parts = line.split(SEP, 3)
    if len(parts) < 4:
        return None

    raw_id, desc, raw_prio, raw_done = parts
    task_id = _leading_int(raw_id)
    priority = _leading_int(raw_prio)
    done = _leading_int(raw_done)
    if task_id is None or priority is None or done is None:
        return None

    return Task(id=task_id, description=desc, priority=priority, completed=done != 0)


def save_tasks(tasks: Iterable[Task], path: str | Path) -> int:
    """
    Write tasks to path (write to a temp file, then replace).

    Returns the number of tasks written. Raises TaskIOError on failure; the
    previous file content is left intact in that case.
    """
    path = Path(path)
    items = list(tasks)
    payload = encode_tasks(items)
    tmp = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(tmp, "w", encoding="utf-8", errors=FILE_ERRORS, newline="\n") as f:
            f.write(payload)
        os.replace(tmp, path)
    except OSError as e:
        with contextlib.suppress(OSError):
            tmp.unlink()
        raise TaskIOError(path, "save tasks to", e.strerror or str(e)) from e

    logger.info("Saved %d tasks to %s", len(items), path)
    return len(items)


def load_tasks(path: str | Path, *, undo_limit: int | None = None) -> TaskStore:
    """
    Build a TaskStore from a task file.

    A missing file yields an empty store. Malformed lines, blank descriptions
    and repeated ids are skipped. Raises TaskIOError if the file exists but
    cannot be read.
    """
    path = Path(path)
    store = TaskStore(undo_limit=undo_limit)

    try:
        with open(path, encoding="utf-8", errors=FILE_ERRORS, newline="") as f:
            lines = f.read().split("\n")
    except FileNotFoundError:
        logger.info("No task file at %s, starting empty", path)
        return store
    except OSError as e:
        raise TaskIOError(path, "read tasks from", e.strerror or str(e)) from e

    skipped = 0
    for lineno, line in enumerate(lines, start=1):
        if not line.strip("\r"):
            continue
        task = decode_line(line)
        if task is None:
            logger.debug("Skipping malformed line %d in %s", lineno, path)
            skipped += 1
            continue
        try:
            store.adopt(task)
        except ValueError as e:
            logger.debug("Skipping line %d in %s: %s", lineno, path, e)
            skipped += 1

    logger.info("Loaded %d tasks from %s (skipped %d lines)", len(store), path, skipped)
    return store


def render_export_line(task: Task) -> str:
    mark = "[✓]" if task.completed else "[ ]"
    return f"{mark} {task.id} - {task.description} (P:{task.priority})\n"


def write_export(tasks: Iterable[Task], path: str | Path) -> None:
    """Write the human-readable listing (output.txt). Not read back by anything."""
    path = Path(path)
    try:
        text = "".join(render_export_line(t) for t in tasks)
        path.write_text(text, encoding="utf-8", errors=FILE_ERRORS)
    except OSError as e:
        raise TaskIOError(path, "write output to", e.strerror or str(e)) from e
    logger.info("Wrote export to %s", path)
