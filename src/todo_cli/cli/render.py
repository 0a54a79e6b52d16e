# src/todo_cli/cli/render.py

"""Text rendering for the menu dialogue. Column widths are cosmetic only."""

from __future__ import annotations

from collections.abc import Iterable

from ..tasks.task_models import Task, TaskStats

RULE_WIDTH = 60
DESC_WIDTH = 30


def status_mark(task: Task) -> str:
    return "✓" if task.completed else "○"


def format_task_line(task: Task) -> str:
    return f"{status_mark(task)} [ID:{task.id}] {task.description:<{DESC_WIDTH}} (P:{task.priority})"


def format_task_details(task: Task) -> str:
    return "\n".join(
        [
            "--- Task Found ---",
            f"ID: {task.id}",
            f"Description: {task.description}",
            f"Priority: {task.priority}",
            f"Status: {'Done' if task.completed else 'Pending'}",
            "------------------",
        ]
    )


def format_stats(stats: TaskStats) -> str:
    return (
        f"Total: {stats.total}  Completed: {stats.completed}  "
        f"Pending: {stats.pending}  ({stats.completion_rate:.1f}% done)"
    )


def format_listing(tasks: Iterable[Task], stats: TaskStats) -> str:
    lines = [format_task_line(t) for t in tasks]
    if not lines:
        return "No tasks available."
    rule = "=" * RULE_WIDTH
    return "\n".join([rule, "TO-DO LIST".center(RULE_WIDTH), rule, *lines, rule, format_stats(stats)])
