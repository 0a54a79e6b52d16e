# src/todo_cli/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.ports import Console
from ..core.state import AppState
from ..tasks.errors import EmptyDescriptionError, TaskError, TaskParseError
from ..tasks.task_models import DEFAULT_PRIORITY, KEEP_PRIORITY, has_text
from .render import format_listing, format_task_details

MenuHandler = Callable[[AppState, Console], str | None]

logger = logging.getLogger(__name__)


def parse_int(raw: str, expected: str = "a number") -> int:
    text = raw.strip()
    try:
        return int(text)
    except ValueError:
        raise TaskParseError(text, expected) from None


def read_int(console: Console, prompt: str, expected: str = "a task ID") -> int:
    return parse_int(console.read_line(prompt), expected)


class MenuRegistry:
    """Numbered menu: maps a choice like "3" to a handler."""

    def __init__(self) -> None:
        self._handlers: dict[int, MenuHandler] = {}
        self._labels: dict[int, str] = {}

    def register(self, code: int, handler: MenuHandler, label: str) -> None:
        self._handlers[code] = handler
        self._labels[code] = label

    @property
    def codes(self) -> list[int]:
        return sorted(self._handlers)

    def handle(self, state: AppState, console: Console, line: str) -> str | None:
        """
        Dispatch one menu choice, reading any further arguments from console.
        Returns the reply to print (or None). TaskErrors become "✗ ..." lines.
        EOFError/KeyboardInterrupt from the console propagate to the caller.
        """
        try:
            code = parse_int(line, "a menu choice")
        except TaskParseError:
            logger.debug("Non-numeric menu choice %r", line)
            return "✗ Invalid input. Try again."

        handler = self._handlers.get(code)
        if handler is None:
            codes = self.codes
            return f"✗ Invalid choice. Enter {codes[0]}..{codes[-1]}." if codes else "✗ Invalid choice."

        try:
            return handler(state, console)
        except TaskError as e:
            logger.debug("Menu code %d failed: %s", code, e)
            return f"✗ {e}"

    def build_menu(self) -> str:
        lines = ["", "========== TO-DO LIST MENU =========="]
        for code in self.codes:
            lines.append(f"{code}. {self._labels[code]}")
        lines.append("=====================================")
        return "\n".join(lines)


registry = MenuRegistry()


def cmd_add(state: AppState, console: Console) -> str:
    description = console.read_line("Enter description: ")
    if not has_text(description):
        raise EmptyDescriptionError()

    raw_priority = console.read_line("Enter priority (1-5, default 1): ")
    try:
        priority = parse_int(raw_priority) if raw_priority.strip() else DEFAULT_PRIORITY
    except TaskParseError:
        priority = DEFAULT_PRIORITY

    task_id = state.task_store.add_task(description, priority)
    return f"✓ Task added with ID: {task_id}"


def cmd_edit(state: AppState, console: Console) -> str:
    task_id = read_int(console, "Enter Task ID to edit: ")
    task = state.task_store.get_task(task_id)

    console.write(f"Current description: {task.description}")
    description = console.read_line("Enter new description (leave empty to keep): ")

    console.write(f"Current priority: {task.priority}")
    raw_priority = console.read_line("Enter new priority (1-5, 0 to keep): ")

    notes: list[str] = []
    priority = KEEP_PRIORITY
    if raw_priority.strip():
        try:
            priority = parse_int(raw_priority)
        except TaskParseError:
            notes.append("Invalid input. Priority unchanged.")

    notes.extend(state.task_store.edit_task(task_id, description=description, priority=priority))
    notes.append(f"✓ Task {task_id} updated.")
    return "\n".join(notes)


def cmd_delete(state: AppState, console: Console) -> str:
    task_id = read_int(console, "Enter Task ID to delete: ")
    state.task_store.delete_task(task_id)
    return f"✓ Task {task_id} deleted (you can undo it)."


def cmd_undo(state: AppState, console: Console) -> str:
    task_id = state.task_store.undo_delete()
    return f"↩ Task {task_id} restored."


def cmd_complete(state: AppState, console: Console) -> str:
    task_id = read_int(console, "Enter Task ID to mark complete: ")
    if not state.task_store.set_completed(task_id, True):
        return f"⚠ Task {task_id} is already marked as complete!"
    return f"✓ Task {task_id} completed."


def cmd_incomplete(state: AppState, console: Console) -> str:
    task_id = read_int(console, "Enter Task ID to mark incomplete: ")
    if not state.task_store.set_completed(task_id, False):
        return f"⚠ Task {task_id} is already marked as incomplete!"
    return f"✓ Task {task_id} marked incomplete."


def cmd_search(state: AppState, console: Console) -> str:
    task_id = read_int(console, "Enter Task ID to search: ")
    return format_task_details(state.task_store.get_task(task_id))


def cmd_show(state: AppState, console: Console) -> str:
    store = state.task_store
    return format_listing(store, store.stats())


def cmd_exit(state: AppState, console: Console) -> None:
    # Saving happens once the loop returns (same path as end of input).
    state.terminate()
    return None


registry.register(1, cmd_add, "Add Task")
registry.register(2, cmd_edit, "Edit Task")
registry.register(3, cmd_delete, "Delete Task")
registry.register(4, cmd_undo, "Undo Delete (restore last deleted)")
registry.register(5, cmd_complete, "Mark Complete")
registry.register(6, cmd_incomplete, "Mark Incomplete")
registry.register(7, cmd_search, "Search Task by ID")
registry.register(8, cmd_show, "Show All Tasks")
registry.register(9, cmd_exit, "Save & Exit (also write output.txt)")
