# src/todo_cli/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the menu dispatcher.

Command handlers talk to a Console instead of input()/print() directly.
This keeps the dispatcher testable with a scripted console.
"""

from typing import Protocol


class Console(Protocol):
    """Line-based interactive I/O."""

    def read_line(self, prompt: str = "") -> str:
        """Return one line without its trailing newline. Raises EOFError at end of input."""
        ...

    def write(self, text: str) -> None:
        """Write one line (a trailing newline is added)."""
        ...
