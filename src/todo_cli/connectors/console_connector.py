# src/todo_cli/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..cli.commands import MenuRegistry
from ..cli.commands import registry as menu_registry
from ..core.ports import Console
from ..core.state import AppState

logger = logging.getLogger(__name__)


class StdioConsole:
    """Console backed by stdin/stdout."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    def read_line(self, prompt: str = "") -> str:
        if self._stdin is None:
            return input(prompt)

        out = self._stdout or sys.stdout
        out.write(prompt)
        out.flush()
        line = self._stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def write(self, text: str) -> None:
        out = self._stdout or sys.stdout
        try:
            print(text, file=out, flush=True)
        except UnicodeEncodeError:
            # undecodable bytes from the task file come back as surrogates
            encoding = getattr(out, "encoding", None) or "utf-8"
            safe = text.encode(encoding, errors="replace").decode(encoding)
            print(safe, file=out, flush=True)


def run_console_loop(
    state: AppState,
    console: Console,
    registry: MenuRegistry | None = None,
) -> None:
    """
    Menu loop: show the menu, read a choice, run one command, print its reply.

    Ends on menu code 9, end of input or Ctrl+C; in every case the state is
    left TERMINATED. Persisting is up to the caller.
    """
    registry = registry or menu_registry
    logger.info("Console loop started (%d tasks).", len(state.task_store))

    while state.running:
        try:
            console.write(registry.build_menu())
            choice = console.read_line("Choose: ").strip()
            if not choice:
                continue
            try:
                reply = registry.handle(state, console, choice)
            except (EOFError, KeyboardInterrupt):
                raise
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."
        except EOFError:
            logger.info("Console EOF received, exiting.")
            state.terminate()
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            console.write("")
            state.terminate()
            break

        if reply:
            console.write(reply)

    logger.info("Console loop finished.")
