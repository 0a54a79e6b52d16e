# tests/test_console_connector.py

from __future__ import annotations

import io

from todo_cli.cli.commands import MenuRegistry
from todo_cli.connectors.console_connector import StdioConsole, run_console_loop
from todo_cli.core.state import AppState, DispatcherStatus

from .fakes import FakeConsole


def test_loop_runs_commands_until_exit(state: AppState) -> None:
    console = FakeConsole(
        [
            "1", "Write spec", "3",
            "1", "Review", "0",
            "5", "1",
            "3", "1",
            "4",
            "9",
            "8",  # never read
        ]
    )

    run_console_loop(state, console)

    assert state.status is DispatcherStatus.TERMINATED
    assert console.lines == ["8"]
    assert [t.as_tuple() for t in state.task_store] == [
        (1, "Write spec", 3, True),
        (2, "Review", 1, False),
    ]
    assert "↩ Task 1 restored." in console.output


def test_loop_recovers_from_bad_input(state: AppState) -> None:
    console = FakeConsole(["hello", "", "42", "3", "x", "4", "9"])

    run_console_loop(state, console)

    assert "✗ Invalid input. Try again." in console.output
    assert "✗ Invalid choice. Enter 1..9." in console.output
    assert "✗ No deleted task to undo." in console.output
    assert any(line.startswith("✗ Invalid input 'x'") for line in console.output)
    assert state.status is DispatcherStatus.TERMINATED


def test_loop_stops_on_eof(state: AppState) -> None:
    console = FakeConsole(["1", "only task"])  # EOF while asking for priority

    run_console_loop(state, console)

    assert state.status is DispatcherStatus.TERMINATED
    assert len(state.task_store) == 0


def test_loop_survives_handler_crash(state: AppState) -> None:
    reg = MenuRegistry()

    def boom(state, console):
        raise RuntimeError("boom")

    def stop(state, console):
        state.terminate()
        return "bye"

    reg.register(1, boom, "Boom")
    reg.register(2, stop, "Stop")
    console = FakeConsole(["1", "2"])

    run_console_loop(state, console, reg)

    assert "Internal error while handling a command." in console.output
    assert console.output[-1] == "bye"


def test_loop_stops_on_keyboard_interrupt(state: AppState) -> None:
    class InterruptingConsole(FakeConsole):
        def read_line(self, prompt: str = "") -> str:
            raise KeyboardInterrupt

    console = InterruptingConsole()
    run_console_loop(state, console)
    assert state.status is DispatcherStatus.TERMINATED


def test_stdio_console_reads_and_writes() -> None:
    stdin = io.StringIO("first\r\nsecond")
    stdout = io.StringIO()
    console = StdioConsole(stdin=stdin, stdout=stdout)

    assert console.read_line("> ") == "first"
    assert console.read_line("> ") == "second"
    console.write("hello")

    assert stdout.getvalue() == "> > hello\n"
    try:
        console.read_line()
    except EOFError:
        pass
    else:
        raise AssertionError("expected EOFError")


def test_stdio_console_writes_undecodable_text() -> None:
    raw = io.BytesIO()
    stdout = io.TextIOWrapper(raw, encoding="utf-8")
    console = StdioConsole(stdin=io.StringIO(""), stdout=stdout)

    console.write("caf\udce9")

    assert raw.getvalue() == b"caf?\n"
