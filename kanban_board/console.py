"""Interactive menu loop driving the task board."""

from __future__ import annotations

import re
from typing import TextIO

from loguru import logger
from rich.console import Console
from rich.text import Text

from kanban_board.board import InputParseError, KanbanError, TaskBoard

WELCOME = "Welcome to the Kanban Task Board!"
MENU = "1. Add task | 2. Advance task | 3. Show board | 0. Exit"
FAREWELL = "Exiting..."

OPTION_EXIT = 0
OPTION_ADD = 1
OPTION_ADVANCE = 2
OPTION_SHOW = 3

INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(raw: str) -> int:
    """Parse a line of console input as an integer."""
    text = raw.strip()
    if not INTEGER_RE.fullmatch(text):
        raise InputParseError(raw)
    return int(text)


class ConsoleDriver:
    """Reads menu selections line by line and dispatches them to the board."""

    def __init__(
        self,
        board: TaskBoard,
        console: Console | None = None,
        error_console: Console | None = None,
        stdin: TextIO | None = None,
    ) -> None:
        self.board = board
        self.console = console or board.console
        self.error_console = error_console or Console(stderr=True)
        # None reads through the builtin input(), which supports line editing.
        self.stdin = stdin

    def run(self) -> None:
        """Loop until the user selects exit or input runs out."""
        self.console.print(WELCOME, markup=False)
        while True:
            self.console.print(MENU, markup=False)
            try:
                option = self._read_option()
                if option == OPTION_EXIT:
                    break
                self._dispatch(option)
            except EOFError:
                logger.debug("Input closed")
                break
            except KanbanError as exc:
                self._report(exc)
        self.console.print(FAREWELL, markup=False)
        logger.info(f"Session finished with {len(self.board.storage)} task(s)")

    def _read_option(self) -> int:
        option = parse_int(self._read_line("Choice: "))
        if option not in (OPTION_EXIT, OPTION_ADD, OPTION_ADVANCE, OPTION_SHOW):
            raise InputParseError(str(option), "Invalid option.")
        return option

    def _dispatch(self, option: int) -> None:
        if option == OPTION_ADD:
            task = self.board.add_task(self._read_line("Task title: "))
            self.console.print(f"Task {task.id} created.", markup=False)
        elif option == OPTION_ADVANCE:
            task_id = parse_int(self._read_line("Task ID to advance: "))
            self.board.advance_task(task_id)
            self.console.print("Task updated successfully!", markup=False)
        elif option == OPTION_SHOW:
            self.board.show_board()

    def _read_line(self, prompt: str) -> str:
        line = self.console.input(prompt, markup=False, stream=self.stdin)
        if self.stdin is not None and line == "":
            raise EOFError
        return line.rstrip("\r\n")

    def _report(self, exc: KanbanError) -> None:
        logger.warning(f"{type(exc).__name__}: {exc}")
        self.error_console.print(Text(f"Error: {exc}", style="bold red"))
