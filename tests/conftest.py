from __future__ import annotations

import io
import sys

import pytest
from loguru import logger
from rich.console import Console

from kanban_board.board import TaskBoard, TaskStorage


def make_console() -> Console:
    return Console(file=io.StringIO(), width=60, color_system=None, highlight=False)


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def storage() -> TaskStorage:
    return TaskStorage()


@pytest.fixture
def board(storage: TaskStorage) -> TaskBoard:
    return TaskBoard(storage, console=make_console())


@pytest.fixture
def error_console() -> Console:
    return make_console()
