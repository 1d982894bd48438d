"""Core task management for the board."""

from __future__ import annotations

from loguru import logger
from rich.console import Console
from rich.text import Text

from .errors import NotFoundError, ValidationError
from .models import Task, TaskStatus
from .storage import TaskStorage

BOARD_TITLE = "KANBAN BOARD"
STATUS_STYLES: dict[TaskStatus, str] = {
    TaskStatus.TODO: "yellow",
    TaskStatus.DOING: "cyan",
    TaskStatus.DONE: "green",
}


class TaskBoard:
    """
    Board operations on top of a TaskStorage.

    The storage is owned by the caller and passed in explicitly; the board never
    keeps its own copy of the tasks.
    """

    def __init__(self, storage: TaskStorage, console: Console | None = None) -> None:
        """
        Initialize the task board.

        Args:
            storage: Storage holding every task
            console: Console the board is rendered to (stdout by default)
        """
        self.storage = storage
        self.console = console or Console()

    def add_task(self, title: str) -> Task:
        """
        Add a new task to the board in the TODO column.

        Args:
            title: Display title, stored as entered

        Returns:
            The stored Task object

        Raises:
            ValidationError: If the title is empty or only whitespace
        """
        if not (title or "").strip():
            raise ValidationError()
        task = self.storage.create(title, TaskStatus.TODO)
        logger.info(f"Added task {task.id}: {task.title}")
        return task

    def advance_task(self, task_id: int) -> Task:
        """
        Move a task one column to the right.

        A task already in DONE stays there; this is not an error.

        Raises:
            NotFoundError: If no task has the given identifier
        """
        task = self.storage.find_by_id(task_id)
        if task is None:
            raise NotFoundError(task_id)
        previous = task.status
        task.status = previous.next()
        if task.status is previous:
            logger.debug(f"Task {task_id} already {previous.value}, nothing to do")
        else:
            logger.info(f"Task {task_id}: {previous.value} -> {task.status.value}")
        return task

    def tasks_by_status(self) -> dict[TaskStatus, list[Task]]:
        """Group all tasks by status, columns in board order."""
        tasks = self.storage.list_all()
        return {
            status: [task for task in tasks if task.status is status]
            for status in TaskStatus
        }

    def show_board(self) -> None:
        """Print every column with its tasks, framed by a border."""
        self.console.print()
        self.console.rule(BOARD_TITLE, characters="=")
        for status, tasks in self.tasks_by_status().items():
            style = STATUS_STYLES[status]
            self.console.print()
            self.console.print(Text(f"--- {status.label} ---", style=f"bold {style}"))
            for task in tasks:
                self.console.print(Text(str(task), style=style), soft_wrap=True)
        self.console.rule(characters="=")
        self.console.print()
