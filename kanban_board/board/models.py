"""Task and status types for the board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TaskStatus(str, Enum):
    """Stage of a task. Members are declared in board order."""

    TODO = "todo"
    DOING = "doing"
    DONE = "done"

    @property
    def label(self) -> str:
        """Human-readable section header for this status."""
        return _LABELS[self]

    def next(self) -> TaskStatus:
        """Return the following status; DONE is terminal and maps to itself."""
        members = list(TaskStatus)
        index = members.index(self)
        return members[min(index + 1, len(members) - 1)]


_LABELS: dict[TaskStatus, str] = {
    TaskStatus.TODO: "To Do",
    TaskStatus.DOING: "In Progress",
    TaskStatus.DONE: "Done",
}


@dataclass
class Task:
    """A single card on the board."""

    id: int
    title: str
    status: TaskStatus = TaskStatus.TODO

    def __str__(self) -> str:
        return f"[{self.status.name}] ID: {self.id} | {self.title}"

