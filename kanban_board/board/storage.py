"""In-memory task storage with a sequential identifier generator."""

from __future__ import annotations

from loguru import logger

from .models import Task, TaskStatus


class TaskStorage:
    """Owns every Task record and hands out identifiers starting at 1."""

    def __init__(self) -> None:
        self._tasks: dict[int, Task] = {}
        self._next_id: int = 1

    def create(self, title: str, status: TaskStatus) -> Task:
        """Store a new task under the next unused identifier and return it."""
        task = Task(id=self._next_id, title=title, status=status)
        self._next_id += 1
        self._tasks[task.id] = task
        logger.debug(f"Stored task {task.id} ({status.value})")
        return task

    def find_by_id(self, task_id: int) -> Task | None:
        return self._tasks.get(task_id)

    def list_all(self) -> list[Task]:
        """Return all tasks in insertion order."""
        return list(self._tasks.values())

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks
