"""Task board module: storage, models and board operations."""

from .errors import InputParseError, KanbanError, NotFoundError, ValidationError
from .manager import TaskBoard
from .models import Task, TaskStatus
from .storage import TaskStorage

__all__ = [
    "InputParseError",
    "KanbanError",
    "NotFoundError",
    "Task",
    "TaskBoard",
    "TaskStatus",
    "TaskStorage",
    "ValidationError",
]
