"""Errors raised by board operations and recovered by the console loop."""


class KanbanError(ValueError):
    """Base class for recoverable board errors."""


class ValidationError(KanbanError):
    """Raised when a task title is empty or blank."""

    def __init__(self, message: str = "Invalid title.") -> None:
        super().__init__(message)


class NotFoundError(KanbanError):
    """Raised when no task has the requested identifier."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found.")
        self.task_id = task_id


class InputParseError(KanbanError):
    """Raised when console input is not a usable integer."""

    def __init__(self, raw: str, message: str = "Invalid input. Try again.") -> None:
        super().__init__(message)
        self.raw = raw
