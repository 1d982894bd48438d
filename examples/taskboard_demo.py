"""Simple demo of the task board without the interactive menu."""

from loguru import logger

from kanban_board.board import TaskBoard, TaskStorage
from kanban_board.utils.logging import setup_logger


def main():
    """Create a few tasks, move them along and print the board."""
    setup_logger(level="INFO", use_rich=True)

    board = TaskBoard(TaskStorage())

    for title in ("Write spec", "Review spec", "Release"):
        board.add_task(title)

    board.advance_task(1)
    board.advance_task(1)
    board.advance_task(2)

    logger.success(f"Board holds {len(board.storage)} task(s)")
    board.show_board()


if __name__ == "__main__":
    main()
