"""Command-line entry point for the interactive task board."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from kanban_board.board import TaskBoard, TaskStorage
from kanban_board.console import ConsoleDriver
from kanban_board.utils.logging import setup_logger

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AppConfig:
    log_level: str = "ERROR"
    log_file: Path | None = None
    use_rich: bool = True


def parse_args(argv: Sequence[str] | None = None) -> AppConfig:
    parser = argparse.ArgumentParser(description="In-memory Kanban task board")
    parser.add_argument(
        "--log-level",
        default="ERROR",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Minimum level for log messages written to stderr",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file (rotated)",
    )
    parser.add_argument(
        "--plain-logs",
        action="store_true",
        help="Use a plain stderr log format instead of the Rich handler",
    )
    args = parser.parse_args(argv)
    return AppConfig(
        log_level=args.log_level,
        log_file=args.log_file,
        use_rich=not args.plain_logs,
    )


def main(argv: Sequence[str] | None = None) -> None:
    config = parse_args(argv)
    setup_logger(
        level=config.log_level, log_file=config.log_file, use_rich=config.use_rich
    )

    storage = TaskStorage()
    board = TaskBoard(storage)
    logger.debug("Board ready")
    ConsoleDriver(board).run()


if __name__ == "__main__":
    main()
