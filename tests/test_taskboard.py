"""Tests for the task board functionality."""

import pytest

from kanban_board.board import NotFoundError, TaskBoard, TaskStatus, ValidationError


def _output(board: TaskBoard) -> str:
    return board.console.file.getvalue()


def test_add_task(board: TaskBoard) -> None:
    task = board.add_task("Write spec")

    assert task.id == 1
    assert task.title == "Write spec"
    assert task.status == TaskStatus.TODO
    assert board.storage.find_by_id(1) is task


@pytest.mark.parametrize("title", ["", "   ", "\t\n", None])
def test_add_task_rejects_blank_title(board: TaskBoard, title) -> None:
    with pytest.raises(ValidationError):
        board.add_task(title)

    assert len(board.storage) == 0


def test_add_task_keeps_title_as_entered(board: TaskBoard) -> None:
    task = board.add_task("  padded ")

    assert task.title == "  padded "


def test_task_lifecycle(board: TaskBoard) -> None:
    task = board.add_task("Lifecycle")

    statuses = [board.advance_task(task.id).status for _ in range(4)]

    assert statuses == [
        TaskStatus.DOING,
        TaskStatus.DONE,
        TaskStatus.DONE,
        TaskStatus.DONE,
    ]


def test_advance_unknown_task_leaves_storage_unchanged(board: TaskBoard) -> None:
    board.add_task("Only task")
    before = [(task.id, task.status) for task in board.storage.list_all()]

    with pytest.raises(NotFoundError) as excinfo:
        board.advance_task(42)

    assert excinfo.value.task_id == 42
    assert [(task.id, task.status) for task in board.storage.list_all()] == before


def test_ids_are_never_reused(board: TaskBoard) -> None:
    ids = []
    for index in range(5):
        task = board.add_task(f"Task {index}")
        ids.append(task.id)
        board.advance_task(task.id)
        if index % 2:
            board.advance_task(ids[0])

    assert ids == sorted(set(ids))
    assert ids == [1, 2, 3, 4, 5]


def test_show_board_groups_tasks_in_fixed_order(board: TaskBoard) -> None:
    board.add_task("Write spec")
    board.add_task("Review spec")
    board.advance_task(1)
    board.advance_task(1)

    board.show_board()
    lines = _output(board).splitlines()

    assert "KANBAN BOARD" in lines[1]
    todo = lines.index("--- To Do ---")
    doing = lines.index("--- In Progress ---")
    done = lines.index("--- Done ---")
    assert todo < doing < done
    assert lines[todo + 1] == "[TODO] ID: 2 | Review spec"
    assert lines[doing + 1] == ""
    assert lines[done + 1] == "[DONE] ID: 1 | Write spec"
    assert set(lines[done + 2]) == {"="}


def test_show_board_empty_prints_only_headers(board: TaskBoard) -> None:
    board.show_board()
    output = _output(board)

    for status in TaskStatus:
        assert f"--- {status.label} ---" in output
    assert "ID:" not in output


def test_new_task_appears_once_under_todo(board: TaskBoard) -> None:
    task = board.add_task("Fresh")

    grouped = board.tasks_by_status()

    assert grouped[TaskStatus.TODO] == [task]
    assert grouped[TaskStatus.DOING] == []
    assert grouped[TaskStatus.DONE] == []


def test_show_board_keeps_long_titles_on_one_line(board: TaskBoard) -> None:
    title = "Refactor " + "x" * 100
    board.add_task(title)

    board.show_board()

    assert f"[TODO] ID: 1 | {title}" in _output(board).splitlines()
