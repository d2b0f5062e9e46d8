"""Tests for the pure mutation operations."""

import pytest

from task_cli.errors import ErrorKind, TaskNotFoundError
from task_cli.tasks.models import Task, TaskStatus
from task_cli.tasks.operations import add_task, complete_task, next_id, remove_task


def _tasks(*descriptions: str) -> dict[int, Task]:
    return {i: Task.create(d) for i, d in enumerate(descriptions, start=1)}


class TestAddTask:
    def test_add_to_empty(self):
        tasks, task_id = add_task({}, "buy milk")
        assert task_id == 1
        assert tasks[1].description == "buy milk"
        assert tasks[1].status is TaskStatus.PENDING

    def test_add_uses_count_plus_one(self):
        tasks, task_id = add_task(_tasks("a", "b"), "c")
        assert task_id == 3
        assert list(tasks) == [1, 2, 3]

    def test_next_id(self):
        assert next_id({}) == 1
        assert next_id(_tasks("a", "b")) == 3
        assert next_id({1: Task.create("a"), 3: Task.create("c")}, stable_ids=True) == 4

    def test_add_stable_ids_uses_max_plus_one(self):
        tasks = {2: Task.create("b"), 7: Task.create("g")}
        updated, task_id = add_task(tasks, "new", stable_ids=True)
        assert task_id == 8
        assert list(updated) == [2, 7, 8]

    def test_add_leaves_input_untouched(self):
        original = _tasks("a")
        add_task(original, "b")
        assert list(original) == [1]


class TestRemoveTask:
    def test_remove_existing(self):
        tasks = remove_task(_tasks("a", "b", "c"), 2)
        assert list(tasks) == [1, 3]
        assert [t.description for t in tasks.values()] == ["a", "c"]

    def test_remove_missing_is_noop(self):
        original = _tasks("a", "b")
        tasks = remove_task(original, 9)
        assert tasks == original
        assert tasks is not original

    def test_remove_missing_strict_raises(self):
        with pytest.raises(TaskNotFoundError) as exc_info:
            remove_task(_tasks("a"), 4, strict=True)
        assert exc_info.value.task_id == 4
        assert exc_info.value.kind is ErrorKind.NOT_FOUND

    def test_remove_leaves_input_untouched(self):
        original = _tasks("a", "b")
        remove_task(original, 1)
        assert list(original) == [1, 2]


class TestCompleteTask:
    def test_complete_existing(self):
        tasks = complete_task(_tasks("a", "b"), 1)
        assert tasks[1].status is TaskStatus.COMPLETED
        assert tasks[2].status is TaskStatus.PENDING
        assert list(tasks) == [1, 2]

    def test_complete_twice_is_noop(self):
        once = complete_task(_tasks("a"), 1)
        twice = complete_task(once, 1)
        assert twice[1].status is TaskStatus.COMPLETED

    def test_complete_missing_raises(self):
        with pytest.raises(TaskNotFoundError, match="Task not found: 3"):
            complete_task(_tasks("a"), 3)

    def test_complete_leaves_input_untouched(self):
        original = _tasks("a")
        complete_task(original, 1)
        assert original[1].status is TaskStatus.PENDING
