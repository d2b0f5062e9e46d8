"""Listing and status filtering for the task map."""

from enum import Enum

from task_cli.constants import HEADER_RULE
from task_cli.tasks.models import Task, TaskStatus
from task_cli.tasks.operations import TaskMap


class TaskFilter(Enum):
    """Listing selector."""

    NONE = "none"
    PENDING = "pending"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, text: str | None) -> "TaskFilter":
        """Parse a filter name; empty or missing text means NONE."""
        if not text:
            return cls.NONE
        try:
            return cls(text.strip().lower())
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise ValueError(f"Unknown filter {text!r} (expected one of: {choices})") from None

    def matches(self, task: Task) -> bool:
        if self is TaskFilter.PENDING:
            return task.status is TaskStatus.PENDING
        if self is TaskFilter.COMPLETED:
            return task.status is TaskStatus.COMPLETED
        return True


def filter_tasks(tasks: TaskMap, task_filter: TaskFilter = TaskFilter.NONE) -> list[tuple[int, Task]]:
    """Return (id, task) pairs in ascending id order that pass the filter."""
    return [(tid, tasks[tid]) for tid in sorted(tasks) if task_filter.matches(tasks[tid])]


def format_task(task_id: int, task: Task) -> str:
    """Render one task as ``<id> - <description> [<mark>]``."""
    return f"{task_id} - {task.description} [{task.status.mark}]"


def render_header(task_filter: TaskFilter) -> list[str]:
    header = f"Task (filter: {task_filter.value})"
    return [header, HEADER_RULE * len(header)]


def render_listing(tasks: TaskMap, task_filter: TaskFilter = TaskFilter.NONE) -> list[str]:
    """Render the header followed by one line per included task.

    Listing never changes the map.
    """
    lines = render_header(task_filter)
    lines.extend(format_task(tid, task) for tid, task in filter_tasks(tasks, task_filter))
    return lines
