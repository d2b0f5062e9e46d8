"""Task tracking core.

Provides the task record, the file-backed store, the pure mutation
operations and listing.

Example:
    >>> store = TaskStore(Path("todo.json"))
    >>> task_id = store.add("write spec")
    >>> store.complete(task_id)
    >>> store.listing(TaskFilter.PENDING)
"""

from task_cli.tasks.listing import TaskFilter, filter_tasks, format_task, render_listing
from task_cli.tasks.models import Task, TaskStatus, mark_complete
from task_cli.tasks.operations import TaskMap, add_task, complete_task, next_id, remove_task
from task_cli.tasks.store import TaskStore, load_tasks, save_tasks

__all__ = [
    "Task",
    "TaskFilter",
    "TaskMap",
    "TaskStatus",
    "TaskStore",
    "add_task",
    "complete_task",
    "filter_tasks",
    "format_task",
    "load_tasks",
    "mark_complete",
    "next_id",
    "remove_task",
    "render_listing",
    "save_tasks",
]
