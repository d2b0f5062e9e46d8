"""Mutation operations over an ordered task map.

Each operation is a pure function: it takes the current map and returns a
new one, leaving its input untouched. Persisting the result is the
caller's job (see TaskStore).
"""

from task_cli.constants import truncate
from task_cli.errors import TaskNotFoundError
from task_cli.logging import Loggers
from task_cli.tasks.models import Task, mark_complete

logger = Loggers.tasks()

TaskMap = dict[int, Task]


def next_id(tasks: TaskMap, stable_ids: bool = False) -> int:
    """Identifier the next added task receives.

    By default this is one past the current count, so removed slots are
    never refilled. With stable ids it is one past the largest id in use.
    """
    if stable_ids:
        return max(tasks, default=0) + 1
    return len(tasks) + 1


def add_task(tasks: TaskMap, description: str, stable_ids: bool = False) -> tuple[TaskMap, int]:
    """Append a new pending task.

    Returns:
        The new map and the identifier assigned to the task.
    """
    task_id = next_id(tasks, stable_ids=stable_ids)
    updated = dict(tasks)
    updated[task_id] = Task.create(description)
    logger.info("task_added", task_id=task_id, description=truncate(description))
    return updated, task_id


def remove_task(tasks: TaskMap, task_id: int, strict: bool = False) -> TaskMap:
    """Drop the task at task_id.

    A missing id is a silent no-op unless strict is set, in which case it
    raises TaskNotFoundError.
    """
    if task_id not in tasks:
        if strict:
            raise TaskNotFoundError(task_id)
        logger.debug("task_remove_missing", task_id=task_id)
        return dict(tasks)
    updated = {tid: task for tid, task in tasks.items() if tid != task_id}
    logger.info("task_removed", task_id=task_id)
    return updated


def complete_task(tasks: TaskMap, task_id: int) -> TaskMap:
    """Mark the task at task_id completed, keeping its identifier.

    Raises:
        TaskNotFoundError: If task_id is not in the map.
    """
    task = tasks.get(task_id)
    if task is None:
        raise TaskNotFoundError(task_id)
    updated = dict(tasks)
    updated[task_id] = mark_complete(task)
    logger.info("task_completed", task_id=task_id, already_completed=task.is_completed)
    return updated
