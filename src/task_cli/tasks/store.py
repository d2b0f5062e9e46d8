"""File-based task store.

Tasks are kept in a single JSON file as a plain ordered array of records.
Identifiers are not stored: on every load, a task's identifier is its
1-based position in that array. Removing a task therefore renumbers the
tasks after it the next time the file is loaded.

With ``stable_ids`` enabled, each record also carries its identifier and
ids survive removals. This mode is opt-in; the renumbering behavior stays
the default.
"""

import json
from pathlib import Path
from typing import Any

from task_cli.errors import StorageDecodeError, StorageReadError, StorageWriteError
from task_cli.logging import Loggers
from task_cli.persistence import atomic_write_json
from task_cli.tasks.listing import TaskFilter, render_listing
from task_cli.tasks.models import Task
from task_cli.tasks.operations import TaskMap, add_task, complete_task, remove_task

logger = Loggers.persistence()


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (FileNotFoundError, NotADirectoryError):
        return ""
    except UnicodeDecodeError as e:
        raise StorageDecodeError(path, f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise StorageReadError(path, e.strerror or str(e)) from e


def _decode_records(path: Path, raw: Any) -> list[tuple[int | None, Task]]:
    if not isinstance(raw, list):
        raise StorageDecodeError(path, f"expected a JSON array, got {type(raw).__name__}")

    records: list[tuple[int | None, Task]] = []
    for index, item in enumerate(raw):
        try:
            task = Task.from_dict(item)
        except KeyError as e:
            raise StorageDecodeError(path, f"record {index} is missing field {e.args[0]!r}") from e
        except (TypeError, ValueError) as e:
            raise StorageDecodeError(path, f"record {index} is invalid: {e}") from e
        stored_id = item.get("id")
        if stored_id is not None and (
            isinstance(stored_id, bool) or not isinstance(stored_id, int) or stored_id < 1
        ):
            raise StorageDecodeError(path, f"record {index} has invalid id {stored_id!r}")
        records.append((stored_id, task))
    return records


def _assign_stable_ids(path: Path, records: list[tuple[int | None, Task]]) -> TaskMap:
    tasks: TaskMap = {}
    for stored_id, task in records:
        if stored_id is None:
            continue
        if stored_id in tasks:
            raise StorageDecodeError(path, f"duplicate id {stored_id}")
        tasks[stored_id] = task

    # Records written before stable ids were enabled get numbers after the highest one
    next_free = max(tasks, default=0) + 1
    for stored_id, task in records:
        if stored_id is None:
            tasks[next_free] = task
            next_free += 1
    return {tid: tasks[tid] for tid in sorted(tasks)}


def load_tasks(path: Path, stable_ids: bool = False) -> TaskMap:
    """Load the task map from path.

    A missing, empty or whitespace-only file is an empty store.

    Args:
        path: Storage file location.
        stable_ids: Use identifiers stored in the records instead of
            deriving them from position.

    Returns:
        Mapping of identifier to task in ascending identifier order.

    Raises:
        StorageDecodeError: If the file has content that is not a valid
            task array. No partial map is returned.
        StorageReadError: If the file exists but cannot be read.
    """
    path = Path(path)
    text = _read_text(path)
    if not text.strip():
        logger.debug("tasks_loaded", path=str(path), count=0, empty=True)
        return {}

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise StorageDecodeError(path, f"{e.msg} at line {e.lineno} column {e.colno}") from e

    records = _decode_records(path, raw)
    if stable_ids:
        tasks = _assign_stable_ids(path, records)
    else:
        tasks = {position: task for position, (_, task) in enumerate(records, start=1)}

    logger.debug("tasks_loaded", path=str(path), count=len(tasks), stable_ids=stable_ids)
    return tasks


def save_tasks(path: Path, tasks: TaskMap, stable_ids: bool = False) -> None:
    """Write every task to path, replacing its previous content.

    Records are written in ascending identifier order. Identifiers are only
    written when stable_ids is set.

    Raises:
        StorageWriteError: If the file or its directory cannot be written.
    """
    path = Path(path)
    records = []
    for task_id in sorted(tasks):
        record = tasks[task_id].to_dict()
        if stable_ids:
            record = {"id": task_id, **record}
        records.append(record)

    try:
        atomic_write_json(path, records)
    except OSError as e:
        raise StorageWriteError(path, e.strerror or str(e)) from e

    logger.debug("tasks_saved", path=str(path), count=len(records))


class TaskStore:
    """Task map bound to a storage file.

    Loads on construction and persists the full map after every mutation.
    One instance serves a single invocation.

    Example:
        >>> store = TaskStore(Path("todo.json"))
        >>> task_id = store.add("buy milk")
        >>> store.complete(task_id)
        >>> store.listing(TaskFilter.COMPLETED)
        ['Task (filter: completed)', '────────────────────────', '1 - buy milk [✓]']
    """

    def __init__(self, path: Path, stable_ids: bool = False, strict_remove: bool = False) -> None:
        self._path = Path(path)
        self._stable_ids = stable_ids
        self._strict_remove = strict_remove
        self._tasks: TaskMap = load_tasks(self._path, stable_ids=stable_ids)

    @property
    def tasks(self) -> TaskMap:
        """A copy of the current identifier to task mapping."""
        return dict(self._tasks)

    def get(self, task_id: int) -> Task | None:
        return self._tasks.get(task_id)

    def _save(self, tasks: TaskMap) -> None:
        save_tasks(self._path, tasks, stable_ids=self._stable_ids)
        if not self._stable_ids:
            # Match what the next load of the file will see
            tasks = {position: tasks[tid] for position, tid in enumerate(sorted(tasks), start=1)}
        self._tasks = tasks

    def add(self, description: str) -> int:
        """Add a pending task and persist. Returns its identifier."""
        tasks, task_id = add_task(self._tasks, description, stable_ids=self._stable_ids)
        self._save(tasks)
        return task_id

    def remove(self, task_id: int) -> bool:
        """Remove a task and persist.

        Returns:
            True if a task was removed, False if the id was absent.
        """
        existed = task_id in self._tasks
        self._save(remove_task(self._tasks, task_id, strict=self._strict_remove))
        return existed

    def complete(self, task_id: int) -> None:
        """Complete a task and persist.

        Raises:
            TaskNotFoundError: If task_id is absent; nothing is written.
        """
        self._save(complete_task(self._tasks, task_id))

    def listing(self, task_filter: TaskFilter = TaskFilter.NONE) -> list[str]:
        return render_listing(self._tasks, task_filter)
