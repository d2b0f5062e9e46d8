"""Task CLI - a command-line task tracker.

Records short text tasks in a single JSON file, marks them complete,
removes them and lists them with optional status filtering.

- Task record model with creation-time ordering
- File-backed store with position-derived identifiers
- Pure add / remove / complete operations
- Listing with pending / completed filters
"""

__version__ = "0.1.0"

from task_cli.config import (
    BaseSettings,
    SettingsContext,
    get_settings,
    reload_settings,
    set_settings,
)
from task_cli.errors import (
    ErrorKind,
    StorageDecodeError,
    StorageReadError,
    StorageWriteError,
    TaskCliError,
    TaskNotFoundError,
    UserInputError,
)
from task_cli.tasks import Task, TaskFilter, TaskStatus, TaskStore, load_tasks, save_tasks

__all__ = [
    "BaseSettings",
    "ErrorKind",
    "SettingsContext",
    "StorageDecodeError",
    "StorageReadError",
    "StorageWriteError",
    "Task",
    "TaskCliError",
    "TaskFilter",
    "TaskNotFoundError",
    "TaskStatus",
    "TaskStore",
    "UserInputError",
    "get_settings",
    "load_tasks",
    "reload_settings",
    "save_tasks",
    "set_settings",
]
