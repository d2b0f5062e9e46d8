"""Error taxonomy for task-cli.

The storage layer and the mutation operations raise these exceptions;
only the CLI entry point turns them into diagnostics and exit codes.
"""

from enum import Enum


class ErrorKind(Enum):
    """Kinds of failure a single invocation can end with."""

    USER_INPUT = "user_input"
    STORAGE_DECODE = "storage_decode"
    STORAGE_READ = "storage_read"
    STORAGE_WRITE = "storage_write"
    NOT_FOUND = "not_found"


class TaskCliError(Exception):
    """Base class for all task-cli errors."""

    kind: ErrorKind = ErrorKind.USER_INPUT
    exit_code: int = 1


class UserInputError(TaskCliError):
    """Raised when a required argument is missing or invalid."""

    kind = ErrorKind.USER_INPUT
    exit_code = 2


class StorageDecodeError(TaskCliError):
    """Raised when the storage file has content that is not a task sequence."""

    kind = ErrorKind.STORAGE_DECODE

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Could not decode tasks file {path}: {reason}")
        self.path = path
        self.reason = reason


class StorageReadError(TaskCliError):
    """Raised when the storage file exists but cannot be read."""

    kind = ErrorKind.STORAGE_READ

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Could not read tasks file {path}: {reason}")
        self.path = path
        self.reason = reason


class StorageWriteError(TaskCliError):
    """Raised when the storage file cannot be created or written."""

    kind = ErrorKind.STORAGE_WRITE

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Could not write tasks file {path}: {reason}")
        self.path = path
        self.reason = reason


class TaskNotFoundError(TaskCliError):
    """Raised when an operation targets an identifier that is not in the store."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id
