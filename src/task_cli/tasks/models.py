"""Task record model.

A task is a short description plus a status. Records are ordered (and
compared for equality) by their creation marker only; description and
status never take part in comparisons.
"""

import time
from dataclasses import dataclass, field, replace
from enum import Enum
from functools import total_ordering
from typing import Any

from task_cli.constants import COMPLETED_MARK, PENDING_MARK

_NANOS_PER_MILLI = 1_000_000

_last_marker = 0


def _next_marker() -> int:
    """Return a nanosecond creation marker, strictly increasing within the process."""
    global _last_marker
    marker = max(time.time_ns(), _last_marker + 1)
    _last_marker = marker
    return marker


class TaskStatus(Enum):
    """Task lifecycle status. COMPLETED is terminal."""

    PENDING = "pending"
    COMPLETED = "completed"

    @property
    def mark(self) -> str:
        """Single-character glyph used on disk and in listings."""
        return COMPLETED_MARK if self is TaskStatus.COMPLETED else PENDING_MARK

    @classmethod
    def from_mark(cls, mark: str) -> "TaskStatus":
        if mark == PENDING_MARK:
            return cls.PENDING
        if mark == COMPLETED_MARK:
            return cls.COMPLETED
        raise ValueError(f"unknown status mark {mark!r}")


@total_ordering
@dataclass(eq=False)
class Task:
    """A single tracked to-do item."""

    description: str
    status: TaskStatus = TaskStatus.PENDING
    created_at: int = field(default_factory=_next_marker)

    @classmethod
    def create(cls, description: str) -> "Task":
        """Create a pending task stamped with the current time.

        No validation happens here; an empty description is allowed.
        """
        return cls(description=description, status=TaskStatus.PENDING, created_at=_next_marker())

    @property
    def is_completed(self) -> bool:
        return self.status is TaskStatus.COMPLETED

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.created_at == other.created_at

    def __lt__(self, other: "Task") -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.created_at < other.created_at

    def __hash__(self) -> int:
        return hash(self.created_at)

    def to_dict(self) -> dict[str, Any]:
        return {
            "time": self.created_at // _NANOS_PER_MILLI,
            "description": self.description,
            "status": self.status.mark,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        """Build a task from its stored form.

        Raises:
            TypeError: If data is not a mapping or a field has the wrong type.
            KeyError: If a required field is missing.
            ValueError: If the status mark is unknown.
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected an object, got {type(data).__name__}")
        millis = data["time"]
        description = data["description"]
        mark = data["status"]
        if isinstance(millis, bool) or not isinstance(millis, int):
            raise TypeError(f"'time' must be an integer, got {millis!r}")
        if not isinstance(description, str):
            raise TypeError(f"'description' must be a string, got {description!r}")
        if not isinstance(mark, str):
            raise TypeError(f"'status' must be a string, got {mark!r}")
        return cls(
            description=description,
            status=TaskStatus.from_mark(mark),
            created_at=millis * _NANOS_PER_MILLI,
        )


def mark_complete(task: Task) -> Task:
    """Return the completed form of a task.

    Completing an already completed task returns it unchanged.
    """
    if task.is_completed:
        return task
    return replace(task, status=TaskStatus.COMPLETED)
