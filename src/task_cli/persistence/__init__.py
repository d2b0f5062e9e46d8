"""Persistence helpers for task-cli."""

from task_cli.persistence._utils import atomic_write_json

__all__ = ["atomic_write_json"]
