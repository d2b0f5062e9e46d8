"""Command-line interface for task-cli."""

from task_cli.cli.app import Operation, Request, build_request, main, run

__all__ = ["Operation", "Request", "build_request", "main", "run"]
