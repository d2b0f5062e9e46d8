"""Shared test fixtures and utilities for task-cli tests.

Provides:
- MockContext for isolating tests from global state
- Temporary workspace and tasks file fixtures
- A click CliRunner wired to an isolated tasks file
"""

import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest
import structlog
from click.testing import CliRunner

from task_cli.config import (
    BaseSettings,
    reload_settings,
    set_context_settings,
    set_settings,
)


class MockContext:
    """Context manager for isolating tests from global state.

    Handles:
    - Pointing HOME and the working directory at a temporary directory so
      no user or project settings.json is picked up
    - Clearing TASK_CLI_* environment variables
    - Installing settings whose tasks file lives in the temporary directory

    Usage:
        with MockContext() as ctx:
            store = TaskStore(ctx.settings.tasks_file)
    """

    def __init__(self, **settings_kwargs):
        self._settings_kwargs = settings_kwargs
        self._temp_dir: tempfile.TemporaryDirectory | None = None
        self._settings: BaseSettings | None = None
        self._original_env: dict[str, str | None] = {}
        self._original_cwd: str | None = None

    def __enter__(self) -> "MockContext":
        self._temp_dir = tempfile.TemporaryDirectory()
        workspace_dir = Path(self._temp_dir.name)

        for var in list(os.environ):
            if var.startswith("TASK_CLI_"):
                self._original_env[var] = os.environ.pop(var)
        self._original_env["HOME"] = os.environ.get("HOME")
        os.environ["HOME"] = str(workspace_dir)

        self._original_cwd = os.getcwd()
        os.chdir(workspace_dir)

        self._settings = BaseSettings(
            tasks_file=workspace_dir / "todo.json",
            **self._settings_kwargs,
        )
        set_settings(self._settings)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        set_context_settings(None)

        if self._original_cwd is not None:
            os.chdir(self._original_cwd)

        for var, value in self._original_env.items():
            if value is None:
                os.environ.pop(var, None)
            else:
                os.environ[var] = value

        reload_settings()

        if self._temp_dir:
            self._temp_dir.cleanup()

    @property
    def settings(self) -> BaseSettings:
        if self._settings is None:
            raise RuntimeError("MockContext not entered")
        return self._settings

    @property
    def workspace_dir(self) -> Path:
        if self._temp_dir is None:
            raise RuntimeError("MockContext not entered")
        return Path(self._temp_dir.name)

    @property
    def tasks_file(self) -> Path:
        return self.settings.tasks_file


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Undo any logging configuration a test (or the CLI) installed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def mock_context() -> Generator[MockContext, None, None]:
    """Fixture providing an isolated test context."""
    with MockContext() as ctx:
        yield ctx


@pytest.fixture
def tasks_file(tmp_path: Path) -> Path:
    """Path to a tasks file that does not exist yet."""
    return tmp_path / "todo.json"


@pytest.fixture
def runner(mock_context: MockContext) -> CliRunner:
    """CliRunner whose invocations see isolated settings."""
    return CliRunner()
