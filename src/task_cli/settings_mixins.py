"""Settings mixins for application identity, storage and CLI configuration.

AppSettingsMixin: Application identity and disk layout (app_name, tasks file).
StoreSettingsMixin: Behavior switches for the task store.
CLISettingsMixin: Logging settings for the command-line entry point.

These live outside cli/ so that config.py can compose BaseSettings
without importing the cli package.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator


class AppSettingsMixin:
    """Settings for application identity and disk layout.

    Should be composed with BaseSettings via multiple inheritance.
    """

    app_name: str = Field(
        default="task_cli",
        title="App Name",
        description="Application name, also used for config directories",
    )

    tasks_file: Path = Field(
        default_factory=lambda: Path.home() / "todo.json",
        title="Tasks File",
        description="JSON file holding the task list",
    )

    @field_validator("tasks_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Expand ~ in paths."""
        if isinstance(v, str):
            return Path(v).expanduser()
        return v.expanduser()


class StoreSettingsMixin:
    """Settings that change how the task store behaves.

    Both switches are off by default, which keeps position-derived ids
    and silent removal of missing ids.
    """

    stable_ids: bool = Field(
        default=False,
        title="Stable IDs",
        description="Persist task ids so they do not renumber after a removal",
    )

    strict_remove: bool = Field(
        default=False,
        title="Strict Remove",
        description="Treat removing a missing task id as an error",
    )


class CLISettingsMixin:
    """Settings for CLI configuration.

    Note: This is a mixin, not a BaseSettings subclass, to avoid
    MRO issues when composed with other settings classes.
    """

    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="warning",
        title="Log Level",
        description="Logging verbosity level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        title="Log Format",
        description="Log output format (console for humans, json for machines)",
    )
