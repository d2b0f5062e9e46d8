"""Command-line entry point.

Parses one operation plus its arguments, resolves settings and the tasks
file once, runs the operation against a TaskStore and maps failures to a
diagnostic on stderr and a non-zero exit code.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from task_cli.config import BaseSettings, get_settings
from task_cli.errors import TaskCliError, UserInputError
from task_cli.logging import Loggers, bind_context, clear_context, configure_logging
from task_cli.tasks import TaskFilter, TaskStore

logger = Loggers.cli()


class Operation(Enum):
    """Operations the CLI can run."""

    ADD = "add"
    REMOVE = "remove"
    COMPLETE = "complete"
    LIST = "list"


@dataclass
class Request:
    """A validated invocation."""

    operation: Operation
    task_id: int | None = None
    description: str | None = None
    task_filter: TaskFilter = TaskFilter.NONE

    @property
    def target_id(self) -> int:
        """The id a remove or complete acts on."""
        if self.task_id is None:
            raise UserInputError(f"Task id missing: --id is required for '{self.operation.value}'")
        return self.task_id


def build_request(
    operation: str,
    task_id: int | None = None,
    description: str | None = None,
    filter_name: str | None = None,
) -> Request:
    """Check that the arguments the operation needs are present.

    Raises:
        UserInputError: If a required argument is missing or invalid.
    """
    try:
        op = Operation(operation.lower())
    except ValueError:
        raise UserInputError(f"Unknown operation {operation!r}") from None

    if op in (Operation.REMOVE, Operation.COMPLETE) and task_id is None:
        raise UserInputError(f"Task id missing: --id is required for '{op.value}'")
    if op is Operation.ADD and (description is None or not description.strip()):
        raise UserInputError("Description missing: --description is required for 'add'")

    try:
        task_filter = TaskFilter.parse(filter_name)
    except ValueError as e:
        raise UserInputError(str(e)) from None

    return Request(operation=op, task_id=task_id, description=description, task_filter=task_filter)


def run(request: Request, store: TaskStore) -> None:
    """Dispatch a validated request to the store. Task lines are echoed verbatim."""
    if request.operation is Operation.ADD:
        task_id = store.add(request.description or "")
        click.echo(f"Added task {task_id}")
    elif request.operation is Operation.REMOVE:
        task_id = request.target_id
        if store.remove(task_id):
            click.echo(f"Removed task {task_id}")
        else:
            click.echo(f"No task {task_id}; nothing removed")
    elif request.operation is Operation.COMPLETE:
        task_id = request.target_id
        store.complete(task_id)
        click.echo(f"Completed task {task_id}")
    else:
        for line in store.listing(request.task_filter):
            click.echo(line)


def resolve_settings(
    json_path: Path | None,
    strict: bool | None,
    stable_ids: bool | None,
    log_level: str | None,
) -> BaseSettings:
    """Apply command-line overrides on top of the configured settings."""
    overrides: dict[str, object] = {}
    if json_path is not None:
        overrides["tasks_file"] = json_path.expanduser()
    if strict is not None:
        overrides["strict_remove"] = strict
    if stable_ids is not None:
        overrides["stable_ids"] = stable_ids
    if log_level is not None:
        overrides["log_level"] = log_level.lower()
    settings = get_settings()
    return settings.model_copy(update=overrides) if overrides else settings


@click.command(name="task-cli", context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-o",
    "--operation",
    required=True,
    type=click.Choice([op.value for op in Operation], case_sensitive=False),
    help="Operation to run: add, remove, complete, list.",
)
@click.option(
    "-i",
    "--id",
    "task_id",
    type=click.IntRange(min=1),
    help="ID of the task to complete or remove.",
)
@click.option("-d", "--description", help="Description of the task to add.")
@click.option(
    "-f",
    "--filter",
    "filter_name",
    type=click.Choice([f.value for f in TaskFilter], case_sensitive=False),
    default=TaskFilter.NONE.value,
    show_default=True,
    help="Listing filter.",
)
@click.option(
    "-j",
    "--json",
    "json_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the tasks file (defaults to the configured tasks_file).",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Fail when removing a task id that does not exist.",
)
@click.option(
    "--stable-ids/--no-stable-ids",
    default=None,
    help="Persist task ids so they survive removals.",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    help="Override the configured log level.",
)
@click.pass_context
def main(
    ctx: click.Context,
    operation: str,
    task_id: int | None,
    description: str | None,
    filter_name: str,
    json_path: Path | None,
    strict: bool | None,
    stable_ids: bool | None,
    log_level: str | None,
) -> None:
    """Track short text tasks in a JSON file."""
    try:
        request = build_request(operation, task_id, description, filter_name)
    except UserInputError as e:
        raise click.UsageError(str(e), ctx=ctx) from e

    settings = resolve_settings(json_path, strict, stable_ids, log_level)
    configure_logging(settings)
    bind_context(operation=request.operation.value)

    err = Console(stderr=True, highlight=False, emoji=False)

    try:
        store = TaskStore(
            settings.tasks_file,
            stable_ids=settings.stable_ids,
            strict_remove=settings.strict_remove,
        )
        run(request, store)
    except TaskCliError as e:
        logger.info("operation_failed", kind=e.kind.value, error=str(e))
        err.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        ctx.exit(e.exit_code)
    finally:
        clear_context()
