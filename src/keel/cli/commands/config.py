"""The `keel config` command."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
import yaml
from result import Err, Ok

from keel.config import (
    CommandError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigScope,
    ConfigUsageError,
    ConfigValidationError,
    ConfigYamlError,
    FileConfigStore,
)
from keel.config.commands import (
    CommandOutput,
    ConfigCommandContext,
    Done,
    Listing,
    Location,
    Picked,
    RawJson,
    Scalar,
    run,
)
from keel.settings import settings


class OutputFormat(str, Enum):
    JSON = "json"
    YAML = "yaml"


ArgsArgument = Annotated[
    list[str] | None,
    typer.Argument(
        help="Subcommand (get, pick, set, delete, list, edit, location) followed by its arguments.",
        show_default=False,
    ),
]
ScopeOption = Annotated[
    ConfigScope,
    typer.Option(
        "--config",
        "-c",
        case_sensitive=False,
        help="Configuration scope: user, project, or all (merged, project wins).",
    ),
]
FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", show_default=True, case_sensitive=False, help="Output format for mappings."),
]
WorkingDirOption = Annotated[
    Path | None,
    typer.Option(
        "--working-dir",
        hidden=True,
        help="Override working directory used when resolving project config.",
    ),
]


def config(
    args: ArgsArgument = None,
    scope: ScopeOption = ConfigScope.ALL,
    format: FormatOption = OutputFormat.JSON,
    working_dir: WorkingDirOption = None,
) -> None:
    """Read and write Keel configuration.

    Examples:

        keel config get registry

        keel config get registry --config user

        keel config set color=auto timeout=30

        keel config ls --config project

        keel config rm color
    """
    store = FileConfigStore(
        working_dir=working_dir,
        settings=settings.to_config_store_settings(),
    )
    context = ConfigCommandContext(store=store, scope=scope)

    match run(args or [], context):
        case Ok(output):
            _render(output, format)
        case Err(error):
            raise typer.Exit(code=_handle_error(error))


def _render(output: CommandOutput, format: OutputFormat) -> None:
    match output:
        case Scalar(value):
            if value is not None:
                typer.echo(value if isinstance(value, str) else json.dumps(value))
        case RawJson(text):
            if text is not None:
                typer.echo(text)
        case Picked(values):
            typer.echo(_format_payload(values, format))
        case Listing(lines):
            for line in lines:
                typer.echo(line)
        case Location(path):
            typer.echo(str(path))
        case Done():
            pass


def _format_payload(payload: dict[str, object], format: OutputFormat) -> str:
    if format == OutputFormat.YAML:
        return yaml.safe_dump(payload, sort_keys=False).rstrip("\n")
    return json.dumps(payload, indent=2)


def _handle_error(error: CommandError) -> int:
    """Print an error to stderr and return the exit code for it."""
    match error:
        case ConfigUsageError(message=message, cause=cause):
            typer.secho(message, err=True, fg=typer.colors.RED)
            if cause.found is not None:
                typer.echo(f"Found: {cause.found}", err=True)
            if cause.valid_options:
                typer.echo(f"Valid options: {', '.join(cause.valid_options)}", err=True)
            return 2
        case ConfigNotFoundError(expected_path=expected_path):
            detail = f"expected at {expected_path}"
        case ConfigValidationError(path=path, field=str() as field):
            detail = f"{path}, key '{field}'"
        case ConfigYamlError(path=path) | ConfigValidationError(path=path) | ConfigIOError(path=path):
            detail = str(path)

    typer.secho(f"[{error.scope.value}] {error.message} ({detail})", err=True, fg=typer.colors.RED)
    return 1
