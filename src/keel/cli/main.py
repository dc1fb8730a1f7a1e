from __future__ import annotations

import os
from typing import Annotated

import typer
from pydantic import ValidationError

from keel.common import LoggingConfig, create_logger, setup_cli_logging
from keel.config import ConfigScope, FileConfigStore
from keel.settings import settings

from .commands import config as config_commands

logger = create_logger("cli")

app = typer.Typer(
    help="Keel command-line interface.",
    context_settings={"help_option_names": ["-h", "--help"]},
)
app.command("config")(config_commands.config)


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
) -> None:
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load_logging_config() -> LoggingConfig:
    config_store = FileConfigStore(settings=settings.to_config_store_settings())
    user_values = config_store.load_scope(ConfigScope.USER).unwrap_or({})
    try:
        return LoggingConfig.model_validate(user_values.get("logging") or {})
    except ValidationError:
        return LoggingConfig()


def _setup_logging() -> None:
    logging_config = _load_logging_config()

    if logging_config.enabled:
        setup_cli_logging(
            app_info=settings.app,
            config=logging_config,
            directories=settings.to_app_directories(),
        )
        logger.debug("CLI logging initialized", config=logging_config.model_dump())


def main() -> None:
    """Entrypoint for the keel CLI."""
    _setup_logging()
    app()
