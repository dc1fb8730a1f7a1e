"""Routing of `config` positionals to subcommand handlers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from result import Err, Ok, Result

from keel.common import create_logger

from ..models import CommandError, ConfigUsageError, UsageErrorCause
from .handlers import (
    ConfigCommandContext,
    Handler,
    handle_delete,
    handle_edit,
    handle_get,
    handle_list,
    handle_location,
    handle_pick,
    handle_set,
)
from .results import CommandOutput

logger = create_logger("config")


class ConfigSubcommand(str, Enum):
    """Canonical config subcommands, in the order they are reported to users."""

    GET = "get"
    PICK = "pick"
    SET = "set"
    DELETE = "delete"
    LIST = "list"
    EDIT = "edit"
    LOCATION = "location"


ALIASES: dict[str, ConfigSubcommand] = {
    "ls": ConfigSubcommand.LIST,
    "del": ConfigSubcommand.DELETE,
    "rm": ConfigSubcommand.DELETE,
}

VALID_OPTIONS: list[str] = [subcommand.value for subcommand in ConfigSubcommand]

HANDLERS: dict[ConfigSubcommand, Handler] = {
    ConfigSubcommand.GET: handle_get,
    ConfigSubcommand.PICK: handle_pick,
    ConfigSubcommand.SET: handle_set,
    ConfigSubcommand.DELETE: handle_delete,
    ConfigSubcommand.LIST: handle_list,
    ConfigSubcommand.EDIT: handle_edit,
    ConfigSubcommand.LOCATION: handle_location,
}

_BY_NAME: dict[str, ConfigSubcommand] = {subcommand.value: subcommand for subcommand in ConfigSubcommand} | ALIASES


@dataclass(frozen=True, slots=True)
class Route:
    subcommand: ConfigSubcommand
    handler: Handler
    args: list[str]


def resolve_subcommand(name: str | None) -> Result[ConfigSubcommand, ConfigUsageError]:
    if name is None:
        return Err(
            ConfigUsageError(
                message="config command requires a subcommand",
                cause=UsageErrorCause(found=None, valid_options=list(VALID_OPTIONS)),
            )
        )

    subcommand = _BY_NAME.get(name)
    if subcommand is None:
        return Err(
            ConfigUsageError(
                message="Unrecognized config command",
                cause=UsageErrorCause(found=name, valid_options=list(VALID_OPTIONS)),
            )
        )
    return Ok(subcommand)


def route(positionals: Sequence[str]) -> Result[Route, ConfigUsageError]:
    """Pick the handler for the first positional; the rest become its arguments."""
    name = positionals[0] if positionals else None
    return resolve_subcommand(name).map(
        lambda subcommand: Route(subcommand=subcommand, handler=HANDLERS[subcommand], args=list(positionals[1:]))
    )


def run(positionals: Sequence[str], context: ConfigCommandContext) -> Result[CommandOutput, CommandError]:
    """Route the positionals and run the selected handler."""
    return (
        route(positionals)
        .inspect(
            lambda selected: logger.debug(
                "Running config command",
                subcommand=selected.subcommand.value,
                scope=context.scope.value,
                args=selected.args,
            )
        )
        .and_then(lambda selected: selected.handler(context, selected.args))
    )
