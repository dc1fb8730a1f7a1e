"""Handlers for the config subcommands."""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from result import Err, Ok, Result, is_err

from keel.common import JsonDict, create_logger

from ..editor import EditorLauncher, open_in_editor, select_editor
from ..models import EUSAGE, CommandError, ConfigScope, ConfigUsageError, UsageErrorCause
from ..protocol import ConfigStore
from ..resolver import load_merged, load_values, physical_scope
from ..values import parse_assignments
from .results import CommandOutput, Done, Listing, Location, Picked, RawJson, Scalar

logger = create_logger("config")


@dataclass(frozen=True)
class ConfigCommandContext:
    """Everything a handler needs besides its positional arguments."""

    store: ConfigStore
    scope: ConfigScope = ConfigScope.ALL
    launch_editor: EditorLauncher = open_in_editor


type Handler = Callable[[ConfigCommandContext, Sequence[str]], Result[CommandOutput, CommandError]]


def handle_get(context: ConfigCommandContext, args: Sequence[str]) -> Result[CommandOutput, CommandError]:
    """Read one value, or several keys as a mapping.

    With a single key the merged scope yields the bare value while the user
    and project scopes yield the JSON encoding of the stored value.
    """
    if len(args) != 1:
        return handle_pick(context, args)

    key = args[0]
    if not key:
        return Err(ConfigUsageError(message="Key is required", cause=UsageErrorCause(code=EUSAGE)))

    values_result = load_values(context.store, context.scope)
    if context.scope == ConfigScope.ALL:
        return values_result.map(lambda values: Scalar(values.get(key)))
    return values_result.map(lambda values: RawJson(_encode_value(values, key)))


def handle_pick(context: ConfigCommandContext, args: Sequence[str]) -> Result[CommandOutput, CommandError]:
    return load_values(context.store, context.scope).map(lambda values: Picked(_pick(values, args)))


def handle_list(context: ConfigCommandContext, args: Sequence[str]) -> Result[CommandOutput, CommandError]:
    return load_values(context.store, context.scope).map(
        lambda values: Listing([f"{key}={_format_list_value(value)}" for key, value in values.items()])
    )


def handle_set(context: ConfigCommandContext, args: Sequence[str]) -> Result[CommandOutput, CommandError]:
    target = physical_scope(context.scope)

    parsed_result = parse_assignments(args)
    if is_err(parsed_result):
        return parsed_result
    assignments = parsed_result.unwrap()

    return (
        context.store.load_scope(target)
        .map(lambda existing: {**existing, **assignments})
        .and_then(lambda updated: context.store.save_scope(target, updated))
        .inspect(lambda _: logger.info("Config values set", scope=target.value, keys=list(assignments)))
        .map(lambda _: Done())
    )


def handle_delete(context: ConfigCommandContext, args: Sequence[str]) -> Result[CommandOutput, CommandError]:
    if not args:
        return Err(ConfigUsageError(message="At least one key is required", cause=UsageErrorCause(code=EUSAGE)))

    target = physical_scope(context.scope)
    load_result = context.store.load_scope(target)
    if is_err(load_result):
        return load_result

    existing = load_result.unwrap()
    remaining = {key: value for key, value in existing.items() if key not in args}
    if len(remaining) == len(existing):
        logger.debug("No config keys to delete", scope=target.value, keys=list(args))
        return Ok(Done())

    return (
        context.store.save_scope(target, remaining)
        .inspect(lambda _: logger.info("Config values deleted", scope=target.value, keys=list(args)))
        .map(lambda _: Done())
    )


def handle_edit(context: ConfigCommandContext, args: Sequence[str]) -> Result[CommandOutput, CommandError]:
    path = context.store.find(physical_scope(context.scope))

    # Load errors fall back to the environment editor.
    editor = (
        load_merged(context.store)
        .inspect_err(lambda error: logger.warning("Ignoring configured editor", error=error.message))
        .map(select_editor)
        .unwrap_or(select_editor({}))
    )

    context.launch_editor(path, editor)
    return Ok(Done())


def handle_location(context: ConfigCommandContext, args: Sequence[str]) -> Result[CommandOutput, CommandError]:
    return Ok(Location(context.store.find(physical_scope(context.scope))))


def _pick(values: JsonDict, keys: Sequence[str]) -> JsonDict:
    if not keys:
        return dict(values)
    return {key: values.get(key) for key in keys}


def _encode_value(values: JsonDict, key: str) -> str | None:
    if key not in values:
        return None
    return json.dumps(values[key])


def _format_list_value(value: object) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))
