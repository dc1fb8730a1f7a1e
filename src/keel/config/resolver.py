"""Scope resolution for the config command.

Commands that read values (get, pick, list) see the merged view for
ConfigScope.ALL. Commands that address a file (location, set, delete, edit)
see the project store for ConfigScope.ALL. The two rules are kept as
separate functions so a path is never derived from merged data.
"""

from __future__ import annotations

from dataclasses import dataclass

from result import Ok, Result, is_err

from keel.common import JsonDict, create_logger

from .merger import merge_scopes
from .models import ConfigError, ConfigScope
from .protocol import ConfigStore

logger = create_logger("config")


@dataclass(frozen=True, slots=True)
class ResolvedScope:
    """Values visible for a requested scope and the store that backs it."""

    values: JsonDict
    path_scope: ConfigScope


def physical_scope(scope: ConfigScope) -> ConfigScope:
    """Return the persisted scope addressed by a requested scope."""
    match scope:
        case ConfigScope.USER:
            return ConfigScope.USER
        case ConfigScope.PROJECT | ConfigScope.ALL:
            return ConfigScope.PROJECT
        case _:
            raise ValueError(f"Unexpected scope: {scope}")


def load_values(store: ConfigStore, scope: ConfigScope) -> Result[JsonDict, ConfigError]:
    """Load the values visible for a requested scope."""
    match scope:
        case ConfigScope.ALL:
            return load_merged(store)
        case ConfigScope.USER | ConfigScope.PROJECT:
            return store.load_scope(scope)
        case _:
            raise ValueError(f"Unexpected scope: {scope}")


def load_merged(store: ConfigStore) -> Result[JsonDict, ConfigError]:
    user_result = store.load_scope(ConfigScope.USER)
    if is_err(user_result):
        return user_result

    project_result = store.load_scope(ConfigScope.PROJECT)
    if is_err(project_result):
        return project_result

    merged = merge_scopes(user_result.unwrap(), project_result.unwrap())
    logger.debug("Merged config scopes", keys=len(merged))
    return Ok(merged)


def resolve(store: ConfigStore, scope: ConfigScope) -> Result[ResolvedScope, ConfigError]:
    return load_values(store, scope).map(lambda values: ResolvedScope(values=values, path_scope=physical_scope(scope)))
