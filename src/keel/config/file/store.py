"""File-based configuration store implementation."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from result import Err, Ok, Result

from keel.common import JsonDict, create_logger

from ..models import (
    ConfigError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigScope,
    ConfigValidationError,
    ConfigYamlError,
)
from ..protocol import ConfigStore
from .paths import discover_config_paths
from .settings import ConfigStoreSettings

logger = create_logger("config")


class FileConfigStore(ConfigStore):
    def __init__(self, settings: ConfigStoreSettings, working_dir: Path | None = None) -> None:
        self.working_dir = working_dir or Path.cwd()
        self.settings = settings

    def find(self, scope: ConfigScope) -> Path:
        paths = discover_config_paths(self.working_dir, self.settings)

        match scope:
            case ConfigScope.USER:
                return paths.user_path
            case ConfigScope.PROJECT:
                return paths.project_path
            case _:
                raise ValueError(f"Unexpected scope: {scope}")

    def load_scope(self, scope: ConfigScope) -> Result[JsonDict, ConfigError]:
        path = self.find(scope)
        logger.debug("Loading config file", scope=scope.value, path=str(path))

        if not path.exists():
            logger.debug("Config file absent, using empty scope", scope=scope.value, path=str(path))
            return Ok({})

        if not path.is_file():
            logger.warning("Config path is not a file", scope=scope.value, path=str(path))
            return Err(
                ConfigNotFoundError(
                    scope=scope,
                    expected_path=path,
                    message=f"Configuration path for scope '{scope.value}' is not a file.",
                ),
            )

        try:
            raw_text = path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("Config file read error", scope=scope.value, path=str(path), error=str(exc))
            return Err(
                ConfigIOError(
                    scope=scope,
                    path=path,
                    message=str(exc),
                ),
            )

        try:
            data = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            mark = getattr(exc, "problem_mark", None)
            line = getattr(mark, "line", None)
            column = getattr(mark, "column", None)
            logger.error(
                "Config YAML parse error",
                scope=scope.value,
                path=str(path),
                line=line,
                column=column,
                error=str(exc),
            )
            return Err(
                ConfigYamlError(
                    scope=scope,
                    path=path,
                    line=(line + 1) if line is not None else None,
                    column=(column + 1) if column is not None else None,
                    message=str(exc),
                ),
            )

        if data is None:
            data = {}

        if not isinstance(data, dict):
            logger.error("Config must be a mapping", scope=scope.value, path=str(path))
            return Err(
                ConfigValidationError(
                    scope=scope,
                    path=path,
                    field=None,
                    message="Configuration root must be a mapping of keys to values.",
                ),
            )

        # Keys are addressed by name from the command line.
        values: JsonDict = {str(key): value for key, value in data.items()}

        invalid_key = next((key for key, value in values.items() if not _is_json_value(value)), None)
        if invalid_key is not None:
            logger.error("Config value is not JSON-compatible", scope=scope.value, path=str(path), field=invalid_key)
            return Err(
                ConfigValidationError(
                    scope=scope,
                    path=path,
                    field=invalid_key,
                    message=f"Value for '{invalid_key}' must be a string, number, boolean, null, list or mapping.",
                ),
            )

        return Ok(values)

    def save_scope(self, scope: ConfigScope, values: JsonDict) -> Result[None, ConfigError]:
        path = self.find(scope)
        logger.debug("Writing config file", scope=scope.value, path=str(path), keys=len(values))

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(yaml.safe_dump(values, sort_keys=False), encoding="utf-8")
            return Ok(None)
        except OSError as exc:
            logger.error("Config file write error", scope=scope.value, path=str(path), error=str(exc))
            return Err(
                ConfigIOError(
                    scope=scope,
                    path=path,
                    message=str(exc),
                )
            )


def _is_json_value(value: object) -> bool:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return False
    return True
