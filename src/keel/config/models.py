"""Pydantic models for Keel configuration scopes and errors."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class ConfigScope(str, Enum):
    """Configuration scope levels.

    USER and PROJECT are persisted stores. ALL is the merged view of both.
    """

    USER = "user"
    PROJECT = "project"
    ALL = "all"


class ConfigNotFoundError(BaseModel):
    """Configuration file not found at expected location."""

    model_config = ConfigDict(extra="forbid")

    scope: ConfigScope
    expected_path: Path
    message: str


class ConfigYamlError(BaseModel):
    """YAML parsing error in configuration file."""

    model_config = ConfigDict(extra="forbid")

    scope: ConfigScope
    path: Path
    line: int | None = None
    column: int | None = None
    message: str


class ConfigValidationError(BaseModel):
    """Configuration file content is not a key/value mapping."""

    model_config = ConfigDict(extra="forbid")

    scope: ConfigScope
    path: Path
    field: str | None = None
    message: str


class ConfigIOError(BaseModel):
    """File I/O error reading or writing configuration."""

    model_config = ConfigDict(extra="forbid")

    scope: ConfigScope
    path: Path
    message: str


type ConfigError = ConfigNotFoundError | ConfigYamlError | ConfigValidationError | ConfigIOError


EUSAGE = "EUSAGE"


class UsageErrorCause(BaseModel):
    """Structured detail attached to a usage error."""

    model_config = ConfigDict(extra="forbid")

    found: str | None = None
    valid_options: list[str] | None = None
    code: str | None = None


class ConfigUsageError(BaseModel):
    """The config command was invoked with invalid arguments."""

    model_config = ConfigDict(extra="forbid")

    message: str
    cause: UsageErrorCause = UsageErrorCause()


type CommandError = ConfigUsageError | ConfigError
