"""Public configuration API for Keel."""

from __future__ import annotations

from .file import FileConfigStore
from .models import (
    CommandError,
    ConfigError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigScope,
    ConfigUsageError,
    ConfigValidationError,
    ConfigYamlError,
    UsageErrorCause,
)
from .protocol import ConfigStore
from .resolver import ResolvedScope, load_values, physical_scope, resolve

__all__ = [
    "CommandError",
    "ConfigError",
    "ConfigIOError",
    "ConfigNotFoundError",
    "ConfigScope",
    "ConfigStore",
    "ConfigUsageError",
    "ConfigValidationError",
    "ConfigYamlError",
    "FileConfigStore",
    "ResolvedScope",
    "UsageErrorCause",
    "load_values",
    "physical_scope",
    "resolve",
]
