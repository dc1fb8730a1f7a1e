"""Configuration storage protocol."""

from pathlib import Path
from typing import Protocol

from result import Result

from keel.common import JsonDict

from .models import ConfigError, ConfigScope


class ConfigStore(Protocol):
    """Protocol for loading, locating and persisting a physical config scope.

    Only ConfigScope.USER and ConfigScope.PROJECT are physical scopes.
    """

    def load_scope(self, scope: ConfigScope) -> Result[JsonDict, ConfigError]:
        """Load the key/value mapping stored for a scope.

        Returns:
            Ok(mapping) with an empty mapping when the scope has no file yet.
            Err(ConfigError) on read or parse errors.
        """
        ...

    def find(self, scope: ConfigScope) -> Path:
        """Return the file path backing a scope, whether or not it exists."""
        ...

    def save_scope(self, scope: ConfigScope, values: JsonDict) -> Result[None, ConfigError]:
        """Replace the persisted mapping of a scope."""
        ...
