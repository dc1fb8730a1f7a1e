from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from result import Err, Ok, Result

from keel.common import JsonDict
from keel.config.models import ConfigError, ConfigScope

USER_PATH = Path("/home/user/.config/keel/config.yaml")
PROJECT_PATH = Path("/project/.keel/config.yaml")


class InMemoryConfigStore:
    """ConfigStore double keeping both scopes in memory and recording writes."""

    def __init__(self, user: JsonDict | None = None, project: JsonDict | None = None) -> None:
        self.values: dict[ConfigScope, JsonDict] = {
            ConfigScope.USER: dict(user or {}),
            ConfigScope.PROJECT: dict(project or {}),
        }
        self.errors: dict[ConfigScope, ConfigError] = {}
        self.saves: list[tuple[ConfigScope, JsonDict]] = []

    def load_scope(self, scope: ConfigScope) -> Result[JsonDict, ConfigError]:
        if scope in self.errors:
            return Err(self.errors[scope])
        return Ok(dict(self.values[scope]))

    def find(self, scope: ConfigScope) -> Path:
        return {ConfigScope.USER: USER_PATH, ConfigScope.PROJECT: PROJECT_PATH}[scope]

    def save_scope(self, scope: ConfigScope, values: JsonDict) -> Result[None, ConfigError]:
        self.saves.append((scope, dict(values)))
        self.values[scope] = dict(values)
        return Ok(None)


@pytest.fixture
def make_store() -> Callable[..., InMemoryConfigStore]:
    return InMemoryConfigStore
