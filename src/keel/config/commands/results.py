"""Tagged results produced by config subcommands.

Handlers return one of these shapes and the CLI decides how to print it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from keel.common import JsonDict, JsonValue


@dataclass(frozen=True, slots=True)
class Scalar:
    """A single merged value, printed as-is."""

    value: JsonValue


@dataclass(frozen=True, slots=True)
class RawJson:
    """A value from one physical scope, already JSON-encoded.

    `text` is None when the key is absent from that scope.
    """

    text: str | None


@dataclass(frozen=True, slots=True)
class Picked:
    values: JsonDict = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class Listing:
    lines: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Location:
    path: Path


@dataclass(frozen=True, slots=True)
class Done:
    pass


type CommandOutput = Scalar | RawJson | Picked | Listing | Location | Done
