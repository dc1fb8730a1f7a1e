"""Shared type aliases for configuration values."""

from __future__ import annotations

type JsonValue = dict[str, object] | list[object] | str | int | float | bool | None
type JsonDict = dict[str, object]

__all__ = ["JsonDict", "JsonValue"]
