"""Configuration merging utilities."""

from __future__ import annotations

from collections.abc import Mapping

from keel.common import JsonDict


def merge_scopes(user: Mapping[str, object], project: Mapping[str, object]) -> JsonDict:
    """Overlay project values onto user values.

    The merge is shallow: a project value replaces the user value for the same
    top-level key, nested mappings included. User keys keep their position and
    project-only keys are appended in project order.
    """
    merged: JsonDict = dict(user)
    for key, value in project.items():
        merged[key] = value
    return merged
