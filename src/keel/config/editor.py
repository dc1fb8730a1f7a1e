"""External editor invocation for `config edit`."""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path

import typer

from keel.common import create_logger

DEFAULT_EDITOR = "vi"

type EditorLauncher = Callable[[Path, str], None]

logger = create_logger("config")


def select_editor(values: Mapping[str, object]) -> str:
    """Pick the editor command: the `editor` config key, then $VISUAL, then $EDITOR."""
    configured = values.get("editor")
    if isinstance(configured, str) and configured.strip():
        return configured
    return os.environ.get("VISUAL") or os.environ.get("EDITOR") or DEFAULT_EDITOR


def open_in_editor(path: Path, editor: str) -> None:
    """Open a file in an editor and block until the editor exits.

    The file and its parent directory are created when missing.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch(exist_ok=True)

    logger.debug("Launching editor", editor=editor, path=str(path))
    typer.edit(filename=str(path), editor=editor)
