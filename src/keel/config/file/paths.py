from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from keel.common import get_project_root, get_user_config_root, resolve_working_directory

from .settings import ConfigStoreSettings


@dataclass(frozen=True, slots=True)
class ResolvedConfigPaths:
    user_path: Path
    project_path: Path


def discover_config_paths(working_dir: Path, settings: ConfigStoreSettings) -> ResolvedConfigPaths:
    """Locate the user and project config files.

    The project file lives in the nearest ancestor holding the project marker
    directory, or under the working directory when there is none yet.
    """
    start_dir = resolve_working_directory(working_dir)
    project_root = get_project_root(start_dir, settings.directories) or start_dir

    return ResolvedConfigPaths(
        user_path=get_user_config_root(settings.directories) / settings.user_file,
        project_path=project_root / settings.project_marker / settings.project_file,
    )
