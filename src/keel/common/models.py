"""Common models used across Keel."""

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel

from keel.constants import APP_NAME


class AppInfo(BaseModel):
    project_name: str = APP_NAME
    version: str = "0.1.0"
    environment: Literal["test", "dev", "prod"] = "dev"


class AppPaths(BaseModel):
    config_dir_name: str = APP_NAME
    data_dir_name: str = APP_NAME
    project_subdir_name: str = f".{APP_NAME}"
    user_config_filename: str = "config.yaml"
    project_config_filename: str = "config.yaml"


@dataclass(frozen=True)
class AppDirectories:
    """Application directory structure settings.

    Defines where Keel stores files relative to standard locations:
    - ~/.config/{app_name}/
    - ~/.local/share/{data_name}/
    - ./{project_marker}/

    Attributes:
        app_name: Name used in the XDG config directory
        data_name: Name used in the XDG data directory
        project_marker: Directory name that marks a Keel project root
    """

    app_name: str = APP_NAME
    data_name: str = APP_NAME
    project_marker: str = f".{APP_NAME}"
