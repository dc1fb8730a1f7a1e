"""Common models and helpers used across Keel modules."""

from .fields import JsonDict, JsonValue
from .logging import LoggingConfig, create_logger, disable_library_logging, enable_library_logging, setup_cli_logging
from .models import AppDirectories, AppInfo, AppPaths
from .paths import get_data_directory, get_project_root, get_user_config_root, resolve_working_directory

__all__ = [
    "AppDirectories",
    "AppInfo",
    "AppPaths",
    "JsonDict",
    "JsonValue",
    "LoggingConfig",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "get_data_directory",
    "get_project_root",
    "get_user_config_root",
    "resolve_working_directory",
    "setup_cli_logging",
]
