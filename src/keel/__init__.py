"""Keel - scoped configuration management from the command line.

By default, Keel's internal logging is disabled when used as a library.
Library users can enable logging by calling keel.enable_logging().
"""

from keel.common import disable_library_logging, enable_library_logging

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "enable_logging",
]
