"""The `config` command core: routing, handlers and their results."""

from .handlers import ConfigCommandContext, Handler
from .results import CommandOutput, Done, Listing, Location, Picked, RawJson, Scalar
from .router import ALIASES, VALID_OPTIONS, ConfigSubcommand, Route, resolve_subcommand, route, run

__all__ = [
    "ALIASES",
    "VALID_OPTIONS",
    "CommandOutput",
    "ConfigCommandContext",
    "ConfigSubcommand",
    "Done",
    "Handler",
    "Listing",
    "Location",
    "Picked",
    "RawJson",
    "Route",
    "Scalar",
    "resolve_subcommand",
    "route",
    "run",
]
