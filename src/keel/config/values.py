"""Parsing of `key=value` arguments for the config command."""

from __future__ import annotations

import json
from collections.abc import Sequence

import yaml
from result import Err, Ok, Result

from keel.common import JsonDict, JsonValue

from .models import EUSAGE, ConfigUsageError, UsageErrorCause


def parse_assignments(args: Sequence[str]) -> Result[JsonDict, ConfigUsageError]:
    """Parse `key=value` arguments into a mapping, later keys winning."""
    if not args:
        return Err(
            ConfigUsageError(
                message="At least one key=value pair is required",
                cause=UsageErrorCause(code=EUSAGE),
            )
        )

    parsed: JsonDict = {}
    for arg in args:
        key, separator, raw_value = arg.partition("=")
        key = key.strip()
        if not separator or not key:
            return Err(
                ConfigUsageError(
                    message="Invalid key=value pair",
                    cause=UsageErrorCause(found=arg, code=EUSAGE),
                )
            )
        parsed[key] = parse_value(raw_value)

    return Ok(parsed)


def parse_value(raw: str) -> JsonValue:
    """Interpret a raw value as a YAML scalar or flow collection.

    Anything that does not parse, or parses to a type JSON cannot hold
    (dates, for example), is kept as the raw string.
    """
    if not raw.strip():
        return raw

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw

    try:
        json.dumps(parsed)
    except (TypeError, ValueError):
        return raw
    return parsed
