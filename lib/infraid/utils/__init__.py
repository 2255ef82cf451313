"""Utility helpers."""

from __future__ import annotations

from .env import LookupStatus, OverrideLookup, lookup_override, read_override_source
from .io import load_json_file, load_yaml_file, write_state
from .naming import normalize_string, truncate
from .time import generated_at

__all__ = [
    "LookupStatus",
    "OverrideLookup",
    "generated_at",
    "load_json_file",
    "load_yaml_file",
    "lookup_override",
    "normalize_string",
    "read_override_source",
    "truncate",
    "write_state",
]
