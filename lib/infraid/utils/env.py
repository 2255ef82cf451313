"""Override lookup from environment variables and dot-files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Mapping

from infraid.utils.naming import normalize_string

if TYPE_CHECKING:
    from infraid.core.context import GenerationContext

CURRENT_DIR_SENTINEL = "."


class LookupStatus(str, Enum):
    FOUND = "found"
    MISSING = "missing"
    READ_ERROR = "read_error"


@dataclass(frozen=True)
class OverrideLookup:
    """Raw outcome of reading one override source."""

    status: LookupStatus
    value: str = ""
    source: str | None = None
    error: Exception | None = None


def override_file_name(name: str) -> str:
    """Return the dot-file name holding the fallback value for ``name``."""
    return f".{name.lower()}"


def read_override_source(name: str, environ: Mapping[str, str], work_dir: Path) -> OverrideLookup:
    """Read the raw value of ``name`` from ``environ`` or its dot-file in ``work_dir``."""
    value = environ.get(name, "")
    if value:
        return OverrideLookup(LookupStatus.FOUND, value, source=f"env:{name}")

    path = work_dir / override_file_name(name)
    if not path.exists():
        return OverrideLookup(LookupStatus.MISSING)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return OverrideLookup(LookupStatus.READ_ERROR, source=str(path), error=exc)

    if not raw:
        return OverrideLookup(LookupStatus.MISSING, source=str(path))
    return OverrideLookup(LookupStatus.FOUND, raw, source=str(path))


def lookup_override(name: str, context: "GenerationContext") -> str:
    """Resolve the override for ``name``; an empty string means no override.

    Values memoized in ``context`` win over the environment, which wins over
    the dot-file. ``false`` (any case) disables the override and ``.`` stands
    for the base name of the working directory. Unreadable dot-files are
    logged and ignored.
    """
    memoized = context.recall(name)
    if memoized:
        return memoized

    result = read_override_source(name, context.environ, context.work_dir)
    if result.status is LookupStatus.READ_ERROR:
        logging.warning("Ignoring unreadable override file %s: %s", result.source, result.error)
        return ""

    value = result.value
    if not value or value.lower() == "false":
        return ""
    if value == CURRENT_DIR_SENTINEL:
        value = context.work_dir.resolve().name
    logging.debug("Using override %s from %s", name, result.source)
    return normalize_string(value)


__all__ = [
    "LookupStatus",
    "OverrideLookup",
    "lookup_override",
    "override_file_name",
    "read_override_source",
]
