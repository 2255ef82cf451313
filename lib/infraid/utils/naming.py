"""Naming utilities for resource-safe identifiers."""

from __future__ import annotations

import re

from infraid.errors import InvalidInputError

# replace all characters that are not alphanumeric or `-` with `-`
_INVALID_CHARS = re.compile(r"[^A-Za-z0-9-]")
# collapse runs of dashes into a single one
_DASH_RUNS = re.compile(r"-{2,}")


def normalize_string(raw: str) -> str:
    """Convert an arbitrary string into an identifier fragment.

    Characters outside ``[A-Za-z0-9-]`` become ``-``, consecutive dashes are
    collapsed and trailing dashes are trimmed. A leading dash is kept.

    Raises:
        InvalidInputError: if ``raw`` has no alphanumeric character.
    """

    normalized = _INVALID_CHARS.sub("-", raw)
    normalized = _DASH_RUNS.sub("-", normalized)
    if normalized in ("", "-"):
        raise InvalidInputError(raw)
    return normalized.rstrip("-")


def truncate(value: str, max_len: int) -> str:
    """Cut ``value`` to at most ``max_len`` characters and trim trailing dashes."""

    if len(value) > max_len:
        value = value[:max_len]
    return value.rstrip("-")


__all__ = ["normalize_string", "truncate"]
