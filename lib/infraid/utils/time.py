"""Time helpers."""

from __future__ import annotations

from datetime import datetime, timezone


def generated_at() -> str:
    """Return the current UTC time in RFC 3339 form, as recorded in state files."""
    now = datetime.now(timezone.utc).replace(microsecond=0)
    return now.isoformat().replace("+00:00", "Z")
