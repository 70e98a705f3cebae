from __future__ import annotations

from datetime import datetime, timezone


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def to_iso_z(value: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. ``2026-02-04T03:00:00.000Z``."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
