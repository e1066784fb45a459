"""UTC datetime utilities."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def utc_now_iso() -> str:
    """UTC now as an ISO-8601 string, the form snapshots are stamped with."""
    return utc_now().isoformat()
