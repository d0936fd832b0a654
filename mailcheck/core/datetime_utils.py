"""Datetime helpers for consistent timezone handling."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Get current UTC time as naive datetime.

    Replaces deprecated datetime.utcnow().
    """
    return datetime.now(UTC).replace(tzinfo=None)
