"""Helpers shared by the table models."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time in UTC without tzinfo.

    Timestamp columns are ``TIMESTAMP WITHOUT TIME ZONE`` and always hold UTC.
    """
    return datetime.now(UTC).replace(tzinfo=None)
