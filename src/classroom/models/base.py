"""Shared model helpers."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Naive UTC timestamp for created_at, updated_at and deleted_at.

    Columns are TIMESTAMP WITHOUT TIME ZONE; every stored time is UTC.
    """
    return datetime.now(UTC).replace(tzinfo=None)
