"""
UTC datetime helpers for task and session timestamps.

Every datetime held by an entity is timezone-aware UTC. Persisted values
are ISO-8601 strings; use parse_iso_utc() when reading them back.
"""

from datetime import UTC, datetime, timedelta

# Smallest step datetime can represent; used to keep timestamps strictly increasing.
TIMESTAMP_RESOLUTION = timedelta(microseconds=1)


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Use this instead of datetime.now() (naive, local time) or
    datetime.utcnow() (naive, deprecated).

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def parse_iso_utc(value: str | None) -> datetime | None:
    """
    Parse an ISO-8601 string into a UTC-aware datetime.

    Accepts the trailing "Z" form written by JavaScript clients as well as
    explicit offsets. Empty values return None.

    Raises:
        ValueError: If the string is not a valid ISO-8601 datetime
    """
    if not value:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return ensure_utc(datetime.fromisoformat(value))


def next_timestamp(previous: datetime | None, now: datetime) -> datetime:
    """Return now, or one resolution step past previous when the clock has not advanced."""
    if previous is not None and now <= previous:
        return previous + TIMESTAMP_RESOLUTION
    return now
