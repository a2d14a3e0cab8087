"""Date and time utility functions."""

from collections.abc import Iterable
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from calorie_api.core.exceptions import ValidationError
from calorie_api.models.calorie_intake import CalorieEntry

UTC_TZ = timezone.utc


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC_TZ)


def get_zone(name: str) -> ZoneInfo:
    """
    Resolve an IANA timezone name.

    Raises:
        ValueError: If the name is unknown
    """
    try:
        return ZoneInfo(name)
    except ZoneInfoNotFoundError as e:
        raise ValueError(f"Unknown timezone: {name}") from e


def as_utc(dt: datetime) -> datetime:
    """Attach UTC to naive datetimes (as stored by Mongo) and convert aware ones."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC_TZ)
    return dt.astimezone(UTC_TZ)


def parse_date(value: str, tz: ZoneInfo) -> datetime:
    """
    Parse a request date into an aware UTC datetime.

    A bare date ("2024-01-01") means midnight in the local timezone `tz`;
    a datetime without an offset is also read in `tz`.

    Raises:
        ValidationError: If the value is not an ISO 8601 date or datetime
    """
    text = value.strip()
    try:
        if len(text) == 10:
            day = date.fromisoformat(text)
            return datetime(day.year, day.month, day.day, tzinfo=tz).astimezone(UTC_TZ)
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        raise ValidationError("Invalid date", details={"date": value})

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz)
    return parsed.astimezone(UTC_TZ)


def local_day(dt: datetime, tz: ZoneInfo) -> date:
    """Calendar day of a datetime in the local timezone."""
    return as_utc(dt).astimezone(tz).date()


def filter_entries_by_date(
    entries: Iterable[CalorieEntry],
    target: datetime,
    tz: ZoneInfo,
) -> list[CalorieEntry]:
    """Keep entries on the same local calendar day as `target`."""
    target_day = local_day(target, tz)
    return [entry for entry in entries if local_day(entry.date, tz) == target_day]


def filter_entries_since(
    entries: Iterable[CalorieEntry],
    days: int,
    now: datetime,
) -> list[CalorieEntry]:
    """Keep entries dated on or after `now - days`."""
    cutoff = as_utc(now) - timedelta(days=days)
    return [entry for entry in entries if as_utc(entry.date) >= cutoff]
