"""
Bridging between calendar dates and instant-based date values.

The rest of the package works on ``datetime.date`` only. Values that denote
an instant (``datetime.datetime`` objects and POSIX timestamps) are reduced to
the calendar date they fall on in a given zone, defaulting to the system's
local zone.
"""

from datetime import date, datetime, time, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

Instant = Union[datetime, int, float]


def _zone(zone: Optional[str]) -> Optional[tzinfo]:
    if zone is None:
        return None
    try:
        return ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown time zone: {zone!r}") from e


def to_calendar_date(value: Instant, zone: Optional[str] = None) -> date:
    """
    Calendar date of an instant in ``zone``.

    Naive datetimes are taken to be in the system's local zone.

    Args:
        value: Datetime or POSIX timestamp.
        zone: IANA zone identifier (e.g. "America/New_York"). None means the
            system's local zone.

    Returns:
        The date the instant falls on in that zone.
    """
    if value is None:
        raise TypeError("Date must not be None")
    tz = _zone(zone)
    if isinstance(value, datetime):
        return value.astimezone(tz).date()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz).date()
    raise TypeError(f"Cannot convert {type(value).__name__} to a calendar date")


def to_legacy_datetime(value: date, zone: Optional[str] = None) -> datetime:
    """Timezone-aware datetime at the start of ``value`` in ``zone``."""
    midnight = datetime.combine(value, time())
    tz = _zone(zone)
    if tz is None:
        return midnight.astimezone()
    return midnight.replace(tzinfo=tz)


def to_timestamp(value: date, zone: Optional[str] = None) -> float:
    """POSIX timestamp of the start of ``value`` in ``zone``."""
    return to_legacy_datetime(value, zone).timestamp()


def as_calendar_date(value: Union[date, datetime], label: str = "Date") -> date:
    """
    Coerce an argument to a plain ``date``.

    Datetimes are converted in the local zone through ``to_calendar_date``.

    Raises:
        TypeError: If the value is None or not a date.
    """
    if value is None:
        raise TypeError(f"{label} must not be None")
    if isinstance(value, datetime):
        return to_calendar_date(value)
    if isinstance(value, date):
        return value
    raise TypeError(f"{label} must be a date, got {type(value).__name__}")
