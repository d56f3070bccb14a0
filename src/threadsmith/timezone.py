"""Timezone conversion for scheduling posts.

All instants are handled as UTC. The user's configured zone is only used
to interpret input and to display times back.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from threadsmith.errors import InvalidDateError, InvalidTimeError, InvalidTimezoneError

DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
TIME_PATTERN = re.compile(r"\d{2}:\d{2}", re.ASCII)


@dataclass(frozen=True)
class LocalTime:
    """A UTC instant rendered in a zone.

    Attributes:
        date: Local date (YYYY-MM-DD)
        time: Local time (HH:MM, 24-hour)
        display: "date time abbreviation", e.g. "2025-03-10 09:30 EDT"
    """

    date: str
    time: str
    display: str


def _get_zone(zone: str) -> ZoneInfo:
    if not zone:
        raise InvalidTimezoneError(zone)
    try:
        return ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise InvalidTimezoneError(zone) from e


def is_valid_timezone(zone: str) -> bool:
    """Check if a string is a valid IANA timezone identifier."""
    try:
        _get_zone(zone)
    except InvalidTimezoneError:
        return False
    return True


def to_utc(date: str, time: str, zone: str) -> datetime:
    """Convert a local date/time in a zone to a UTC instant.

    Times that are skipped or repeated by a DST transition resolve to the
    earlier offset (fold=0).

    Args:
        date: Date string in YYYY-MM-DD format
        time: Time string in HH:MM format
        zone: IANA timezone (e.g., "America/New_York")

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        InvalidTimezoneError: If zone is not a known IANA zone
        InvalidDateError: If date is malformed or not a real date
        InvalidTimeError: If time is malformed or out of range
    """
    tz = _get_zone(zone)

    if not DATE_PATTERN.fullmatch(date):
        raise InvalidDateError(date)
    if not TIME_PATTERN.fullmatch(time):
        raise InvalidTimeError(time)

    hours, minutes = (int(part) for part in time.split(":"))
    if hours > 23 or minutes > 59:
        raise InvalidTimeError(time)

    year, month, day = (int(part) for part in date.split("-"))
    try:
        local = datetime(year, month, day, hours, minutes, tzinfo=tz)
    except ValueError as e:
        raise InvalidDateError(date) from e

    return local.astimezone(UTC)


def from_utc(instant: datetime, zone: str) -> LocalTime:
    """Render a UTC instant as local date/time in a zone.

    Args:
        instant: Instant to convert; naive values are taken as UTC
        zone: IANA timezone string

    Returns:
        LocalTime with date, time, and display string

    Raises:
        InvalidTimezoneError: If zone is not a known IANA zone
    """
    tz = _get_zone(zone)
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)

    local = instant.astimezone(tz)
    date = local.strftime("%Y-%m-%d")
    time = local.strftime("%H:%M")
    return LocalTime(date=date, time=time, display=f"{date} {time} {local.tzname()}")
