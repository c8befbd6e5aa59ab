"""Conversion of UTC instants into a location's local time."""

import logging
from datetime import datetime
from typing import Optional

import pytz

from wallpaper_selector.errors import ConversionError


logger = logging.getLogger(__name__)


def _get_zone(timezone: str):
    try:
        return pytz.timezone(timezone)
    except pytz.UnknownTimeZoneError as e:
        raise ConversionError(f"Unknown timezone: {timezone}") from e


def to_local_time(utc_iso: str, timezone: str) -> datetime:
    """
    Convert a UTC ISO-8601 timestamp into local time for a zone.

    The UTC offset applied is the one in force at that instant, so
    daylight saving is handled by the Olson database rather than by a
    fixed offset.

    Args:
        utc_iso: Timestamp such as '2024-06-01T10:05:35+00:00' or '...Z'
        timezone: IANA timezone name

    Returns:
        Timezone-aware datetime in the given zone

    Raises:
        ConversionError: If the timestamp or the timezone is malformed
    """
    zone = _get_zone(timezone)

    try:
        text = utc_iso.strip()
        if text.endswith(('Z', 'z')):
            text = text[:-1] + '+00:00'
        instant = datetime.fromisoformat(text)
    except (AttributeError, TypeError, ValueError) as e:
        raise ConversionError(f"Invalid timestamp: {utc_iso!r}") from e

    if instant.tzinfo is None:
        instant = pytz.utc.localize(instant)

    return instant.astimezone(zone)


def current_local_time(timezone: str, now: Optional[datetime] = None) -> datetime:
    """
    Current time in a zone, truncated to whole seconds.

    Upstream timestamps carry second precision, so truncating lets "now"
    land exactly on a sun event.

    Args:
        timezone: IANA timezone name
        now: Timezone-aware instant to use instead of the clock

    Returns:
        Timezone-aware datetime in the given zone
    """
    zone = _get_zone(timezone)
    if now is None:
        now = datetime.now(pytz.utc)
    elif now.tzinfo is None:
        raise ConversionError("Current time must be timezone-aware")

    return now.astimezone(zone).replace(microsecond=0)
