"""Wallpaper names and the time-of-day decision."""

from datetime import datetime
from enum import Enum


class Wallpaper(Enum):
    """Wallpaper filenames, one per part of the day."""

    SUNRISE = "sunrise.png"
    SUNSET = "sunset.png"
    MORNING = "morning.png"
    NOON = "noon.png"
    EVENING = "evening.png"
    NIGHT = "night.png"


def determine_time_of_day(
    current: datetime,
    sunrise: datetime,
    sunset: datetime,
    solar_noon: datetime,
    civil_twilight_end: datetime,
) -> str:
    """
    Pick the wallpaper for the current moment.

    Expects sunrise <= solar_noon <= sunset <= civil_twilight_end but does
    not check it. When the events are out of order, or the current time
    falls exactly on solar noon, no rule matches and an empty string is
    returned.

    Args:
        current: Current local time
        sunrise: Sunrise
        sunset: Sunset
        solar_noon: Solar noon
        civil_twilight_end: End of civil twilight

    Returns:
        Wallpaper filename, or '' if no rule matched
    """
    # First match wins
    if current == sunrise:
        return Wallpaper.SUNRISE.value
    if current == sunset:
        return Wallpaper.SUNSET.value
    if sunrise < current < solar_noon:
        return Wallpaper.MORNING.value
    if solar_noon < current < sunset:
        return Wallpaper.NOON.value
    if sunset < current <= civil_twilight_end:
        return Wallpaper.EVENING.value
    if current > civil_twilight_end or current < sunrise:
        return Wallpaper.NIGHT.value
    return ''
