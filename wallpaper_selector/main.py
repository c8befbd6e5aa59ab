"""Command-line entry point for Wallpaper Selector."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from wallpaper_selector.config import Config, load_config
from wallpaper_selector.coordinates import format_coordinate, validate_coordinate
from wallpaper_selector.errors import ConfigError, ValidationError, WallpaperSelectorError
from wallpaper_selector.local_time import current_local_time, to_local_time
from wallpaper_selector.sun_times import get_sun_times
from wallpaper_selector.time_of_day import determine_time_of_day
from wallpaper_selector.timezone_lookup import get_timezone


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging for stderr; stdout carries only the result."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def select_wallpaper(
    latitude: float,
    longitude: float,
    config: Optional[Config] = None,
    now: Optional[datetime] = None,
) -> str:
    """
    Pick the wallpaper for a coordinate at the current moment.

    Args:
        latitude: Validated latitude
        longitude: Validated longitude
        config: Endpoint and retry settings (defaults if None)
        now: Timezone-aware instant to use instead of the clock

    Returns:
        Wallpaper filename ('' if no rule matched)

    Raises:
        WallpaperSelectorError: If a lookup or a conversion fails
    """
    config = config or Config()
    lat = format_coordinate(latitude)
    lon = format_coordinate(longitude)

    sun_times = get_sun_times(lat, lon, config)
    timezone = get_timezone(lat, lon, config)

    sunrise = to_local_time(sun_times.sunrise, timezone)
    sunset = to_local_time(sun_times.sunset, timezone)
    solar_noon = to_local_time(sun_times.solar_noon, timezone)
    civil_twilight_end = to_local_time(sun_times.civil_twilight_end, timezone)
    current = current_local_time(timezone, now)

    logger.info(f"Current time: {current.strftime('%Y-%m-%d %H:%M:%S %Z')}")
    logger.info(f"Sunrise: {sunrise.strftime('%H:%M:%S')}")
    logger.info(f"Solar noon: {solar_noon.strftime('%H:%M:%S')}")
    logger.info(f"Sunset: {sunset.strftime('%H:%M:%S')}")
    logger.info(f"Civil twilight end: {civil_twilight_end.strftime('%H:%M:%S')}")

    return determine_time_of_day(current, sunrise, sunset, solar_noon, civil_twilight_end)


def cli(argv=None):
    """Command-line interface entry point."""
    parser = _ArgumentParser(
        prog='wallpaper-selector',
        description="Wallpaper Selector - print the wallpaper for the sun's position at a location"
    )
    parser.add_argument('latitude', help='Latitude in degrees (-90 to 90)')
    parser.add_argument('longitude', help='Longitude in degrees (-180 to 180)')
    parser.add_argument(
        '--config', '-c',
        type=Path,
        help='Path to configuration file (default: ~/.config/wallpaper-selector/config.yaml)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        latitude = validate_coordinate(args.latitude, 'latitude')
        longitude = validate_coordinate(args.longitude, 'longitude')
    except ValidationError as e:
        print(f"Input validation error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except ConfigError as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        wallpaper = select_wallpaper(latitude, longitude, config)
    except WallpaperSelectorError as e:
        logger.debug("Wallpaper selection failed", exc_info=True)
        print(f"An error occurred during execution: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        print(f"An error occurred during execution: {e}", file=sys.stderr)
        sys.exit(1)

    print(wallpaper)


if __name__ == '__main__':
    cli()
