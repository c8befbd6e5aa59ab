"""Sunrise, sunset, solar noon and civil twilight lookup."""

import logging
from dataclasses import dataclass
from typing import Callable, Optional
from urllib.parse import urlencode

from wallpaper_selector.config import Config
from wallpaper_selector.errors import MissingField, UpstreamError, WallpaperSelectorError
from wallpaper_selector.fetcher import fetch_with_retry


logger = logging.getLogger(__name__)

# Fields read from the service's "results" object
RESULT_FIELDS = ('sunrise', 'sunset', 'solar_noon', 'civil_twilight_end')


@dataclass(frozen=True)
class SunTimes:
    """Sun events for one day as UTC ISO-8601 strings."""

    sunrise: str
    sunset: str
    solar_noon: str
    civil_twilight_end: str


def get_sun_times(
    lat: str,
    lon: str,
    config: Optional[Config] = None,
    fetch: Callable = fetch_with_retry,
) -> SunTimes:
    """
    Fetch today's sun events for a coordinate.

    Timestamps are requested unformatted (formatted=0), which makes the
    service return ISO-8601 in UTC.

    Args:
        lat: Validated latitude, formatted for a query string
        lon: Validated longitude, formatted for a query string
        config: Endpoint and retry settings (defaults if None)
        fetch: fetch_with_retry-compatible callable

    Returns:
        SunTimes

    Raises:
        UpstreamError: If the service can't be reached or returns non-JSON
        MissingField: If the results object or one of its fields is absent
    """
    config = config or Config()
    query = urlencode({'lat': lat, 'lng': lon, 'formatted': 0})
    url = f"{config.sun_times_api_url}?{query}"

    try:
        response = fetch(
            url,
            retries=config.retries,
            delay_ms=config.retry_delay_ms,
            timeout=config.http_timeout,
        )
        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError(f"Sun times service returned invalid JSON: {e}") from e

        results = data.get('results') if isinstance(data, dict) else None
        if not results or not isinstance(results, dict):
            status = data.get('status') if isinstance(data, dict) else None
            suffix = f" (status: {status})" if status else ""
            raise MissingField(f"Sun times not found in API response.{suffix}")

        missing = [field for field in RESULT_FIELDS if not results.get(field)]
        if missing:
            raise MissingField(f"Sun times response is missing: {', '.join(missing)}")
    except WallpaperSelectorError as e:
        logger.error(f"Error fetching sun times for ({lat}, {lon}): {e}")
        raise

    sun_times = SunTimes(**{field: results[field] for field in RESULT_FIELDS})
    logger.debug(f"Sun times for ({lat}, {lon}): {sun_times}")
    return sun_times
