"""Timezone lookup for a coordinate."""

import logging
from typing import Callable, Optional
from urllib.parse import urlencode

from wallpaper_selector.config import Config
from wallpaper_selector.errors import MissingField, UpstreamError, WallpaperSelectorError
from wallpaper_selector.fetcher import fetch_with_retry


logger = logging.getLogger(__name__)


def get_timezone(
    lat: str,
    lon: str,
    config: Optional[Config] = None,
    fetch: Callable = fetch_with_retry,
) -> str:
    """
    Look up the IANA timezone name for a coordinate.

    Args:
        lat: Validated latitude, formatted for a query string
        lon: Validated longitude, formatted for a query string
        config: Endpoint and retry settings (defaults if None)
        fetch: fetch_with_retry-compatible callable

    Returns:
        Timezone name (e.g. 'America/New_York')

    Raises:
        UpstreamError: If the service can't be reached or returns non-JSON
        MissingField: If the response has no timeZone field
    """
    config = config or Config()
    url = f"{config.timezone_api_url}?{urlencode({'latitude': lat, 'longitude': lon})}"

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
            raise UpstreamError(f"Timezone service returned invalid JSON: {e}") from e

        timezone = data.get('timeZone') if isinstance(data, dict) else None
        if not timezone:
            raise MissingField("Timezone not found in API response.")
    except WallpaperSelectorError as e:
        logger.error(f"Error fetching timezone for ({lat}, {lon}): {e}")
        raise

    logger.debug(f"Timezone for ({lat}, {lon}): {timezone}")
    return timezone
