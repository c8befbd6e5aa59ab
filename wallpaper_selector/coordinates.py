"""Latitude/longitude parsing and validation."""

import math
import re
from decimal import Decimal

from wallpaper_selector.errors import InvalidNumber, OutOfRange


# kind -> (minimum, maximum)
COORDINATE_RANGES = {
    'latitude': (-90.0, 90.0),
    'longitude': (-180.0, 180.0),
}

# Plain ASCII decimal, optional exponent; no digit grouping
DECIMAL_PATTERN = re.compile(r'[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?', re.ASCII)


def validate_coordinate(value: str, kind: str) -> float:
    """
    Parse and range-check a coordinate given on the command line.

    Args:
        value: Raw string (e.g. "45.5")
        kind: 'latitude' or 'longitude'

    Returns:
        The parsed number

    Raises:
        InvalidNumber: If the value is not a finite number
        OutOfRange: If the value is outside the range for its kind
    """
    if kind not in COORDINATE_RANGES:
        raise ValueError(f"Unknown coordinate kind: {kind}")

    text = value.strip() if isinstance(value, str) else ''
    if not DECIMAL_PATTERN.fullmatch(text):
        raise InvalidNumber(f'Invalid {kind}: "{value}" is not a number.')

    number = float(text)
    if not math.isfinite(number):
        raise InvalidNumber(f'Invalid {kind}: "{value}" is not a number.')

    low, high = COORDINATE_RANGES[kind]
    if not (low <= number <= high):
        raise OutOfRange(f"Invalid {kind}: {number:g} is out of range ({low:g} to {high:g}).")

    return number


def format_coordinate(value: float) -> str:
    """Render a validated coordinate for a query string ("45", "-33.8688", "0.00001")."""
    if value.is_integer():
        return str(int(value))
    # Shortest round-trip digits, never in exponent form
    return format(Decimal(repr(value)), 'f')
