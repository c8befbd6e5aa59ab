"""Exception hierarchy for Wallpaper Selector."""


class WallpaperSelectorError(Exception):
    """Base class for all errors raised by this package."""


class ValidationError(WallpaperSelectorError, ValueError):
    """User input could not be accepted."""


class InvalidNumber(ValidationError):
    """A coordinate string is not a finite number."""


class OutOfRange(ValidationError):
    """A coordinate is outside its valid range."""


class ConfigError(WallpaperSelectorError, ValueError):
    """Configuration file is unreadable or holds invalid values."""


class UpstreamError(WallpaperSelectorError):
    """A lookup service could not be reached or returned garbage."""


class FetchExhausted(UpstreamError):
    """Every fetch attempt failed."""

    def __init__(self, url: str, attempts: int, last_error: BaseException):
        super().__init__(f"Failed to fetch {url} after {attempts} attempts: {last_error}")
        self.url = url
        self.attempts = attempts
        self.last_error = last_error


class MissingField(WallpaperSelectorError):
    """A lookup service response lacks a required field."""


class ConversionError(WallpaperSelectorError):
    """A timestamp could not be placed in a timezone."""
