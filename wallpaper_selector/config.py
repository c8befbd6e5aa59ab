"""Configuration loading and validation."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from wallpaper_selector.errors import ConfigError
from wallpaper_selector.fetcher import DEFAULT_RETRIES, RETRY_DELAY_MS

logger = logging.getLogger(__name__)

TIMEZONE_API_URL = "https://www.timeapi.io/api/timezone/coordinate"
SUN_TIMES_API_URL = "https://api.sunrise-sunset.org/json"


@dataclass
class Config:
    """Wallpaper Selector configuration."""

    timezone_api_url: str = TIMEZONE_API_URL
    sun_times_api_url: str = SUN_TIMES_API_URL
    retries: int = DEFAULT_RETRIES
    retry_delay_ms: int = RETRY_DELAY_MS
    http_timeout: Optional[float] = None

    @classmethod
    def load(cls, config_path: Path) -> "Config":
        """
        Load and validate configuration from YAML file.

        Every key is optional; anything left out keeps its default.

        Args:
            config_path: Path to configuration file

        Returns:
            Config instance

        Raises:
            ConfigError: If configuration is invalid
            FileNotFoundError: If config file doesn't exist
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Could not parse {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Could not read {config_path}: {e}") from e

        if not data:
            logger.debug(f"Configuration file is empty, using defaults: {config_path}")
            return cls()
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a mapping")

        api = data.get('api') or {}
        settings = data.get('settings') or {}
        for key, section in (('api', api), ('settings', settings)):
            if not isinstance(section, dict):
                raise ConfigError(f"{key} must be a mapping, got: {section!r}")

        timezone_api_url = api.get('timezone_url', TIMEZONE_API_URL)
        sun_times_api_url = api.get('sun_times_url', SUN_TIMES_API_URL)
        for key, url in (('api.timezone_url', timezone_api_url),
                         ('api.sun_times_url', sun_times_api_url)):
            if not isinstance(url, str) or not url.startswith(('http://', 'https://')):
                raise ConfigError(f"{key} must be an http(s) URL, got: {url!r}")

        retries = settings.get('retries', DEFAULT_RETRIES)
        if isinstance(retries, bool) or not isinstance(retries, int) or retries < 1:
            raise ConfigError(f"settings.retries must be an integer >= 1, got: {retries!r}")

        retry_delay_ms = settings.get('retry_delay_ms', RETRY_DELAY_MS)
        if isinstance(retry_delay_ms, bool) or not isinstance(retry_delay_ms, int) or retry_delay_ms < 0:
            raise ConfigError(
                f"settings.retry_delay_ms must be an integer >= 0, got: {retry_delay_ms!r}"
            )

        http_timeout = settings.get('http_timeout')
        if http_timeout is not None:
            if isinstance(http_timeout, bool) or not isinstance(http_timeout, (int, float)) \
                    or http_timeout <= 0:
                raise ConfigError(
                    f"settings.http_timeout must be a positive number of seconds, got: {http_timeout!r}"
                )
            http_timeout = float(http_timeout)

        return cls(
            timezone_api_url=timezone_api_url,
            sun_times_api_url=sun_times_api_url,
            retries=retries,
            retry_delay_ms=retry_delay_ms,
            http_timeout=http_timeout,
        )


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    xdg_config_home = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
    return Path(xdg_config_home) / 'wallpaper-selector' / 'config.yaml'


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load the configuration for a run.

    An explicitly given path must exist. The default path is optional and
    built-in defaults are used when it is absent.

    Args:
        config_path: Path from --config, or None for the default location

    Returns:
        Config instance
    """
    if config_path is not None:
        return Config.load(config_path)

    default_path = get_default_config_path()
    if default_path.exists():
        logger.debug(f"Loading configuration from {default_path}")
        return Config.load(default_path)

    logger.debug("No configuration file found, using defaults")
    return Config()
