"""Wallpaper Selector - pick a wallpaper from the position of the sun."""

__version__ = "1.0.0"
