"""Utilities package for parcel-tracker application."""

from .config import Config, get_config, reset_config
from .datetime_utils import format_created_at, parse_created_at, utc_now

__all__ = [
    "Config",
    "get_config",
    "reset_config",
    "format_created_at",
    "parse_created_at",
    "utc_now",
]
