"""Settings and logging setup."""

from config.log import LOGGER_NAME, StructuredFormatter, configure_logging
from config.settings import Settings, load_settings

__all__ = [
    "LOGGER_NAME",
    "Settings",
    "StructuredFormatter",
    "configure_logging",
    "load_settings",
]
