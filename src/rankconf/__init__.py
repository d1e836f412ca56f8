"""Resolve settings from defaults, a stored document and the command line."""

__version__ = "0.1.0"

from .processor import STOP, ConfigurationProcessor, Stop, format_help
from .settings import AppSettings, SectionSettings

__all__ = [
    "STOP",
    "AppSettings",
    "ConfigurationProcessor",
    "SectionSettings",
    "Stop",
    "format_help",
]
