"""Settings schemas.

This package provides:
- SectionSettings: base class every resolvable settings schema derives from
- AppSettings: the sample schema driven by the console entry point
"""

from rankconf.settings.app import APP_OPTIONS, AppSettings
from rankconf.settings.base import SectionSettings

__all__ = ["APP_OPTIONS", "AppSettings", "SectionSettings"]
