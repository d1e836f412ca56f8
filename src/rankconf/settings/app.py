"""Sample settings schema used by the ``rankconf`` console entry point."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from rankconf.settings.base import SectionSettings

# Option spellings for AppSettings: attribute name -> (long flag, short flag)
APP_OPTIONS: dict[str, tuple[str, str]] = {
    "folder": ("folder", "f"),
    "port": ("port", "p"),
}


class AppSettings(SectionSettings):
    """Working folder and listening port of a small console application."""

    SECTION_NAME: ClassVar[str] = "AppSettings"

    folder: str = Field(r"C:\temp\BaseSettings", alias="Folder", description="Working folder")
    port: int = Field(1000, ge=0, le=65535, alias="Port", description="Listening port")
