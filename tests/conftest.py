import json
from pathlib import Path
from typing import ClassVar

import pytest
from pydantic import Field

from rankconf.settings import SectionSettings


class ServerSettings(SectionSettings):
    SECTION_NAME: ClassVar[str] = "AppSettings"

    folder: str = Field("C:\\Default", alias="Folder")
    port: int = Field(9999, alias="Port")
    verbose: bool = Field(False, alias="Verbose")


SERVER_OPTIONS = {
    "folder": ("folder", "f"),
    "port": ("port", "p"),
    "verbose": ("verbose", "v"),
}

SAMPLE_DOCUMENT = '{"AppSettings":{"Folder":"C:\\\\Old","Port":8080},"Other":{"X":1}}'


@pytest.fixture
def document(tmp_path: Path) -> Path:
    """A settings document holding the AppSettings section and one unrelated section."""
    path = tmp_path / "appsettings.json"
    path.write_text(SAMPLE_DOCUMENT)
    return path


def read_json(path: Path) -> dict:
    return json.loads(path.read_text())
