import pytest
from pydantic import ValidationError

from rankconf.settings import AppSettings
from tests.conftest import ServerSettings


def test_section_name_from_class_variable() -> None:
    assert ServerSettings.section_name() == "AppSettings"


def test_section_name_falls_back_to_class_name() -> None:
    from rankconf.settings import SectionSettings

    class MailSettings(SectionSettings):
        host: str = "localhost"

    assert MailSettings.section_name() == "MailSettings"


def test_serialize_uses_aliases() -> None:
    assert ServerSettings().serialize() == {"Folder": "C:\\Default", "Port": 9999, "Verbose": False}


def test_field_key_and_attr_accept_both_spellings() -> None:
    assert ServerSettings.field_key("port") == "Port"
    assert ServerSettings.field_key("Port") == "Port"
    assert ServerSettings.field_attr("Folder") == "folder"
    assert ServerSettings.field_attr("missing") is None


def test_merged_coerces_strings_and_ignores_unknown_keys() -> None:
    settings = ServerSettings().merged({"port": "9090", "Verbose": "true", "Nope": 1})
    assert settings.port == 9090
    assert settings.verbose is True
    assert settings.folder == "C:\\Default"


def test_merged_rejects_invalid_value() -> None:
    with pytest.raises(ValidationError):
        ServerSettings().merged({"port": "not-a-port"})


def test_str_lists_document_keys() -> None:
    assert str(ServerSettings(port=1)) == "Folder: C:\\Default, Port: 1, Verbose: False"


def test_app_settings_port_range() -> None:
    with pytest.raises(ValidationError):
        AppSettings(port=70000)
    assert AppSettings.defaults().port == 1000
