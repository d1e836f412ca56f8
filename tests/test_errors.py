from pathlib import Path

from rankconf.store.errors import (
    DocumentError,
    DocumentUnreadableError,
    DocumentWriteError,
    SectionMissingError,
)


def test_document_error_str_and_fields() -> None:
    err = DocumentError(Path("settings.json"), "bad things")
    assert str(err) == "settings.json: bad things"
    assert err.path == Path("settings.json")
    assert err.message == "bad things"
    assert err.original_error is None


def test_unreadable_error_reports_missing_file() -> None:
    try:
        raise FileNotFoundError("gone")
    except FileNotFoundError as e:
        err = DocumentUnreadableError(Path("a.json"), "file not found", e)
    assert err.is_missing is True
    assert DocumentUnreadableError(Path("a.json"), "invalid JSON").is_missing is False


def test_section_missing_error_names_section() -> None:
    err = SectionMissingError(Path("a.json"), "AppSettings")
    assert isinstance(err, DocumentError)
    assert err.section == "AppSettings"
    assert "'AppSettings'" in str(err)


def test_write_error_wraps_exception() -> None:
    try:
        raise PermissionError("read-only")
    except PermissionError as e:
        err = DocumentWriteError(Path("a.json"), "cannot write file", e)
    assert isinstance(err, DocumentError)
    assert isinstance(err.original_error, PermissionError)
