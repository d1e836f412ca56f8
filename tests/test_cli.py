from pathlib import Path

from typer.testing import CliRunner

from rankconf.cli import app
from tests.conftest import read_json

runner = CliRunner()


def test_run_applies_command_line_and_saves(document: Path) -> None:
    result = runner.invoke(app, ["run", "--document", str(document), "--", "--port", "9090"])

    assert result.exit_code == 0, result.output
    assert "Folder: C:\\Old, Port: 9090" in result.output
    assert read_json(document)["AppSettings"] == {"Folder": "C:\\Old", "Port": 9090}
    assert read_json(document)["Other"] == {"X": 1}


def test_run_help_prints_catalogue_only(document: Path) -> None:
    before = document.read_text()
    result = runner.invoke(app, ["run", "--document", str(document), "--", "-h"])

    assert result.exit_code == 0
    assert "-f, --folder <value> : Set folder" in result.output
    assert "Final Application Settings" not in result.output
    assert document.read_text() == before


def test_run_no_save(document: Path) -> None:
    before = document.read_text()
    result = runner.invoke(app, ["run", "--document", str(document), "--no-save", "--", "-p=1"])
    assert result.exit_code == 0
    assert "Port: 1" in result.output
    assert document.read_text() == before


def test_run_document_from_environment(tmp_path: Path) -> None:
    path = tmp_path / "env.json"
    result = runner.invoke(app, ["run", "--", "--reset"], env={"RANKCONF_DOCUMENT": str(path)})
    assert result.exit_code == 0
    assert read_json(path) == {"AppSettings": {"Folder": "C:\\temp\\BaseSettings", "Port": 1000}}


def test_show_prints_section_as_yaml(document: Path) -> None:
    result = runner.invoke(app, ["show", "--document", str(document), "--section", "Other"])
    assert result.exit_code == 0
    assert result.output == "Other:\n  X: 1\n"


def test_show_missing_section_fails(document: Path) -> None:
    result = runner.invoke(app, ["show", "--document", str(document), "--section", "Nope"])
    assert result.exit_code == 1
