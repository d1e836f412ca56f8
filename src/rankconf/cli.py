"""rankconf command-line interface.

Resolves the sample ``AppSettings`` schema from the command line, a stored
settings document and the defaults, and inspects stored sections.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final

import typer
import yaml
from dotenv import load_dotenv

from rankconf.processor import STOP, ConfigurationProcessor
from rankconf.settings import APP_OPTIONS, AppSettings
from rankconf.store import DocumentError, open_store

# Load environment variables from .env file(s)
load_dotenv()

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Ranked settings resolution CLI", add_completion=False)

logger: Final = logging.getLogger(__name__)  # Will be "rankconf.cli"

DEFAULT_DOCUMENT: Final = Path("appsettings.json")

DOCUMENT_OPTION = typer.Option(
    DEFAULT_DOCUMENT,
    "--document",
    envvar="RANKCONF_DOCUMENT",
    dir_okay=False,
    help="Settings document (.json, or .yaml/.yml)",
)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
NO_SAVE_OPTION = typer.Option(False, "--no-save", help="Do not write the result back")
SECTION_OPTION = typer.Option(AppSettings.section_name(), "--section", help="Section to print")


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def run(
    ctx: typer.Context,
    document: Path = DOCUMENT_OPTION,
    no_save: bool = NO_SAVE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Resolve AppSettings and print the result.

    Settings arguments follow a ``--`` separator, e.g.
    ``rankconf run -- --port 9090`` or ``rankconf run -- --help``.
    """
    configure_logging(debug)
    args = list(ctx.args)
    if args:
        logger.info("Command line arguments detected: %s", " ".join(args))

    processor = ConfigurationProcessor(document, AppSettings, APP_OPTIONS)
    settings = processor.process(args, save=not no_save)
    if settings is STOP:
        return

    typer.echo("Final Application Settings:")
    typer.echo(str(settings))
    if processor.last_write_error is not None:
        typer.secho(
            f"Settings not saved: {processor.last_write_error}", fg=typer.colors.RED, err=True
        )
        raise typer.Exit(code=1)


@app.command()
def show(
    document: Path = DOCUMENT_OPTION,
    section: str = SECTION_OPTION,
) -> None:
    """Print one stored section as YAML."""
    try:
        values = open_store(document).read_section(section)
    except DocumentError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    text = yaml.safe_dump({section: dict(values)}, sort_keys=False, allow_unicode=True)
    typer.echo(text, nl=False)


# ───────────────────────── module entrypoint ────────────────────────────────
def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    main()
