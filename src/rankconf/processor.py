"""Precedence resolution of settings from defaults, a document and the command line.

Sources, highest precedence first:

1. Command-line arguments
2. In-app settings (when supplied) or the stored settings document
3. Schema defaults

``-h``/``--help`` prints the option catalogue and yields ``STOP``;
``-r``/``--reset`` restores and saves the schema defaults; ``-i``/``--ignore``
skips the stored document for this run and leaves it untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from enum import Enum
from pathlib import Path
from typing import Final, Generic, Literal, TypeVar

import typer
from pydantic import ValidationError

from rankconf.options import (
    HELP_FLAGS,
    IGNORE_FLAGS,
    RESET_FLAGS,
    OptionRegistry,
    OptionsMap,
    ParsedArguments,
    tokenize,
)
from rankconf.settings.base import SectionSettings
from rankconf.store import (
    DocumentError,
    DocumentWriteError,
    DocumentStore,
    SectionMissingError,
    open_store,
)

logger: Final = logging.getLogger(__name__)

S = TypeVar("S", bound=SectionSettings)


class Stop(Enum):
    """Result telling the caller not to carry on (help was shown)."""

    STOP = "stop"


STOP: Final = Stop.STOP


def format_help(registry: OptionRegistry) -> str:
    """Build the option catalogue shown for ``--help``."""
    lines = [
        "",
        "Command Line Options:",
        f"  {', '.join(HELP_FLAGS)}     : Display this help information",
        f"  {', '.join(RESET_FLAGS)}    : Reset all settings to default values",
        f"  {', '.join(IGNORE_FLAGS)}   : "
        "Ignore stored settings and use in-app or default settings",
        "",
        "Registered Configuration Options:",
    ]
    for entry in registry.entries():
        lines.append(
            f"  -{entry.short_flag}, --{entry.long_flag} <value> : Set {entry.field_name}"
        )
    lines += [
        "",
        "Configuration Precedence:",
        "1. Command line arguments (highest priority)",
        "2. In-app settings (if provided and not ignoring stored settings)",
        "3. Stored settings document (if not ignoring stored settings)",
        "4. Default values (lowest priority)",
        "",
    ]
    return "\n".join(lines)


class ConfigurationProcessor(Generic[S]):
    """Resolve one settings section against one argument vector.

    Examples:
        processor = ConfigurationProcessor(
            "appsettings.json", AppSettings, {"folder": ("folder", "f")}
        )
        settings = processor.process(sys.argv[1:])
        if settings is STOP:
            return
    """

    def __init__(
        self,
        document_path: Path | str,
        settings_type: type[S],
        options: OptionsMap,
        defaults: S | None = None,
        echo: Callable[[str], object] = typer.echo,
    ) -> None:
        """Initialize the processor.

        Args:
            document_path: Settings document (JSON, or YAML by suffix)
            settings_type: Schema class to resolve
            options: Field name to (long flag, short flag)
            defaults: In-app settings used in place of the schema defaults
            echo: Output function for the help catalogue
        """
        self.settings_type = settings_type
        self.store: DocumentStore = open_store(document_path)
        self.registry = OptionRegistry.from_map(settings_type, options)
        self.in_app_defaults = defaults
        self.echo = echo
        self.last_write_error: DocumentWriteError | None = None
        self._settings: S = self._baseline()

    @property
    def settings(self) -> S:
        """Most recently resolved settings."""
        return self._settings

    @property
    def section_name(self) -> str:
        return self.settings_type.section_name()

    # ---- resolution ----
    def process(self, args: Sequence[str] | None, save: bool = True) -> S | Literal[Stop.STOP]:
        """Resolve the settings and (normally) save them back to the document.

        Args:
            args: Command-line arguments without the program name. ``None``
                and an empty sequence mean the same thing.
            save: Write the result to the document (ignored with ``--ignore``)

        Returns:
            The resolved settings, or ``STOP`` if help was requested
        """
        self.last_write_error = None
        parsed = ParsedArguments()
        command_line: S | None = None

        if args:
            parsed = tokenize(args, self.registry)
            if parsed.ignored:
                logger.debug("Ignoring unrecognized arguments: %s", " ".join(parsed.ignored))

            if parsed.help_requested:
                self.echo(self.help_text())
                return STOP

            if parsed.reset_requested:
                logger.info("Resetting to default settings")
                self._settings = self.settings_type.defaults()
                if save:
                    self._save()
                    if self.last_write_error is None:
                        logger.info("Default settings saved to %s", self.store.path)
                return self._settings

            command_line = self._bind(self._baseline(), parsed)

        if parsed.ignore_requested:
            settings = self._baseline()
            source = "in-app" if self.in_app_defaults is not None else "default"
            logger.info("Ignoring stored settings, using %s settings", source)
        elif not args or parsed.has_assignments:
            settings = self._load()
        else:
            # Arguments were given but none set a field: the document is not consulted
            settings = self._baseline()

        if command_line is not None:
            settings = self._apply_overrides(settings, command_line)

        self._settings = settings
        if save and not parsed.ignore_requested:
            self._save()
        return settings

    def help_text(self) -> str:
        return format_help(self.registry)

    def _baseline(self) -> S:
        if self.in_app_defaults is not None:
            return self.in_app_defaults.model_copy(deep=True)
        return self.settings_type.defaults()

    def _bind(self, settings: S, parsed: ParsedArguments) -> S:
        """Apply each command-line assignment, dropping values that do not validate."""
        for name, raw in parsed.assignments.items():
            try:
                settings = settings.merged({name: raw})
            except ValidationError as err:
                reason = err.errors()[0]["msg"]
                logger.warning("Ignoring invalid value %r for %s: %s", raw, name, reason)
        if parsed.has_assignments:
            logger.info("Using command line settings")
        return settings

    def _load(self) -> S:
        """Lay the stored section over the baseline, falling back on any failure."""
        baseline = self._baseline()
        try:
            section = self.store.read_section(self.section_name)
            settings = baseline.merged(section)
        except SectionMissingError as exc:
            logger.info("No stored settings found (%s)", exc)
        except DocumentError as exc:
            logger.warning("Could not load stored settings: %s", exc)
        except ValidationError as err:
            logger.warning("Stored settings in %s are invalid:\n%s", self.store.path, err)
        else:
            logger.info("Using stored settings")
            return settings

        source = "in-app" if self.in_app_defaults is not None else "default"
        logger.info("Using %s settings", source)
        return baseline

    def _apply_overrides(self, settings: S, command_line: S) -> S:
        """Copy every command-line value that differs from the schema default.

        A value equal to the default cannot be told apart from one that was
        never given, so it does not override. In-app values that differ from
        the schema default count as given.
        """
        fresh = self.settings_type.defaults()
        overrides = {
            name: getattr(command_line, name)
            for name in self.settings_type.field_names()
            if getattr(command_line, name) != getattr(fresh, name)
        }
        if overrides:
            logger.info("Applied command line settings with highest precedence")
            return settings.model_copy(update=overrides)
        return settings

    def _save(self) -> None:
        try:
            self.store.write_section(self.section_name, self._settings.serialize())
        except DocumentWriteError as exc:
            self.last_write_error = exc
            logger.error("Error saving settings: %s", exc)
