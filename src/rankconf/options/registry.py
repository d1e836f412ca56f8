"""Lookup table from command-line flag spellings to settings fields."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from rankconf.settings.base import SectionSettings

logger: Final = logging.getLogger(__name__)

OptionsMap = Mapping[str, tuple[str, str]]


@dataclass(frozen=True)
class OptionEntry:
    """One settings field and the two flags that set it."""

    field_name: str
    long_flag: str
    short_flag: str


class OptionRegistry:
    """Maps long and short flag spellings to field names.

    Lookups are exact and case-sensitive. Registering a spelling twice
    replaces the earlier entry.

    When built for a schema, section-qualified keys such as
    ``AppSettings:Port`` also resolve to the named field.
    """

    def __init__(self, schema: type[SectionSettings] | None = None) -> None:
        self.schema = schema
        self._by_flag: dict[str, OptionEntry] = {}
        self._entries: dict[str, OptionEntry] = {}

    @classmethod
    def from_map(cls, schema: type[SectionSettings], options: OptionsMap) -> OptionRegistry:
        """Build a registry for ``schema`` from ``{field: (long, short)}``.

        Keys that do not name a field of the schema are skipped.
        """
        registry = cls(schema)
        for name, (long_flag, short_flag) in options.items():
            attr = schema.field_attr(name)
            if attr is None:
                logger.warning("Option %r does not match a field of %s", name, schema.__name__)
                continue
            registry.register(attr, long_flag, short_flag)
        return registry

    def register(self, field_name: str, long_flag: str, short_flag: str) -> None:
        """Register a field under both of its flag spellings."""
        entry = OptionEntry(field_name, long_flag, short_flag)
        self._by_flag[long_flag] = entry
        self._by_flag[short_flag] = entry
        self._entries[field_name] = entry

    def lookup(self, flag: str) -> str | None:
        """Return the field name for a flag spelling (dashes already stripped)."""
        entry = self._by_flag.get(flag)
        if entry is not None:
            return entry.field_name
        return self._lookup_qualified(flag)

    def _lookup_qualified(self, flag: str) -> str | None:
        if self.schema is None or ":" not in flag:
            return None
        section, _, name = flag.partition(":")
        if section != self.schema.section_name():
            return None
        return self.schema.field_attr(name)

    def entries(self) -> list[OptionEntry]:
        """Distinct entries in registration order."""
        return list(self._entries.values())

    def __contains__(self, flag: object) -> bool:
        return isinstance(flag, str) and self.lookup(flag) is not None

    def __len__(self) -> int:
        return len(self._entries)
