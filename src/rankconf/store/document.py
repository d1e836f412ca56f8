"""Read-modify-write access to one section of a settings document.

A document is an ordered mapping of top-level section name to value. Stores
replace a single section and carry every other section through untouched.
"""

from __future__ import annotations

import json
import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final, Protocol, runtime_checkable

import yaml

from rankconf.store.errors import (
    DocumentUnreadableError,
    DocumentWriteError,
    SectionMissingError,
)

logger: Final = logging.getLogger(__name__)

YAML_SUFFIXES: Final = (".yaml", ".yml")


@runtime_checkable
class DocumentStore(Protocol):
    """Protocol for a file holding named settings sections."""

    path: Path

    def read(self) -> dict[str, Any]:
        """Return the whole document as an ordered mapping.

        Raises:
            DocumentUnreadableError: If the file is missing or malformed
        """
        ...

    def read_section(self, name: str) -> Mapping[str, Any]:
        """Return the field map stored under ``name``.

        Raises:
            DocumentUnreadableError: If the file is missing or malformed
            SectionMissingError: If the section is absent
        """
        ...

    def write_section(self, name: str, values: Mapping[str, Any]) -> bool:
        """Replace (or append) section ``name`` and write the document back.

        Returns:
            True if the document was written, False if the existing document
            was unreadable and left alone

        Raises:
            DocumentWriteError: If writing the file failed
        """
        ...


class FileDocumentStore(ABC):
    """Shared read/write logic; subclasses supply the format."""

    format_name = "document"

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    # ---- format hooks ----
    @abstractmethod
    def _parse(self, text: str) -> dict[str, Any]:
        """Parse the whole document into an ordered mapping."""

    @abstractmethod
    def _replace_section(
        self, text: str | None, name: str, values: Mapping[str, Any]
    ) -> str:
        """Return the document text with section ``name`` set to ``values``."""

    # ---- public API ----
    def _read_text(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise DocumentUnreadableError(self.path, "file not found", exc) from exc
        except OSError as exc:
            raise DocumentUnreadableError(self.path, f"cannot read file: {exc}", exc) from exc
        except UnicodeDecodeError as exc:
            raise DocumentUnreadableError(self.path, f"cannot decode file: {exc}", exc) from exc

    def read(self) -> dict[str, Any]:
        return self._parse(self._read_text())

    def read_section(self, name: str) -> Mapping[str, Any]:
        document = self.read()
        if name not in document:
            raise SectionMissingError(self.path, name)
        section = document[name]
        if not isinstance(section, dict):
            raise DocumentUnreadableError(self.path, f"section {name!r} is not a mapping")
        return section

    def write_section(self, name: str, values: Mapping[str, Any]) -> bool:
        try:
            text: str | None = self._read_text()
        except DocumentUnreadableError as exc:
            if not exc.is_missing:
                logger.error(
                    "Not saving settings, existing %s is unreadable: %s", self.format_name, exc
                )
                return False
            text = None

        try:
            updated = self._replace_section(text, name, values)
        except DocumentUnreadableError as exc:
            logger.error(
                "Not saving settings, existing %s is malformed: %s", self.format_name, exc
            )
            return False

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(updated, encoding="utf-8")
        except OSError as exc:
            raise DocumentWriteError(self.path, f"cannot write file: {exc}", exc) from exc

        logger.debug("Wrote section %s to %s", name, self.path)
        return True


# ── JSON ────────────────────────────────────────────────────────────────────
_DECODER: Final = json.JSONDecoder()
_WHITESPACE: Final = re.compile(r"[ \t\n\r]*")


def _skip_ws(text: str, pos: int) -> int:
    return _WHITESPACE.match(text, pos).end()  # type: ignore[union-attr]


def split_sections(text: str) -> dict[str, str]:
    """Split a JSON object into top-level key -> raw value source text.

    The raw text of each value is returned exactly as it appears in the
    document, so it can be written back byte for byte.

    Raises:
        ValueError: If ``text`` is not a single JSON object
    """
    pos = _skip_ws(text, 0)
    if not text.startswith("{", pos):
        raise ValueError("document root is not a JSON object")
    pos = _skip_ws(text, pos + 1)
    sections: dict[str, str] = {}

    if text.startswith("}", pos):
        pos += 1
    else:
        while True:
            key, pos = _DECODER.raw_decode(text, pos)
            if not isinstance(key, str):
                raise ValueError(f"expected a section name at offset {pos}")
            pos = _skip_ws(text, pos)
            if not text.startswith(":", pos):
                raise ValueError(f"expected ':' at offset {pos}")
            start = _skip_ws(text, pos + 1)
            _, end = _DECODER.raw_decode(text, start)
            sections[key] = text[start:end]
            pos = _skip_ws(text, end)
            if text.startswith(",", pos):
                pos = _skip_ws(text, pos + 1)
                continue
            if text.startswith("}", pos):
                pos += 1
                break
            raise ValueError(f"expected ',' or '}}' at offset {pos}")

    if _skip_ws(text, pos) != len(text):
        raise ValueError(f"unexpected data after the document at offset {pos}")
    return sections


def render_sections(sections: Mapping[str, str]) -> str:
    """Join raw section texts back into a JSON object."""
    if not sections:
        return "{}\n"
    body = ",\n".join(
        f"  {json.dumps(key, ensure_ascii=False)}: {raw}" for key, raw in sections.items()
    )
    return "{\n" + body + "\n}\n"


class JsonDocumentStore(FileDocumentStore):
    """JSON document store that preserves other sections byte for byte."""

    format_name = "JSON document"

    def _parse(self, text: str) -> dict[str, Any]:
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DocumentUnreadableError(self.path, f"invalid JSON: {exc}", exc) from exc
        if not isinstance(document, dict):
            raise DocumentUnreadableError(self.path, "document root is not a JSON object")
        return document

    def _replace_section(
        self, text: str | None, name: str, values: Mapping[str, Any]
    ) -> str:
        sections: dict[str, str] = {}
        if text is not None:
            try:
                sections = split_sections(text)
            except ValueError as exc:
                raise DocumentUnreadableError(self.path, f"invalid JSON: {exc}", exc) from exc
        # Nested lines are shifted to sit under the two-space section indent
        serialized = json.dumps(dict(values), indent=2, ensure_ascii=False)
        sections[name] = serialized.replace("\n", "\n  ")
        return render_sections(sections)


# ── YAML ────────────────────────────────────────────────────────────────────
class YamlDocumentStore(FileDocumentStore):
    """YAML document store; other sections keep their values and order."""

    format_name = "YAML document"

    def _parse(self, text: str) -> dict[str, Any]:
        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise DocumentUnreadableError(self.path, f"invalid YAML: {exc}", exc) from exc
        if document is None:
            return {}
        if not isinstance(document, dict):
            raise DocumentUnreadableError(self.path, "document root is not a mapping")
        return document

    def _replace_section(
        self, text: str | None, name: str, values: Mapping[str, Any]
    ) -> str:
        document = self._parse(text) if text is not None else {}
        document[name] = dict(values)
        return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)


def open_store(path: Path | str) -> DocumentStore:
    """Pick a document store from the file suffix (JSON unless .yaml/.yml)."""
    path = Path(path)
    if path.suffix.lower() in YAML_SUFFIXES:
        return YamlDocumentStore(path)
    return JsonDocumentStore(path)
