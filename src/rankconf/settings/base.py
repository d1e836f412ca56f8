"""Base class for settings schemas resolved by the configuration processor."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict

S = TypeVar("S", bound="SectionSettings")


class SectionSettings(BaseModel):
    """A flat block of typed settings stored under one section of a document.

    Subclasses declare their fields with defaults and may set ``SECTION_NAME``.
    When it is left empty the class name is used, so ``class AppSettings``
    is stored under ``"AppSettings"``. Field aliases become the keys used in
    the persisted document.

    Every field must have a default: the processor builds fresh default
    instances with ``cls()``.
    """

    model_config = ConfigDict(populate_by_name=True)

    SECTION_NAME: ClassVar[str] = ""

    @classmethod
    def section_name(cls) -> str:
        """Name of the document section holding these settings."""
        return cls.SECTION_NAME or cls.__name__

    @classmethod
    def defaults(cls: type[S]) -> S:
        """Return a fresh instance holding the schema defaults."""
        return cls()

    @classmethod
    def field_attr(cls, name: str) -> str | None:
        """Map an attribute name or alias to the attribute name of a field."""
        for attr, info in cls.model_fields.items():
            if name == attr or name == info.alias:
                return attr
        return None

    @classmethod
    def field_key(cls, name: str) -> str | None:
        """Map an attribute name or alias to the document key for that field.

        Returns:
            The alias (or attribute name when no alias is set), or None if
            ``name`` does not identify a field.
        """
        attr = cls.field_attr(name)
        if attr is None:
            return None
        return cls.model_fields[attr].alias or attr

    @classmethod
    def field_names(cls) -> list[str]:
        """Attribute names of all fields in declaration order."""
        return list(cls.model_fields)

    def serialize(self) -> dict[str, Any]:
        """JSON-compatible mapping of document key to value."""
        return self.model_dump(mode="json", by_alias=True)

    def merged(self: S, values: Mapping[str, Any]) -> S:
        """Return a validated copy with ``values`` laid over this instance.

        Keys may be document keys or attribute names. Unknown keys are
        ignored.

        Raises:
            pydantic.ValidationError: If a value cannot be coerced
        """
        data = self.serialize()
        for name, value in values.items():
            key = self.field_key(name)
            if key is not None:
                data[key] = value
        return type(self).model_validate(data)

    def __str__(self) -> str:
        return ", ".join(f"{key}: {value}" for key, value in self.serialize().items())
